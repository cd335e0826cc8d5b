"""
Enums shared by content documents, session state and page views
"""
from enum import Enum


class AppView(str, Enum):
    """Top-level pages of the learning hub"""
    HOME = "Home"
    COURSE_DETAIL = "CourseDetail"
    ARTICLE_VIEW = "ArticleView"
    ASSESSMENT_HOME = "AssessmentHome"
    ASSESSMENT_VIEW = "AssessmentView"
    BLOG_HOME = "BlogHome"
    BLOG_ARTICLE = "BlogArticleView"
    ADMIN_PANEL = "AdminPanel"


class AdminView(str, Enum):
    """Sub-views of the admin panel"""
    COURSES = "AdminCourses"
    ASSESSMENTS = "AdminAssessments"
    BLOGS = "AdminBlogs"
    USERS = "AdminUsers"


class LessonType(str, Enum):
    """Type of lesson content"""
    RICH_TEXT = "richText"
    EXTERNAL_DOC = "externalDoc"

    def is_external(self) -> bool:
        return self == LessonType.EXTERNAL_DOC


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class IconVariant(str, Enum):
    """Icons a course card can render; HELP_CIRCLE is the fallback"""
    ZAP = "Zap"
    MONITOR = "Monitor"
    HELP_CIRCLE = "HelpCircle"

    @classmethod
    def resolve(cls, name: str | None) -> "IconVariant":
        """Map a stored icon name to a variant, falling back to HELP_CIRCLE."""
        return _ICON_NAMES.get(name or "", cls.HELP_CIRCLE)


_ICON_NAMES = {
    "Zap": IconVariant.ZAP,
    "Monitor": IconVariant.MONITOR,
}
