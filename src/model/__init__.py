"""
Model package - Content documents, session state and enums
"""
from src.model.enums import AdminView, AppView, IconVariant, LessonType, NotificationType
from src.model.content import Assessment, Blog, Course, Document, Lesson, Question, Section
from src.model.state import (
    AppState,
    AssessmentEditorState,
    BlogEditorState,
    CourseEditorState,
    LessonForm,
    Notification,
    QuestionForm,
    QuizState,
    SectionTitleEdit,
)

__all__ = [
    # Enums
    'AdminView',
    'AppView',
    'IconVariant',
    'LessonType',
    'NotificationType',
    # Content documents
    'Document',
    'Course',
    'Section',
    'Lesson',
    'Assessment',
    'Question',
    'Blog',
    # Session state
    'AppState',
    'Notification',
    'CourseEditorState',
    'SectionTitleEdit',
    'LessonForm',
    'AssessmentEditorState',
    'QuestionForm',
    'BlogEditorState',
    'QuizState',
]
