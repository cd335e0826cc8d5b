"""
Tests for content documents and their stored form.

Run: python3 -m pytest tests/test_content_models.py -v
"""

from src.model.content import Assessment, Blog, Course, Lesson
from src.model.enums import IconVariant, LessonType
from src.utils.id_utils import generate_local_id


class TestDocuments:
    """Tests for reading and writing collection documents."""

    def test_to_document_uses_camel_case_without_id(self):
        """Test stored keys match the collection format."""
        doc = Course(id="c1", title="T", icon_name="Zap", is_published=True).to_document()

        assert "id" not in doc
        assert doc["iconName"] == "Zap"
        assert doc["isPublished"] is True
        assert doc["iconColor"] == "text-gray-500"

    def test_from_document_fills_defaults(self):
        """Test missing and null lists are read as empty lists."""
        course = Course.from_document("c1", {"title": "T", "sections": None})

        assert course.id == "c1"
        assert course.sections == []
        assert course.level == "Basic"

    def test_from_empty_document(self):
        """Test a document without data still reads."""
        assert Blog.from_document("b1", None).tags == []

    def test_null_options_dropped(self):
        """Test null entries in a question's options are removed."""
        assessment = Assessment.from_document(
            "a1", {"questions": [{"id": "q1", "text": "?", "options": ["A", None, "B"], "answer": "A"}]}
        )

        assert assessment.questions[0].options == ["A", "B"]

    def test_unknown_lesson_type_is_rich_text(self):
        """Test an unknown lesson type falls back to rich text."""
        assert Lesson(id="l1", type="video").type == LessonType.RICH_TEXT


class TestHelpers:
    """Tests for ids and icon resolution."""

    def test_local_ids_are_prefixed_and_increasing(self):
        """Test ids are <prefix>_<millis> and never repeat."""
        first = generate_local_id("q")
        second = generate_local_id("q")

        assert first.startswith("q_")
        assert int(second[2:]) > int(first[2:])

    def test_icon_resolution(self):
        """Test known names map to variants and anything else falls back."""
        assert IconVariant.resolve("Zap") == IconVariant.ZAP
        assert IconVariant.resolve("Monitor") == IconVariant.MONITOR
        assert IconVariant.resolve("Rocket") == IconVariant.HELP_CIRCLE
        assert IconVariant.resolve(None) == IconVariant.HELP_CIRCLE
