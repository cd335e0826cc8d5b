"""
Tests for the blog draft editor.

Run: python3 -m pytest tests/test_blog_editor.py -v
"""

from datetime import date

import pytest

from src.services import blog_editor
from src.utils.exceptions import ValidationException


class TestBlogEditor:
    """Tests for blog drafts."""

    def test_start_create_defaults(self):
        """Test a new blog post defaults."""
        draft = blog_editor.start_create().draft

        assert draft.author == "Admin"
        assert draft.content == "<p></p>"
        assert draft.date == date.today().isoformat()
        assert draft.tags == []

    def test_parse_tags(self):
        """Test tags are split on commas and trimmed."""
        assert blog_editor.parse_tags("a, b ,c") == ["a", "b", "c"]

    def test_parse_tags_drops_empty_entries(self):
        """Test empty entries between commas are dropped."""
        assert blog_editor.parse_tags("a,, ,b,") == ["a", "b"]

    def test_set_tags_text(self, blog):
        """Test tags on the draft only."""
        editor = blog_editor.set_tags_text(blog_editor.start_edit(blog), "python, release")

        assert editor.draft.tags == ["python", "release"]
        assert blog.tags == ["news"]

    def test_update_fields(self, blog):
        """Test fields are applied to the draft."""
        editor = blog_editor.update_fields(blog_editor.start_edit(blog), title="Hello", date="2024-06-01")

        assert editor.draft.title == "Hello"
        assert editor.draft.date == "2024-06-01"
        assert editor.draft.id == "b1"

    def test_invalid_date_rejected(self, blog):
        """Test the date must be an ISO calendar date."""
        with pytest.raises(ValidationException):
            blog_editor.update_fields(blog_editor.start_edit(blog), date="01/06/2024")

    def test_unknown_field_rejected(self, blog):
        """Test only editable fields can be set."""
        with pytest.raises(ValidationException):
            blog_editor.update_fields(blog_editor.start_edit(blog), id="other")
