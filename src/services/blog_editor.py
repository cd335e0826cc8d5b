"""
Blog draft editor. The draft is the whole blog record; there are no nested entities.
"""
from datetime import date
from typing import List

from src.model.content import Blog
from src.model.state import BlogEditorState
from src.utils.exceptions import ValidationException

EDITABLE_FIELDS = ("title", "author", "date", "content")


def parse_tags(text: str) -> List[str]:
    """'a, b ,c' -> ['a', 'b', 'c']; empty entries are dropped."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def start_create() -> BlogEditorState:
    return BlogEditorState(draft=Blog())


def start_edit(blog: Blog) -> BlogEditorState:
    return BlogEditorState(draft=blog.model_copy(deep=True))


def update_fields(editor: BlogEditorState, **fields) -> BlogEditorState:
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationException(f"Unknown blog fields: {', '.join(sorted(unknown))}")
    if "date" in fields:
        try:
            date.fromisoformat(fields["date"])
        except (TypeError, ValueError):
            raise ValidationException("Date must be an ISO calendar date (YYYY-MM-DD).")
    return BlogEditorState(draft=editor.draft.with_fields(**fields))


def set_tags_text(editor: BlogEditorState, text: str) -> BlogEditorState:
    return BlogEditorState(draft=editor.draft.model_copy(update={"tags": parse_tags(text)}, deep=True))


def prepare_commit(editor: BlogEditorState) -> Blog:
    return editor.draft.model_copy(deep=True)
