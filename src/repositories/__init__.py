"""
Repository package - Data access layer
"""

from src.repositories.base_repo import BaseRepository
from src.repositories.content_repo import AssessmentRepository, BlogRepository, CourseRepository

__all__ = [
    "BaseRepository",
    "CourseRepository",
    "AssessmentRepository",
    "BlogRepository",
]
