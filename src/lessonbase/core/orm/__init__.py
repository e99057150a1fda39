"""SQLAlchemy ORM layer for the lesson content tables.

Modules
-------
base      LessonbaseBase declarative base with the type map
tables    LessonTable, TopicTable, SubtopicTable, ResourceTable, QuizQuestionTable
"""

from lessonbase.core.orm.base import LessonbaseBase
from lessonbase.core.orm.tables import (
    CONTENT_DELETE_ORDER,
    LessonTable,
    QuizQuestionTable,
    ResourceTable,
    SubtopicTable,
    TopicTable,
)

__all__ = [
    "LessonbaseBase",
    "LessonTable",
    "TopicTable",
    "SubtopicTable",
    "ResourceTable",
    "QuizQuestionTable",
    "CONTENT_DELETE_ORDER",
]
