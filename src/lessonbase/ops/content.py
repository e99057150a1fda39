"""
Lesson content operations.

Inspect and clear the lesson → topic → subtopic → resource / quiz
hierarchy through the ORM models in :mod:`lessonbase.core.orm`.
"""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lessonbase.core.errors import DatabaseError
from lessonbase.core.logging import get_logger
from lessonbase.core.orm import (
    CONTENT_DELETE_ORDER,
    LessonTable,
    QuizQuestionTable,
    ResourceTable,
    SubtopicTable,
    TopicTable,
)
from lessonbase.ops.context import OperationContext
from lessonbase.ops.responses import (
    CleanupResult,
    ContentSummary,
    LessonRow,
    SubtopicRow,
    TopicRow,
)
from lessonbase.ops.result import OperationResult, start_timer

logger = get_logger(__name__)


def get_content_summary(ctx: OperationContext) -> OperationResult[ContentSummary]:
    """Return lessons, topics and subtopics, plus resource and quiz counts."""
    elapsed = start_timer()

    try:
        with Session(ctx.require_engine()) as session:
            lessons = [
                LessonRow(id=row.id, title=row.title, level=row.level)
                for row in session.scalars(select(LessonTable).order_by(LessonTable.id))
            ]
            topics = [
                TopicRow(id=row.id, title=row.title, lesson_id=row.lesson_id)
                for row in session.scalars(select(TopicTable).order_by(TopicTable.id))
            ]
            subtopics = [
                SubtopicRow(id=row.id, title=row.title, topic_id=row.topic_id)
                for row in session.scalars(select(SubtopicTable).order_by(SubtopicTable.id))
            ]
            resource_count = session.scalar(select(func.count()).select_from(ResourceTable))
            quiz_count = session.scalar(select(func.count()).select_from(QuizQuestionTable))
    except SQLAlchemyError as exc:
        logger.exception("op_failed", op="get_content_summary", error=str(exc))
        error = DatabaseError(f"Failed to read lesson content: {exc}", cause=exc)
        return OperationResult.from_error(error, elapsed_ms=elapsed())

    summary = ContentSummary(
        lessons=lessons,
        topics=topics,
        subtopics=subtopics,
        resource_count=resource_count or 0,
        quiz_question_count=quiz_count or 0,
    )
    return OperationResult.ok(summary, elapsed_ms=elapsed())


def cleanup_content(ctx: OperationContext) -> OperationResult[CleanupResult]:
    """Delete all lesson content, children first, in one transaction."""
    elapsed = start_timer()
    rows_deleted: dict[str, int] = {}

    try:
        with Session(ctx.require_engine()) as session, session.begin():
            for model in CONTENT_DELETE_ORDER:
                result = session.execute(delete(model))
                rows_deleted[model.__tablename__] = result.rowcount
    except SQLAlchemyError as exc:
        logger.exception("op_failed", op="cleanup_content", error=str(exc))
        error = DatabaseError(f"Failed to clean up lesson content: {exc}", cause=exc)
        return OperationResult.from_error(error, elapsed_ms=elapsed())

    logger.info("content_cleaned", request_id=ctx.request_id, **rows_deleted)
    return OperationResult.ok(CleanupResult(rows_deleted=rows_deleted), elapsed_ms=elapsed())
