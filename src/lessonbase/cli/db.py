"""
CLI: ``lessonbase db`` - lesson content inspection and cleanup.
"""

from __future__ import annotations

import json
from dataclasses import asdict

import typer

from lessonbase.cli.utils import cli_context, console, fail_if_error

app = typer.Typer(no_args_is_help=True)


@app.command()
def check(
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Show lessons, topics, subtopics and resource/quiz counts."""
    from lessonbase.ops.content import get_content_summary

    with cli_context() as ctx:
        result = get_content_summary(ctx)
    fail_if_error(result)

    summary = result.data
    if json_out:
        console.print_json(json.dumps(asdict(summary), default=str))
        return

    console.print(f"Lessons: {len(summary.lessons)}", highlight=False)
    for lesson in summary.lessons:
        console.print(f"- {lesson.id}: {lesson.title} ({lesson.level})", markup=False, highlight=False)

    console.print(f"\nTopics: {len(summary.topics)}", highlight=False)
    for topic in summary.topics:
        console.print(f"- {topic.id}: {topic.title} (Lesson {topic.lesson_id})", markup=False, highlight=False)

    console.print(f"\nSubtopics: {len(summary.subtopics)}", highlight=False)
    for subtopic in summary.subtopics:
        console.print(f"- {subtopic.id}: {subtopic.title} (Topic {subtopic.topic_id})", markup=False, highlight=False)

    console.print(f"\nResources: {summary.resource_count}", highlight=False)
    console.print(f"\nQuiz Questions: {summary.quiz_question_count}", highlight=False)


@app.command()
def cleanup(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Delete all lessons, topics, subtopics, resources and quiz questions."""
    from lessonbase.ops.content import cleanup_content

    if not yes:
        typer.confirm("Delete ALL lesson content?", abort=True)

    with cli_context() as ctx:
        result = cleanup_content(ctx)
    fail_if_error(result)

    cleaned = result.data
    if json_out:
        console.print_json(json.dumps(cleaned.rows_deleted))
        return

    for table, count in cleaned.rows_deleted.items():
        console.print(f"  [cyan]{table}[/cyan]: {count}")
    console.print(f"Cleanup completed successfully! ({cleaned.total} rows deleted)", highlight=False)
