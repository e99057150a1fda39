"""
lessonbase - operator tooling for the lesson platform database.

- lessonbase.migrations: apply hand-written SQL migration files
- lessonbase.ops: operations returning OperationResult envelopes
- lessonbase.cli: ``lessonbase`` and ``run-migration`` commands
"""

__version__ = "0.1.0"
