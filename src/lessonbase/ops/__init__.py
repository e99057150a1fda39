"""
Operations layer for lessonbase.

Every function takes an :class:`~lessonbase.ops.context.OperationContext`
and returns an :class:`~lessonbase.ops.result.OperationResult`.  The CLI
handles only argument parsing and rendering; everything it does goes
through here.

Modules
-------
migrations    apply_migration / get_migration_files
content       get_content_summary / cleanup_content
admin         create_admin_user
"""

from lessonbase.ops.context import OperationContext
from lessonbase.ops.result import OperationError, OperationResult

__all__ = ["OperationContext", "OperationError", "OperationResult"]
