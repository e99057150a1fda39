"""
Typed request objects for operations.

Each dataclass represents the *input* contract for a single operation
function.  Requests carry only validated, transport-agnostic data.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MigrationRequest:
    """Request for :func:`lessonbase.ops.migrations.apply_migration`.

    ``filename=None`` means the configured default migration.
    """

    filename: str | None = None


@dataclass(frozen=True, slots=True)
class AdminSeedRequest:
    """Request for :func:`lessonbase.ops.admin.create_admin_user`.

    Attributes:
        username: Admin login name.
        password: Admin password sent to ``/api/register`` / ``/api/login``.
        name: Display name.
        email: Contact address.
        base_url: API base URL; ``None`` → ``settings.api_base_url``.
        output_path: Where to write the user JSON; ``None`` →
            ``settings.admin_info_path``.
    """

    username: str = "admin"
    password: str = "admin123"
    name: str = "Admin User"
    email: str = "admin@example.com"
    base_url: str | None = None
    output_path: Path | None = None
