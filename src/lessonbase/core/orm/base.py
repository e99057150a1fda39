"""Declarative base and type-map for the lesson content models.

Uses SQLAlchemy 2.0 ``DeclarativeBase`` with a ``type_annotation_map``
that maps Python built-in types to portable SA column types, so the same
models work against the PostgreSQL production database and the SQLite
files used in tests.
"""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, Text
from sqlalchemy.orm import DeclarativeBase


class LessonbaseBase(DeclarativeBase):
    """Shared declarative base for every lesson content table.

    * ``str``   → ``Text``
    * ``int``   → ``Integer``
    * ``bool``  → ``Boolean``
    * ``datetime.datetime`` → ``DateTime``
    * ``list``  → ``JSON``    (``jsonb`` columns in the PostgreSQL DDL)
    """

    type_annotation_map = {
        str: Text,
        int: Integer,
        bool: Boolean,
        datetime.datetime: DateTime,
        list: JSON,
    }
