"""
Core primitives for lessonbase: errors, logging, settings, engine factory
and ORM models.  Nothing here depends on the CLI or operations layers.
"""
