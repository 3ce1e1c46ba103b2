"""Scheduled tasks."""

from jobs.tasks.session_cleanup import cleanup_expired_sessions

__all__ = ["cleanup_expired_sessions"]
