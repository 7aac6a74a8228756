"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, date, datetime


def today() -> date:
    """Today's UTC calendar date."""
    return datetime.now(UTC).date()


def now_iso() -> str:
    """Current UTC time as standard ISO 8601."""
    return datetime.now(UTC).isoformat()
