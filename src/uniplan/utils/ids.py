"""Identifier generation."""

import uuid


def generate_id() -> str:
    """Return a new opaque identifier for a semester or course."""
    return uuid.uuid4().hex
