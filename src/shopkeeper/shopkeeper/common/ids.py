from __future__ import annotations

import uuid


def generate_id() -> str:
    """Short opaque record id (not semantically meaningful)."""
    return uuid.uuid4().hex[:12]
