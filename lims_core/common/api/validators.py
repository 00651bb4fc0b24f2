# lims_core/common/api/validators.py
from __future__ import annotations

from uuid import UUID

from rest_framework.exceptions import ValidationError


def require_uuid(value, field: str) -> UUID:
    """
    Path identifiers must be canonical UUIDs; reject before any lookup runs.
    """
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        # DRF-friendly error shape
        raise ValidationError({field: f"{field} is not valid"})
