# lims_core/results/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from lims_core.results.models import Result


def get_profile_result_or_none(*, organisation_id: UUID, profile_id: UUID, sample_id: str) -> Optional[Result]:
    """
    Single result by exact sample id, scoped to organisation + profile.
    """
    return (
        Result.objects.filter(
            profile_id=profile_id,
            profile__organisation_id=organisation_id,
            sample_id=sample_id,
        )
        .order_by("-activated_at", "-id")
        .first()
    )
