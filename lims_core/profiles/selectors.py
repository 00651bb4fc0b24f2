# lims_core/profiles/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from lims_core.profiles.models import Profile


def get_profile_scoped_or_none(*, organisation_id: UUID, profile_id: UUID) -> Optional[Profile]:
    """
    Profile lookup constrained by its owning organisation (join, never post-filter).
    """
    return (
        Profile.objects.select_related("organisation")
        .filter(id=profile_id, organisation_id=organisation_id)
        .first()
    )
