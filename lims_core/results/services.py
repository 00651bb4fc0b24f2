# lims_core/results/services.py
from __future__ import annotations

from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound

from lims_core.profiles.selectors import get_profile_scoped_or_none
from lims_core.results.models import Result


class ResultService:
    """
    Result write paths. Results start "Pending" (no value, no result time).
    """

    @staticmethod
    @transaction.atomic
    def add_result(*, organisation_id: UUID, profile_id: UUID, sample_id: str, result_type: str) -> Result:
        profile = get_profile_scoped_or_none(organisation_id=organisation_id, profile_id=profile_id)
        if profile is None:
            raise NotFound("Profile not found.")

        return Result.objects.create(
            profile=profile,
            sample_id=sample_id,
            result_type=result_type,
        )
