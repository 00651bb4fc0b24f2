# lims_core/profiles/services.py
from __future__ import annotations

from django.db import transaction
from rest_framework.exceptions import ValidationError

from lims_core.organisations.models import Organisation
from lims_core.profiles.models import Profile


class ProfileService:
    """
    Profile mutations (write-model boundary).
    """

    @staticmethod
    @transaction.atomic
    def create_profile(*, organisation: Organisation, name: str) -> Profile:
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": "This field is required."})

        return Profile.objects.create(organisation=organisation, name=name)
