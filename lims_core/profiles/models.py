# lims_core/profiles/models.py
from django.db import models

from lims_core.common.models import UUIDModel
from lims_core.organisations.models import Organisation


class Profile(UUIDModel):
    """
    Patient record. Owned by exactly one organisation; created by the write
    paths and only read by the search core.
    """
    organisation = models.ForeignKey(Organisation, on_delete=models.PROTECT, related_name="profiles")
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "profiles_profile"
        indexes = [
            models.Index(fields=["organisation", "name"], name="profile_org_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
