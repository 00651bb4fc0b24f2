# lims_core/organisations/models.py
from django.db import models

from lims_core.common.models import UUIDModel


class Organisation(UUIDModel):
    """
    Tenant boundary. Every profile (and through it every result) belongs to
    exactly one organisation; all read paths are scoped by it.
    """
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "organisations_organisation"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="org_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name
