# lims_core/results/models.py
import uuid

from django.db import models

from lims_core.profiles.models import Profile


class ResultType(models.TextChoices):
    RTPCR = "rtpcr", "RT-PCR"
    ANTIGEN = "antigen", "Antigen"
    ANTIBODY = "antibody", "Antibody"
    RTLAMP = "rtlamp", "RT-LAMP"


class Result(models.Model):
    """
    One sample/test record for a profile.

    result is NULL until a value is recorded ("Pending"); result_at is set at the same time.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="results")

    # barcode as printed on the tube; free text, not unique
    sample_id = models.CharField(max_length=64)
    result_type = models.CharField(max_length=16, choices=ResultType.choices)
    result = models.CharField(max_length=64, blank=True, null=True)

    activated_at = models.DateTimeField(auto_now_add=True, db_index=True)
    result_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = "results_result"
        indexes = [
            models.Index(fields=["profile", "activated_at"], name="result_profile_activated_idx"),
            models.Index(fields=["sample_id"], name="result_sample_id_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.sample_id} ({self.result_type})"

    @property
    def result_type_display(self) -> str:
        if self.result_type in ResultType.values:
            return ResultType(self.result_type).label
        return "N/A"

    @property
    def result_display(self) -> str:
        return self.result or "Pending"
