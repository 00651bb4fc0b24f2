# lims_core/tests/helpers.py
from datetime import datetime, timezone as dt_timezone

from lims_core.results.models import Result


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=dt_timezone.utc)


def make_result(profile, sample_id, *, activated_at=None, result_at=None, result=None, result_type="rtpcr"):
    """
    activated_at is auto_now_add, so explicit values are written with update().
    """
    r = Result.objects.create(profile=profile, sample_id=sample_id, result_type=result_type, result=result)
    updates = {}
    if activated_at is not None:
        updates["activated_at"] = activated_at
    if result_at is not None:
        updates["result_at"] = result_at
    if updates:
        Result.objects.filter(id=r.id).update(**updates)
        r.refresh_from_db()
    return r


def ids(envelope):
    return [row["id"] for row in envelope["data"]]
