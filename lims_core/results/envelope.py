# lims_core/results/envelope.py
from __future__ import annotations

from typing import Any, Iterable

from rest_framework import serializers

from lims_core.common.api.pagination import PageWindow
from lims_core.organisations.models import Organisation
from lims_core.results.models import Result

_timestamp = serializers.DateTimeField()


def _ref(type_: str, id_) -> dict[str, Any]:
    return {"data": {"type": type_, "id": str(id_)}}


def result_resource(result: Result) -> dict[str, Any]:
    return {
        "type": "result",
        "id": str(result.id),
        "attributes": {
            "sampleId": result.sample_id,
            "resultType": result.result_type,
            "result": result.result,
            "activateTime": _timestamp.to_representation(result.activated_at),
            "resultTime": _timestamp.to_representation(result.result_at),
        },
        "relationships": {
            "profile": _ref("profile", result.profile_id),
        },
    }


def included_resources(results: Iterable[Result], organisation: Organisation) -> list[dict[str, Any]]:
    """
    One entry per distinct profile (first-seen order), then the organisation.
    """
    out: list[dict[str, Any]] = []
    seen: set[str] = set()
    for r in results:
        pid = str(r.profile_id)
        if pid in seen:
            continue
        seen.add(pid)
        out.append(
            {
                "type": "profile",
                "id": pid,
                "attributes": {"name": r.profile.name},
                "relationships": {"organisation": _ref("organisation", organisation.id)},
            }
        )

    out.append(
        {
            "type": "organisation",
            "id": str(organisation.id),
            "attributes": {"name": organisation.name},
        }
    )
    return out


def build_envelope(
    results: list[Result],
    *,
    total: int,
    organisation: Organisation,
    window: PageWindow,
) -> dict[str, Any]:
    return {
        "data": [result_resource(r) for r in results],
        "included": included_resources(results, organisation),
        "meta": window.as_meta(total),
    }
