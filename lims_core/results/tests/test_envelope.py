import pytest

from lims_core.common.api.pagination import PageWindow
from lims_core.results.envelope import build_envelope
from lims_core.tests.helpers import make_result

pytestmark = pytest.mark.django_db


def test_envelope_shape(organisation, r1, r2):
    env = build_envelope([r2, r1], total=2, organisation=organisation, window=PageWindow.from_raw())

    first = env["data"][0]
    assert first["type"] == "result"
    assert first["id"] == str(r2.id)
    assert first["attributes"]["sampleId"] == "S-002"
    assert first["attributes"]["resultType"] == "antigen"
    assert first["attributes"]["result"] is None
    assert first["attributes"]["resultTime"] is None
    assert first["attributes"]["activateTime"].startswith("2024-05-02T08:00:00")
    assert first["relationships"] == {"profile": {"data": {"type": "profile", "id": str(r2.profile_id)}}}

    assert env["included"][-1] == {
        "type": "organisation",
        "id": str(organisation.id),
        "attributes": {"name": "Circle"},
    }
    assert env["meta"] == {"total": 2, "offset": 0, "limit": 15}


def test_included_profiles_are_deduplicated(organisation, jane, r1):
    again = make_result(jane, "S-010")

    env = build_envelope([again, r1], total=2, organisation=organisation, window=PageWindow.from_raw())

    profiles = [i for i in env["included"] if i["type"] == "profile"]
    assert len(profiles) == 1
    assert profiles[0]["attributes"] == {"name": "Jane Doe"}
    assert profiles[0]["relationships"]["organisation"]["data"] == {"type": "organisation", "id": str(organisation.id)}


def test_empty_page_still_carries_organisation(organisation):
    env = build_envelope([], total=0, organisation=organisation, window=PageWindow.from_raw("5", "5"))

    assert env["data"] == []
    assert [i["type"] for i in env["included"]] == ["organisation"]
    assert env["meta"] == {"total": 0, "offset": 5, "limit": 5}
