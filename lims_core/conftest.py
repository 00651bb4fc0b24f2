# lims_core/conftest.py
import uuid

import pytest
from rest_framework.test import APIClient

from lims_core.organisations.models import Organisation
from lims_core.profiles.models import Profile
from lims_core.tests.helpers import make_result, utc

P1_ID = uuid.UUID("aaaaaaaa-1111-4111-8111-000000000001")
P2_ID = uuid.UUID("bbbbbbbb-2222-4222-8222-000000000002")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def organisation(db):
    return Organisation.objects.create(name="Circle")


@pytest.fixture
def other_organisation(db):
    return Organisation.objects.create(name="Square")


@pytest.fixture
def jane(organisation):
    return Profile.objects.create(id=P1_ID, organisation=organisation, name="Jane Doe")


@pytest.fixture
def john(organisation):
    return Profile.objects.create(id=P2_ID, organisation=organisation, name="John Doe")


@pytest.fixture
def r1(jane):
    return make_result(
        jane,
        "S-001",
        activated_at=utc(2024, 5, 1, 10, 0),
        result_at=utc(2024, 5, 3, 9, 30),
        result="negative",
    )


@pytest.fixture
def r2(john):
    return make_result(john, "S-002", activated_at=utc(2024, 5, 2, 8, 0), result_type="antigen")


@pytest.fixture
def outsider(other_organisation):
    """
    Same name fragment and sample prefix as the main organisation, different tenant.
    """
    p = Profile.objects.create(organisation=other_organisation, name="Jane Outsider")
    make_result(p, "S-003", activated_at=utc(2024, 5, 1, 11, 0))
    return p
