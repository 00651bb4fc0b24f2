# lims_core/organisations/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from lims_core.common.api.exceptions import InvalidScope
from lims_core.organisations.models import Organisation


def organisation_qs() -> QuerySet[Organisation]:
    return Organisation.objects.all()


def get_organisation_or_none(*, organisation_id: UUID) -> Optional[Organisation]:
    return Organisation.objects.filter(id=organisation_id).first()


def require_organisation(*, organisation_id: UUID) -> Organisation:
    """
    Resolves the organisation scope for a request.
    Raises InvalidScope (404) when it does not exist.
    """
    org = get_organisation_or_none(organisation_id=organisation_id)
    if org is None:
        raise InvalidScope()
    return org
