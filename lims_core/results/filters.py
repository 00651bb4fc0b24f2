# lims_core/results/filters.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import django_filters
from django.db.models import CharField, QuerySet, Value
from django.db.models.functions import Cast, Replace

from lims_core.organisations.models import Organisation
from lims_core.results.dates import normalize_day_or_none
from lims_core.results.identifiers import IdentifierMatch, classify_identifier
from lims_core.results.models import Result

# Accepted query keys per search field, in priority order.
PATIENT_NAME_KEYS = ("patientName", "filter[patientName]", "patient_name")
SAMPLE_ID_KEYS = ("sampleId", "filter[sampleId]", "sample_id")
PROFILE_ID_KEYS = ("profileId", "patientId", "filter[profileId]", "profile_id")
ACTIVATION_DATE_KEYS = ("activationDate", "activateTime", "filter[activationDate]", "activation_date")
RESULT_DATE_KEYS = ("resultDate", "resultTime", "filter[resultDate]", "result_date")
OFFSET_KEYS = ("page[offset]", "offset")
LIMIT_KEYS = ("page[limit]", "limit")

ORDERING = ("-activated_at", "-id")


def _first(params: Mapping[str, Any], keys: tuple[str, ...]) -> Optional[str]:
    for k in keys:
        v = params.get(k)
        if v is None:
            continue
        v = str(v).strip()
        if v:
            return v
    return None


@dataclass(frozen=True)
class SearchParams:
    patient_name: Optional[str] = None
    sample_id: Optional[str] = None
    profile_id: Optional[str] = None
    activation_date: Optional[str] = None
    result_date: Optional[str] = None
    offset: Optional[str] = None
    limit: Optional[str] = None

    @classmethod
    def from_query(cls, params: Mapping[str, Any] | None) -> "SearchParams":
        """
        Extracts search fields from a raw query mapping (QueryDict or dict).
        Blank values count as absent.
        """
        p = params or {}
        return cls(
            patient_name=_first(p, PATIENT_NAME_KEYS),
            sample_id=_first(p, SAMPLE_ID_KEYS),
            profile_id=_first(p, PROFILE_ID_KEYS),
            activation_date=_first(p, ACTIVATION_DATE_KEYS),
            result_date=_first(p, RESULT_DATE_KEYS),
            offset=_first(p, OFFSET_KEYS),
            limit=_first(p, LIMIT_KEYS),
        )

    def store_filter_data(self) -> dict[str, str]:
        data = {
            "sample_id": self.sample_id,
            "profile_id": self.profile_id,
            "activation_date": self.activation_date,
            "result_date": self.result_date,
        }
        return {k: v for k, v in data.items() if v}


def results_queryset(organisation: Organisation) -> QuerySet[Result]:
    """
    The one scoped query builder: Result -> Profile -> Organisation join,
    sorted newest activation first. Count, page and full fetch all start here.
    """
    return (
        Result.objects.select_related("profile")
        .filter(profile__organisation_id=organisation.id)
        .order_by(*ORDERING)
    )


class ResultFilter(django_filters.FilterSet):
    """
    Predicates the store can express precisely. Patient name is intentionally
    absent; it is matched in memory by the search engine.
    """
    sample_id = django_filters.CharFilter(field_name="sample_id", lookup_expr="icontains")
    profile_id = django_filters.CharFilter(method="filter_profile_id")
    activation_date = django_filters.CharFilter(method="filter_activation_date")
    result_date = django_filters.CharFilter(method="filter_result_date")

    class Meta:
        model = Result
        fields = ["sample_id", "profile_id", "activation_date", "result_date"]

    def filter_profile_id(self, queryset, name, value):
        if classify_identifier(value) is IdentifierMatch.EXACT:
            return queryset.filter(profile_id=value.lower())

        # Textual uuid form differs per backend (hyphenated or bare hex), so both
        # sides are compared without hyphens. The in-memory re-check is exact.
        return queryset.annotate(
            profile_id_text=Replace(Cast("profile_id", output_field=CharField()), Value("-"), Value("")),
        ).filter(profile_id_text__icontains=value.replace("-", ""))

    def filter_activation_date(self, queryset, name, value):
        day = normalize_day_or_none(value, field="activation date")
        if day is None:
            return queryset
        return queryset.filter(activated_at__date=day)

    def filter_result_date(self, queryset, name, value):
        day = normalize_day_or_none(value, field="result date")
        if day is None:
            return queryset
        return queryset.filter(result_at__date=day)


@dataclass(frozen=True)
class CompiledSearch:
    queryset: QuerySet[Result]
    scope_queryset: QuerySet[Result]
    name_pending: bool
    profile_pending: bool


def compile_search(organisation: Organisation, params: SearchParams) -> CompiledSearch:
    scoped = results_queryset(organisation)
    fs = ResultFilter(data=params.store_filter_data(), queryset=scoped)
    return CompiledSearch(
        queryset=fs.qs,
        scope_queryset=scoped,
        name_pending=bool(params.patient_name),
        profile_pending=bool(params.profile_id),
    )
