import pytest
from django.db import DatabaseError

from lims_core.common.api.exceptions import RetrievalFailure
from lims_core.common.api.pagination import PageWindow
from lims_core.results.filters import CompiledSearch, SearchParams, compile_search
from lims_core.results.search import run_search


class BrokenQuerySet:
    def count(self):
        raise DatabaseError("connection lost")

    def __getitem__(self, item):
        raise DatabaseError("connection lost")

    def __iter__(self):
        raise DatabaseError("connection lost")

    def order_by(self, *fields):
        return self

    def values_list(self, *fields, **kwargs):
        return self

    def distinct(self):
        return self


@pytest.mark.parametrize("params", [SearchParams(), SearchParams(patient_name="doe"), SearchParams(profile_id="abc")])
def test_store_errors_become_retrieval_failure(params):
    compiled = CompiledSearch(
        queryset=BrokenQuerySet(),
        scope_queryset=BrokenQuerySet(),
        name_pending=bool(params.patient_name),
        profile_pending=bool(params.profile_id),
    )
    with pytest.raises(RetrievalFailure):
        run_search(compiled, params, PageWindow.from_raw())


def test_alias_extraction_prefers_first_key_and_ignores_blanks():
    params = SearchParams.from_query(
        {
            "patientName": "  ",
            "filter[patientName]": " Jane ",
            "profileId": "",
            "patientId": "abc",
            "activateTime": "2024-05-01",
            "page[offset]": "30",
            "limit": "10",
        }
    )
    assert params.patient_name == "Jane"
    assert params.profile_id == "abc"
    assert params.activation_date == "2024-05-01"
    assert params.result_date is None
    assert (params.offset, params.limit) == ("30", "10")
    assert params.store_filter_data() == {"profile_id": "abc", "activation_date": "2024-05-01"}


@pytest.mark.django_db
def test_compile_flags_pending_memory_filters(organisation):
    compiled = compile_search(organisation, SearchParams(patient_name="doe", sample_id="S"))
    assert compiled.name_pending is True
    assert compiled.profile_pending is False

    compiled = compile_search(organisation, SearchParams(profile_id="aaaa"))
    assert compiled.name_pending is False
    assert compiled.profile_pending is True


@pytest.mark.django_db
def test_compiled_query_is_scoped_and_ordered(organisation):
    compiled = compile_search(organisation, SearchParams())
    sql = str(compiled.queryset.query)
    assert "organisation_id" in sql
    assert compiled.queryset.query.order_by == ("-activated_at", "-id")


@pytest.mark.django_db
def test_name_scan_ignores_store_predicates(organisation, r1, r2):
    params = SearchParams(patient_name="jane", sample_id="S-002", activation_date="2024-05-02")
    page = run_search(compile_search(organisation, params), params, PageWindow.from_raw())
    assert [r.id for r in page.results] == [r1.id]
    assert page.total == 1


@pytest.mark.django_db
def test_profile_recheck_narrows_store_superset(organisation, jane, r1, r2):
    params = SearchParams(profile_id="1-4111")
    # unfiltered queryset stands in for a store that matched too broadly
    unfiltered = compile_search(organisation, SearchParams())
    compiled = CompiledSearch(
        queryset=unfiltered.queryset,
        scope_queryset=unfiltered.scope_queryset,
        name_pending=False,
        profile_pending=True,
    )
    page = run_search(compiled, params, PageWindow.from_raw("0", "1"))
    assert [r.id for r in page.results] == [r1.id]
    assert page.total == 1
