# lims_core/results/search.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping
from uuid import UUID

from django.db import DatabaseError
from django.db.models import QuerySet

from lims_core.common.api.exceptions import RetrievalFailure
from lims_core.common.api.pagination import PageWindow
from lims_core.organisations.selectors import require_organisation
from lims_core.results.envelope import build_envelope
from lims_core.results.filters import CompiledSearch, SearchParams, compile_search
from lims_core.results.identifiers import identifier_matches
from lims_core.results.models import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPage:
    results: list[Result]
    total: int


def _name_matches(result: Result, term: str) -> bool:
    name = result.profile.name or ""
    return term.lower() in name.lower()


def _name_scan(compiled: CompiledSearch, params: SearchParams, window: PageWindow) -> SearchPage:
    """
    Fetches every result of the organisation (no LIMIT, no other predicates)
    and keeps those whose patient name contains the term.
    Cost grows with the organisation's result count.
    """
    try:
        rows = list(compiled.scope_queryset)
    except DatabaseError as e:
        logger.exception("Full result fetch failed")
        raise RetrievalFailure() from e

    matched = [r for r in rows if _name_matches(r, params.patient_name)]
    logger.info("Name filter scanned %d results, %d matched", len(rows), len(matched))
    return SearchPage(results=list(window.slice(matched)), total=len(matched))


def _recheck_profile_ids(qs: QuerySet[Result], query: str) -> QuerySet[Result]:
    """
    Applies the in-memory identifier rule to every profile the store matched.
    Profiles the rule rejects are dropped from the query, so count and pages
    both follow the in-memory rule.
    """
    candidates = set(qs.order_by().values_list("profile_id", flat=True).distinct())
    agreed = {pid for pid in candidates if identifier_matches(pid, query)}
    if agreed == candidates:
        return qs

    logger.warning(
        "Store matched %d/%d profiles that fail the profile id rule for %r; narrowing",
        len(candidates) - len(agreed),
        len(candidates),
        query,
    )
    return qs.filter(profile_id__in=agreed)


def run_search(compiled: CompiledSearch, params: SearchParams, window: PageWindow) -> SearchPage:
    """
    Executes a compiled search and reconciles store filtering with the in-memory rules.

    - name filter: answered by a scan of the whole organisation; it supersedes
      every other filter
    - profile id filter: the store's candidate profiles are re-checked and the
      query is narrowed to the ones the in-memory rule accepts
    - otherwise: store count + store page
    """
    if compiled.name_pending:
        return _name_scan(compiled, params, window)

    qs = compiled.queryset
    try:
        if compiled.profile_pending:
            qs = _recheck_profile_ids(qs, params.profile_id)
        total = qs.count()
        page = list(qs[window.offset:window.stop])
    except DatabaseError as e:
        logger.exception("Result query failed")
        raise RetrievalFailure() from e

    return SearchPage(results=page, total=total)


def search(*, organisation_id: UUID, raw_params: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Organisation-scoped result search.

    Returns the envelope {data, included, meta}. Raises InvalidScope when the
    organisation does not exist and RetrievalFailure when the store fails.
    """
    try:
        organisation = require_organisation(organisation_id=organisation_id)
    except DatabaseError as e:
        logger.exception("Organisation lookup failed")
        raise RetrievalFailure() from e

    params = SearchParams.from_query(raw_params)
    window = PageWindow.from_raw(params.offset, params.limit)

    compiled = compile_search(organisation, params)
    page = run_search(compiled, params, window)

    return build_envelope(page.results, total=page.total, organisation=organisation, window=window)
