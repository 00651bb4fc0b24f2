# lims_core/common/api/pagination.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from django.conf import settings
from rest_framework.pagination import LimitOffsetPagination, _positive_int
from rest_framework.response import Response

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 15
MAX_PAGE_LIMIT = 200

# Largest offset that still fits a signed 64-bit LIMIT/OFFSET once a page is added.
BIGINT_MAX = 2**63 - 1


def _search_setting(name: str, default: int) -> int:
    return int(getattr(settings, "LIMS_SEARCH", {}).get(name, default))


class SearchPagination(LimitOffsetPagination):
    """
    page[offset] / page[limit] pagination rendered as {data, meta: {total, offset, limit}}.

    Bad input never fails the request:
      - offset: non-numeric / negative -> 0, larger than the store can address -> clamped
      - limit: non-numeric / negative / zero -> default (15)
      - limit above MAX_LIMIT is clamped
    """
    offset_query_param = "page[offset]"
    limit_query_param = "page[limit]"

    @property
    def default_limit(self) -> int:
        return _search_setting("DEFAULT_LIMIT", DEFAULT_LIMIT)

    @property
    def max_limit(self) -> int:
        return _search_setting("MAX_LIMIT", MAX_PAGE_LIMIT)

    @property
    def max_offset(self) -> int:
        return BIGINT_MAX - self.max_limit

    def parse_limit(self, raw: Any) -> int:
        try:
            return _positive_int(raw, strict=True, cutoff=self.max_limit)
        except (TypeError, ValueError):
            return self.default_limit

    def parse_offset(self, raw: Any) -> int:
        try:
            return _positive_int(raw, cutoff=self.max_offset)
        except (TypeError, ValueError):
            return DEFAULT_OFFSET

    def get_limit(self, request):
        return self.parse_limit(request.query_params.get(self.limit_query_param))

    def get_offset(self, request):
        return self.parse_offset(request.query_params.get(self.offset_query_param))

    def get_paginated_response(self, data):
        return Response({"data": data, "meta": {"total": self.count, "offset": self.offset, "limit": self.limit}})

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "data": schema,
                "meta": {
                    "type": "object",
                    "properties": {
                        "total": {"type": "integer"},
                        "offset": {"type": "integer"},
                        "limit": {"type": "integer"},
                    },
                },
            },
        }


def paginate(request, queryset, serializer_class, *, paginator: SearchPagination | None = None) -> Response:
    """
    Shared pagination helper: {data, meta: {total, offset, limit}}.
    """
    p = paginator or SearchPagination()
    page = p.paginate_queryset(queryset, request)
    return p.get_paginated_response(serializer_class(page, many=True).data)


@dataclass(frozen=True)
class PageWindow:
    """
    Validated (offset, limit) pair for callers that do not page a queryset
    directly. Parsing follows SearchPagination.
    """
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_raw(cls, offset: Any = None, limit: Any = None) -> "PageWindow":
        p = SearchPagination()
        return cls(offset=p.parse_offset(offset), limit=p.parse_limit(limit))

    @property
    def stop(self) -> int:
        return self.offset + self.limit

    def slice(self, seq: Sequence) -> Sequence:
        return seq[self.offset:self.stop]

    def as_meta(self, total: int) -> dict[str, int]:
        return {"total": total, "offset": self.offset, "limit": self.limit}
