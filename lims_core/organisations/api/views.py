# lims_core/organisations/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets

from lims_core.common.api.pagination import SearchPagination, paginate
from lims_core.organisations.api.serializers import OrganisationResourceSerializer
from lims_core.organisations.models import Organisation
from lims_core.organisations.selectors import organisation_qs


@extend_schema_view(
    list=extend_schema(tags=["Organisations"], operation_id="v1_org_list"),
)
class OrganisationViewSet(viewsets.GenericViewSet):
    """
    Read-only organisation lookup used to populate the organisation selector.
    """

    serializer_class = OrganisationResourceSerializer
    pagination_class = SearchPagination
    queryset = Organisation.objects.none()

    def list(self, request):
        qs = organisation_qs().order_by("name", "id")
        return paginate(request, qs, OrganisationResourceSerializer, paginator=self.paginator)
