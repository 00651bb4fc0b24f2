# lims_core/profiles/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from lims_core.common.api.validators import require_uuid
from lims_core.organisations.selectors import require_organisation
from lims_core.profiles.api.serializers import ProfileCreateSerializer, profile_resource
from lims_core.profiles.services import ProfileService


class OrganisationProfilesView(APIView):
    """
    POST /org/<org>/profile/: register a patient profile in an organisation.
    """

    @extend_schema(tags=["Profiles"], operation_id="v1_org_profile_create", request=ProfileCreateSerializer)
    def post(self, request, org):
        organisation = require_organisation(organisation_id=require_uuid(org, "org"))

        ser = ProfileCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        profile = ProfileService.create_profile(
            organisation=organisation,
            name=ser.validated_data["data"]["attributes"]["name"],
        )
        return Response({"data": profile_resource(profile)}, status=status.HTTP_201_CREATED)
