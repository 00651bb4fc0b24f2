# lims_core/results/api/views.py
from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from lims_core.common.api.validators import require_uuid
from lims_core.results.api.serializers import SampleCreateSerializer, sample_resource
from lims_core.results.search import search
from lims_core.results.selectors import get_profile_result_or_none
from lims_core.results.services import ResultService

SEARCH_PARAMETERS = [
    OpenApiParameter("patientName", OpenApiTypes.STR, description="Case-insensitive substring of the patient name. When given, the other filters are ignored."),
    OpenApiParameter("sampleId", OpenApiTypes.STR, description="Substring of the sample barcode."),
    OpenApiParameter(
        "profileId",
        OpenApiTypes.STR,
        description="Full patient id (exact match) or a fragment of it. Aliases: patientId, filter[profileId].",
    ),
    OpenApiParameter("activationDate", OpenApiTypes.STR, description="Day the sample was activated. Unparseable values are ignored."),
    OpenApiParameter("resultDate", OpenApiTypes.STR, description="Day the result was recorded. Unparseable values are ignored."),
    OpenApiParameter("page[offset]", OpenApiTypes.INT, description="Default 0."),
    OpenApiParameter("page[limit]", OpenApiTypes.INT, description="Default 15, max 200."),
]


class OrganisationSamplesView(APIView):
    """
    GET /org/<org>/sample/: search results in an organisation.
    """

    @extend_schema(tags=["Results"], operation_id="v1_org_sample_search", parameters=SEARCH_PARAMETERS, responses={200: OpenApiTypes.OBJECT})
    def get(self, request, org):
        envelope = search(organisation_id=require_uuid(org, "org"), raw_params=request.query_params)
        return Response(envelope, status=status.HTTP_200_OK)


class ProfileSamplesView(APIView):
    """
    POST /org/<org>/profile/<profile_id>/sample/: register a new (pending) sample.
    """

    @extend_schema(tags=["Results"], operation_id="v1_org_profile_sample_create", request=SampleCreateSerializer)
    def post(self, request, org, profile_id):
        org_id = require_uuid(org, "org")
        pid = require_uuid(profile_id, "profileId")

        ser = SampleCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        attrs = ser.validated_data["data"]["attributes"]

        result = ResultService.add_result(
            organisation_id=org_id,
            profile_id=pid,
            sample_id=attrs["sampleId"],
            result_type=attrs["resultType"],
        )
        return Response({"data": sample_resource(result)}, status=status.HTTP_201_CREATED)


class ProfileSampleDetailView(APIView):
    """
    GET /org/<org>/profile/<profile_id>/sample/<sample_id>/
    """

    @extend_schema(tags=["Results"], operation_id="v1_org_profile_sample_retrieve", responses={200: OpenApiTypes.OBJECT})
    def get(self, request, org, profile_id, sample_id):
        result = get_profile_result_or_none(
            organisation_id=require_uuid(org, "org"),
            profile_id=require_uuid(profile_id, "profileId"),
            sample_id=sample_id,
        )
        if result is None:
            raise NotFound("Result not found.")
        return Response({"data": sample_resource(result)}, status=status.HTTP_200_OK)
