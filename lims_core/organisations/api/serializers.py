# lims_core/organisations/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from lims_core.organisations.models import Organisation


class OrganisationResourceSerializer(serializers.ModelSerializer):
    """
    JSON:API resource object: {type, id, attributes: {name}}.
    """
    type = serializers.SerializerMethodField()
    attributes = serializers.SerializerMethodField()

    class Meta:
        model = Organisation
        fields = ["type", "id", "attributes"]
        read_only_fields = fields

    def get_type(self, obj) -> str:
        return "organisation"

    def get_attributes(self, obj) -> dict:
        return {"name": obj.name}
