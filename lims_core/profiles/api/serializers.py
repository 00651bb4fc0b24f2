# lims_core/profiles/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class ProfileAttributesSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class ProfileDataSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=["profile"])
    attributes = ProfileAttributesSerializer()


class ProfileCreateSerializer(serializers.Serializer):
    """
    Request body: {"data": {"type": "profile", "attributes": {"name": "..."}}}
    """
    data = ProfileDataSerializer()


def profile_resource(profile) -> dict:
    return {
        "type": "profile",
        "id": str(profile.id),
        "attributes": {"name": profile.name},
        "relationships": {
            "organisation": {
                "data": {"type": "organisation", "id": str(profile.organisation_id)},
            },
        },
    }
