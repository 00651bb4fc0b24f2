# lims_core/results/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from lims_core.results.models import Result


class SampleAttributesSerializer(serializers.Serializer):
    sampleId = serializers.CharField(max_length=64)
    resultType = serializers.CharField(max_length=16)


class SampleDataSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=["sample"])
    attributes = SampleAttributesSerializer()


class SampleCreateSerializer(serializers.Serializer):
    """
    Request body: {"data": {"type": "sample", "attributes": {"sampleId", "resultType"}}}
    """
    data = SampleDataSerializer()


class SampleAttributesOutSerializer(serializers.ModelSerializer):
    sampleId = serializers.CharField(source="sample_id")
    resultType = serializers.CharField(source="result_type")
    activateTime = serializers.DateTimeField(source="activated_at")
    resultTime = serializers.DateTimeField(source="result_at")

    class Meta:
        model = Result
        fields = ["result", "sampleId", "resultType", "activateTime", "resultTime"]
        read_only_fields = fields


def sample_resource(result: Result) -> dict:
    return {
        "id": str(result.id),
        "type": "sample",
        "attributes": SampleAttributesOutSerializer(result).data,
    }
