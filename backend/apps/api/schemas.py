from typing import Optional

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    message = serializers.CharField()
    error = ErrorDetailSerializer()


def envelope(data_serializer, *, many: bool = False, name: Optional[str] = None):
    """Build the `{success, message, data}` response schema around a payload serializer."""
    base = name or getattr(data_serializer, "__name__", "Payload")
    suffix = "List" if many else ""
    return inline_serializer(
        name=f"{base}{suffix}Envelope",
        fields={
            "success": serializers.BooleanField(),
            "message": serializers.CharField(),
            "data": data_serializer(many=many),
        },
    )


class MessageEnvelopeSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
