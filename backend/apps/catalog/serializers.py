from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    stockQuantity = serializers.IntegerField(source="stock_quantity")
    category = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_blank=True)
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    stockQuantity = serializers.IntegerField(source="stock_quantity", min_value=0, required=False)
    category = serializers.CharField(max_length=100)
    imageUrl = serializers.CharField(source="image_url", required=False, allow_blank=True)
