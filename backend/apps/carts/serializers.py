from rest_framework import serializers


class CartItemReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    productId = serializers.IntegerField(source="product_id")
    productName = serializers.CharField(source="product_name")
    quantity = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)


class CartReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    userId = serializers.IntegerField(source="user_id")
    items = CartItemReadSerializer(many=True)
    totalItems = serializers.IntegerField(source="total_items")
    totalAmount = serializers.DecimalField(source="total_amount", max_digits=12, decimal_places=2)


_PRODUCT_ID_ERRORS = {
    "required": "Product ID is required",
    "null": "Product ID is required",
}
_QUANTITY_ERRORS = {
    "required": "Valid quantity is required",
    "null": "Valid quantity is required",
    "invalid": "Valid quantity is required",
    "min_value": "Valid quantity is required",
}


class CartAddItemSerializer(serializers.Serializer):
    productId = serializers.IntegerField(error_messages=_PRODUCT_ID_ERRORS)
    quantity = serializers.IntegerField(min_value=1, error_messages=_QUANTITY_ERRORS)


class CartUpdateItemSerializer(serializers.Serializer):
    productId = serializers.IntegerField(error_messages=_PRODUCT_ID_ERRORS)
    # zero removes the line
    quantity = serializers.IntegerField(min_value=0, error_messages=_QUANTITY_ERRORS)
