from rest_framework import serializers


class DateRangeQuerySerializer(serializers.Serializer):
    startDate = serializers.DateField(required=False, input_formats=["iso-8601"])
    endDate = serializers.DateField(required=False, input_formats=["iso-8601"])


class SalesReportSerializer(serializers.Serializer):
    date = serializers.DateField()
    totalOrders = serializers.IntegerField(source="total_orders")
    totalRevenue = serializers.DecimalField(source="total_revenue", max_digits=14, decimal_places=2)
    totalCustomers = serializers.IntegerField(source="total_customers")
    averageOrderValue = serializers.DecimalField(
        source="average_order_value", max_digits=14, decimal_places=2
    )


class InventoryReportSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id")
    productName = serializers.CharField(source="name")
    category = serializers.CharField()
    stockQuantity = serializers.IntegerField(source="stock_quantity")
    lowStockThreshold = serializers.IntegerField(source="threshold")
    isLowStock = serializers.BooleanField(source="is_low_stock")
    totalValue = serializers.DecimalField(source="total_value", max_digits=14, decimal_places=2)


class CategoryAnalyticsSerializer(serializers.Serializer):
    category = serializers.CharField()
    totalProducts = serializers.IntegerField(source="total_products")
    totalSales = serializers.IntegerField(source="total_sales_count")
    totalRevenue = serializers.DecimalField(source="total_revenue", max_digits=14, decimal_places=2)
    averagePrice = serializers.DecimalField(source="average_price", max_digits=12, decimal_places=2)
    totalStock = serializers.IntegerField(source="total_stock")


class DashboardSummarySerializer(serializers.Serializer):
    totalRevenue = serializers.DecimalField(source="total_revenue", max_digits=14, decimal_places=2)
    totalOrders = serializers.IntegerField(source="total_orders")
    totalCustomers = serializers.IntegerField(source="total_customers")
    lowStockCount = serializers.IntegerField(source="low_stock_count")
    totalProducts = serializers.IntegerField(source="total_products")
    topCategory = CategoryAnalyticsSerializer(source="top_category", allow_null=True)
