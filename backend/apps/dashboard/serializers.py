from rest_framework import serializers


class DashboardStatsSerializer(serializers.Serializer):
    totalProducts = serializers.IntegerField(source="total_products")
    totalUsers = serializers.IntegerField(source="total_users")
    totalOrders = serializers.IntegerField(source="total_orders")
    todayOrders = serializers.IntegerField(source="today_orders")
    totalRevenue = serializers.DecimalField(source="total_revenue", max_digits=14, decimal_places=2)
    todayRevenue = serializers.DecimalField(source="today_revenue", max_digits=14, decimal_places=2)
    lowStockProducts = serializers.IntegerField(source="low_stock_products")
    outOfStockProducts = serializers.IntegerField(source="out_of_stock_products")


class PopularProductSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    category = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_blank=True)
    viewCount = serializers.IntegerField(source="view_count")
    salesCount = serializers.IntegerField(source="sales_count")
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)


class TrackViewQuerySerializer(serializers.Serializer):
    userId = serializers.IntegerField(required=False)
