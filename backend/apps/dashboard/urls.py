from django.urls import path
from apps.auth.views import AdminLoginView
from .views import (
    AdminProductCreateView,
    AdminProductDetailView,
    DashboardStatsView,
    NewProductsView,
    PopularProductsView,
    TrackProductView,
)

urlpatterns = [
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("dashboard/stats/", DashboardStatsView.as_view(), name="admin-dashboard-stats"),
    path("analytics/popular/", PopularProductsView.as_view(), name="admin-analytics-popular"),
    path("analytics/new-products/", NewProductsView.as_view(), name="admin-analytics-new-products"),
    path("track-view/<int:product_id>/", TrackProductView.as_view(), name="admin-track-view"),
    path("products/", AdminProductCreateView.as_view(), name="admin-products-create"),
    path("products/<int:product_id>/", AdminProductDetailView.as_view(), name="admin-products-detail"),
]
