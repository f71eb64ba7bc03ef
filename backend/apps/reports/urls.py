from django.urls import path
from .views import (
    CategoryAnalyticsView,
    DashboardSummaryView,
    InventoryReportView,
    LowStockAlertsView,
    SalesReportView,
)

urlpatterns = [
    path("sales/", SalesReportView.as_view(), name="api-reports-sales"),
    path("inventory/", InventoryReportView.as_view(), name="api-reports-inventory"),
    path("inventory/low-stock/", LowStockAlertsView.as_view(), name="api-reports-low-stock"),
    path(
        "analytics/category/",
        CategoryAnalyticsView.as_view(),
        name="api-reports-category-analytics",
    ),
    path(
        "dashboard-summary/",
        DashboardSummaryView.as_view(),
        name="api-reports-dashboard-summary",
    ),
]
