from datetime import timedelta
from typing import Tuple

from django.conf import settings
from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.permissions import IsAdminRole
from apps.api.schemas import ErrorResponseSerializer, envelope
from apps.api.utils import success_response
from apps.common import get_logger
from .container import build_reporting_service
from .serializers import (
    CategoryAnalyticsSerializer,
    DashboardSummarySerializer,
    DateRangeQuerySerializer,
    InventoryReportSerializer,
    SalesReportSerializer,
)

logger = get_logger(__name__).bind(component="reports", layer="view")

DATE_RANGE_PARAMS = [
    OpenApiParameter("startDate", str, description="ISO date (YYYY-MM-DD), inclusive"),
    OpenApiParameter("endDate", str, description="ISO date (YYYY-MM-DD), inclusive; defaults to today"),
]
ADMIN_ERRORS = {
    401: OpenApiResponse(response=ErrorResponseSerializer),
    403: OpenApiResponse(response=ErrorResponseSerializer),
}


def resolve_date_range(query_params, default_days: int) -> Tuple:
    """
    Parse `startDate`/`endDate`. Each missing bound defaults on its own:
    start to `default_days` before today, end to today.
    """
    serializer = DateRangeQuerySerializer(data=query_params)
    serializer.is_valid(raise_exception=True)
    today = timezone.localdate()
    start = serializer.validated_data.get("startDate") or today - timedelta(days=default_days)
    end = serializer.validated_data.get("endDate") or today
    return start, end


class ReportBaseView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]
    service = build_reporting_service()


@extend_schema(tags=["Reports"])
class SalesReportView(ReportBaseView):
    log = logger.bind(view="SalesReportView")

    @extend_schema(
        summary="Daily sales report",
        description="One row per calendar day in the range, including days without orders.",
        parameters=DATE_RANGE_PARAMS,
        responses={
            200: envelope(SalesReportSerializer, many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            **ADMIN_ERRORS,
        },
    )
    def get(self, request):
        start, end = resolve_date_range(request.query_params, settings.SALES_REPORT_DEFAULT_DAYS)
        self.log.debug("Handling sales report request", start=start, end=end)
        rows = self.service.sales_report(start, end)
        return success_response(SalesReportSerializer(rows, many=True).data, "Sales report generated")


@extend_schema(tags=["Reports"])
class InventoryReportView(ReportBaseView):
    @extend_schema(
        summary="Inventory report",
        responses={200: envelope(InventoryReportSerializer, many=True), **ADMIN_ERRORS},
    )
    def get(self, request):
        rows = self.service.inventory_report()
        return success_response(
            InventoryReportSerializer(rows, many=True).data, "Inventory report generated"
        )


@extend_schema(tags=["Reports"])
class LowStockAlertsView(ReportBaseView):
    @extend_schema(
        summary="Low stock alerts",
        responses={200: envelope(InventoryReportSerializer, many=True, name="LowStock"), **ADMIN_ERRORS},
    )
    def get(self, request):
        rows = self.service.low_stock_alerts()
        return success_response(
            InventoryReportSerializer(rows, many=True).data, "Low stock alerts retrieved"
        )


@extend_schema(tags=["Reports"])
class CategoryAnalyticsView(ReportBaseView):
    @extend_schema(
        summary="Category analytics",
        responses={200: envelope(CategoryAnalyticsSerializer, many=True), **ADMIN_ERRORS},
    )
    def get(self, request):
        rows = self.service.category_analytics()
        return success_response(
            CategoryAnalyticsSerializer(rows, many=True).data, "Category analytics retrieved"
        )


@extend_schema(tags=["Reports"])
class DashboardSummaryView(ReportBaseView):
    log = logger.bind(view="DashboardSummaryView")

    @extend_schema(
        summary="Dashboard summary",
        parameters=DATE_RANGE_PARAMS,
        responses={
            200: envelope(DashboardSummarySerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            **ADMIN_ERRORS,
        },
    )
    def get(self, request):
        start, end = resolve_date_range(
            request.query_params, settings.DASHBOARD_SUMMARY_DEFAULT_DAYS
        )
        self.log.debug("Handling dashboard summary request", start=start, end=end)
        summary = self.service.dashboard_summary(start, end)
        return success_response(DashboardSummarySerializer(summary).data, "Dashboard summary generated")
