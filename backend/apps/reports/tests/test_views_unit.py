import types
import unittest
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import Mock, patch

from django.utils import timezone
from rest_framework.test import APIRequestFactory, force_authenticate

from apps.reports.dtos import CategoryAnalyticsDTO, DashboardSummaryDTO, SalesReportDTO
from apps.reports.views import (
    DashboardSummaryView,
    InventoryReportView,
    SalesReportView,
)


def make_user(role="ADMIN"):
    return types.SimpleNamespace(id=1, is_authenticated=True, role=role, is_superuser=False)


class ReportViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def call(self, view_cls, request, user):
        force_authenticate(request, user=user)
        return view_cls.as_view()(request)

    def test_sales_report_parses_dates(self):
        service_mock = Mock()
        service_mock.sales_report.return_value = [
            SalesReportDTO(date(2024, 1, 2), 2, Decimal("15.00"), 1, Decimal("7.50"))
        ]
        with patch.object(SalesReportView, "service", service_mock):
            request = self.factory.get(
                "/api/reports/sales/", {"startDate": "2024-01-01", "endDate": "2024-01-03"}
            )
            response = self.call(SalesReportView, request, make_user())
        self.assertEqual(response.status_code, 200)
        service_mock.sales_report.assert_called_once_with(date(2024, 1, 1), date(2024, 1, 3))
        row = response.data["data"][0]
        self.assertEqual(row["date"], "2024-01-02")
        self.assertEqual(row["averageOrderValue"], "7.50")

    def test_sales_report_defaults_to_last_30_days(self):
        service_mock = Mock()
        service_mock.sales_report.return_value = []
        with patch.object(SalesReportView, "service", service_mock):
            response = self.call(SalesReportView, self.factory.get("/api/reports/sales/"), make_user())
        self.assertEqual(response.status_code, 200)
        today = timezone.localdate()
        service_mock.sales_report.assert_called_once_with(today - timedelta(days=30), today)

    def test_malformed_date_is_validation_error(self):
        service_mock = Mock()
        with patch.object(SalesReportView, "service", service_mock):
            request = self.factory.get("/api/reports/sales/", {"startDate": "01/02/2024"})
            response = self.call(SalesReportView, request, make_user())
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service_mock.sales_report.assert_not_called()

    def test_customer_is_forbidden(self):
        service_mock = Mock()
        with patch.object(InventoryReportView, "service", service_mock):
            response = self.call(
                InventoryReportView, self.factory.get("/api/reports/inventory/"), make_user("CUSTOMER")
            )
        self.assertEqual(response.status_code, 403)
        service_mock.inventory_report.assert_not_called()

    def test_dashboard_summary_defaults_to_last_7_days(self):
        service_mock = Mock()
        service_mock.dashboard_summary.return_value = DashboardSummaryDTO(
            total_revenue=Decimal("0.00"),
            total_orders=0,
            total_customers=0,
            low_stock_count=0,
            total_products=0,
            top_category=None,
        )
        with patch.object(DashboardSummaryView, "service", service_mock):
            response = self.call(
                DashboardSummaryView, self.factory.get("/api/reports/dashboard-summary/"), make_user()
            )
        today = timezone.localdate()
        service_mock.dashboard_summary.assert_called_once_with(today - timedelta(days=7), today)
        self.assertIsNone(response.data["data"]["topCategory"])

    def test_dashboard_summary_serializes_top_category(self):
        service_mock = Mock()
        service_mock.dashboard_summary.return_value = DashboardSummaryDTO(
            total_revenue=Decimal("12.00"),
            total_orders=1,
            total_customers=1,
            low_stock_count=2,
            total_products=5,
            top_category=CategoryAnalyticsDTO("Books", 3, 0, Decimal("30.00"), Decimal("10.00"), 12),
        )
        with patch.object(DashboardSummaryView, "service", service_mock):
            response = self.call(
                DashboardSummaryView, self.factory.get("/api/reports/dashboard-summary/"), make_user()
            )
        top = response.data["data"]["topCategory"]
        self.assertEqual(top["category"], "Books")
        self.assertEqual(top["totalSales"], 0)

    def test_only_end_date_keeps_start_relative_to_today(self):
        service_mock = Mock()
        service_mock.sales_report.return_value = []
        with patch.object(SalesReportView, "service", service_mock), patch(
            "apps.reports.views.timezone.localdate", return_value=date(2024, 6, 15)
        ):
            response = self.call(
                SalesReportView,
                self.factory.get("/api/reports/sales/", {"endDate": "2024-06-01"}),
                make_user(),
            )
        self.assertEqual(response.status_code, 200)
        service_mock.sales_report.assert_called_once_with(date(2024, 5, 16), date(2024, 6, 1))
