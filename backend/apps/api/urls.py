from django.urls import path, include

urlpatterns = [
    path("products/", include("apps.catalog.urls")),
    path("cart/", include("apps.carts.urls")),
    path("reports/", include("apps.reports.urls")),
    path("admin/", include("apps.dashboard.urls")),
    path("auth/", include("apps.auth.urls")),
]
