from typing import Optional

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.exceptions import ApplicationError
from apps.api.permissions import IsAdminRole
from apps.api.schemas import ErrorResponseSerializer, MessageEnvelopeSerializer, envelope
from apps.api.utils import success_response
from apps.catalog.container import build_product_service
from apps.catalog.serializers import ProductReadSerializer, ProductWriteSerializer
from apps.common import get_logger
from .container import build_admin_dashboard_service
from .serializers import (
    DashboardStatsSerializer,
    PopularProductSerializer,
    TrackViewQuerySerializer,
)

logger = get_logger(__name__).bind(component="dashboard", layer="view")

ADMIN_ERRORS = {
    401: OpenApiResponse(response=ErrorResponseSerializer),
    403: OpenApiResponse(response=ErrorResponseSerializer),
}
PRODUCT_ID_PARAM = OpenApiParameter("product_id", int, OpenApiParameter.PATH)


def client_ip(request) -> Optional[str]:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


class AdminBaseView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]
    service = build_admin_dashboard_service()


@extend_schema(tags=["Admin"])
class DashboardStatsView(AdminBaseView):
    @extend_schema(
        summary="Dashboard statistics",
        responses={200: envelope(DashboardStatsSerializer), **ADMIN_ERRORS},
    )
    def get(self, request):
        stats = self.service.dashboard_stats()
        return success_response(DashboardStatsSerializer(stats).data, "Dashboard statistics retrieved")


@extend_schema(tags=["Admin"])
class PopularProductsView(AdminBaseView):
    @extend_schema(
        summary="Most viewed products this week",
        responses={200: envelope(PopularProductSerializer, many=True), **ADMIN_ERRORS},
    )
    def get(self, request):
        products = self.service.weekly_popular_products()
        return success_response(
            PopularProductSerializer(products, many=True).data, "Popular products retrieved"
        )


@extend_schema(tags=["Admin"])
class NewProductsView(AdminBaseView):
    @extend_schema(
        summary="Products added this week",
        responses={200: envelope(ProductReadSerializer, many=True, name="NewProducts"), **ADMIN_ERRORS},
    )
    def get(self, request):
        products = self.service.weekly_new_products()
        return success_response(ProductReadSerializer(products, many=True).data, "New products retrieved")


@extend_schema(tags=["Admin"])
class TrackProductView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_admin_dashboard_service()
    log = logger.bind(view="TrackProductView")

    @extend_schema(
        summary="Record a product view",
        description="Always answers success; tracking failures are only logged.",
        parameters=[
            PRODUCT_ID_PARAM,
            OpenApiParameter("userId", int, required=False, description="Viewer, if known"),
        ],
        request=None,
        responses={200: MessageEnvelopeSerializer},
    )
    def post(self, request, product_id: int):
        query = TrackViewQuerySerializer(data=request.query_params)
        user_id = query.validated_data.get("userId") if query.is_valid() else None
        try:
            self.service.track_product_view(product_id, user_id, client_ip(request))
        except ApplicationError as exc:
            self.log.warning("View not tracked", product_id=product_id, code=exc.code, detail=exc.message)
        except Exception:
            self.log.exception("View tracking failed", product_id=product_id)
        return success_response(message="View tracked")


@extend_schema(tags=["Admin"])
class AdminProductCreateView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]
    service = build_product_service()
    log = logger.bind(view="AdminProductCreateView")

    @extend_schema(
        summary="Create product",
        request=ProductWriteSerializer,
        responses={
            201: envelope(ProductReadSerializer, name="ProductCreated"),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            **ADMIN_ERRORS,
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.create_product(serializer.validated_data)
        self.log.info("Product created via admin API", product_id=dto.id, actor_id=request.user.id)
        return success_response(
            ProductReadSerializer(dto).data,
            "Product created successfully",
            http_status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Admin"])
class AdminProductDetailView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]
    service = build_product_service()
    log = logger.bind(view="AdminProductDetailView")

    @extend_schema(
        summary="Update product",
        parameters=[PRODUCT_ID_PARAM],
        request=ProductWriteSerializer,
        responses={
            200: envelope(ProductReadSerializer, name="ProductUpdated"),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
            **ADMIN_ERRORS,
        },
    )
    def put(self, request, product_id: int):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        dto = self.service.update_product(product_id, serializer.validated_data)
        return success_response(ProductReadSerializer(dto).data, "Product updated successfully")

    @extend_schema(
        summary="Delete product",
        parameters=[PRODUCT_ID_PARAM],
        responses={
            200: MessageEnvelopeSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            **ADMIN_ERRORS,
        },
    )
    def delete(self, request, product_id: int):
        self.service.delete_product(product_id)
        self.log.info("Product deleted via admin API", product_id=product_id, actor_id=request.user.id)
        return success_response(message="Product deleted successfully")
