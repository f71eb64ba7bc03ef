from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer, envelope
from apps.api.utils import success_response
from apps.common import get_logger
from .container import build_product_service
from .serializers import ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Filter by category name (case-insensitive)",
                required=False,
                type=str,
            )
        ],
        responses={200: envelope(ProductReadSerializer, many=True)},
    )
    def get(self, request):
        category = request.query_params.get("category") or None
        self.log.debug("Handling product list request", category=category)
        products = self.service.list_products(category)
        return success_response(ProductReadSerializer(products, many=True).data, "Products retrieved")


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: envelope(ProductReadSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        dto = self.service.get_product(product_id)
        return success_response(ProductReadSerializer(dto).data, "Product retrieved")
