from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.permissions import IsCartOwnerOrAdmin
from apps.api.schemas import ErrorResponseSerializer, MessageEnvelopeSerializer, envelope
from apps.api.utils import success_response
from apps.common import get_logger
from .container import build_cart_service
from .serializers import CartAddItemSerializer, CartReadSerializer, CartUpdateItemSerializer

logger = get_logger(__name__).bind(component="carts", layer="view")

USER_ID_PARAM = OpenApiParameter("user_id", int, OpenApiParameter.PATH, description="Cart owner")
CART_ENVELOPE = envelope(CartReadSerializer)
CART_ERRORS = {
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation or stock failure"),
    401: OpenApiResponse(response=ErrorResponseSerializer),
    403: OpenApiResponse(response=ErrorResponseSerializer),
    404: OpenApiResponse(response=ErrorResponseSerializer),
}


class CartBaseView(APIView):
    permission_classes = [IsAuthenticated, IsCartOwnerOrAdmin]
    service = build_cart_service()


@extend_schema(tags=["Cart"])
class CartDetailView(CartBaseView):
    log = logger.bind(view="CartDetailView")

    @extend_schema(
        summary="Get cart",
        description="Returns the user's cart, creating an empty one on first access.",
        parameters=[USER_ID_PARAM],
        responses={200: CART_ENVELOPE, **CART_ERRORS},
    )
    def get(self, request, user_id: int):
        self.log.debug("Handling cart fetch", user_id=user_id, actor_id=request.user.id)
        dto = self.service.get_cart(user_id)
        return success_response(CartReadSerializer(dto).data, "Cart retrieved")


@extend_schema(tags=["Cart"])
class CartAddItemView(CartBaseView):
    log = logger.bind(view="CartAddItemView")

    @extend_schema(
        summary="Add item to cart",
        description="Merges into an existing line for the same product.",
        parameters=[USER_ID_PARAM],
        request=CartAddItemSerializer,
        responses={200: CART_ENVELOPE, **CART_ERRORS},
    )
    def post(self, request, user_id: int):
        serializer = CartAddItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.debug(
            "Handling cart add",
            user_id=user_id,
            actor_id=request.user.id,
            product_id=data["productId"],
            quantity=data["quantity"],
        )
        dto = self.service.add_item(user_id, data["productId"], data["quantity"])
        return success_response(CartReadSerializer(dto).data, "Item added to cart")


@extend_schema(tags=["Cart"])
class CartUpdateItemView(CartBaseView):
    log = logger.bind(view="CartUpdateItemView")

    @extend_schema(
        summary="Set item quantity",
        description="A quantity of 0 removes the line.",
        parameters=[USER_ID_PARAM],
        request=CartUpdateItemSerializer,
        responses={200: CART_ENVELOPE, **CART_ERRORS},
    )
    def put(self, request, user_id: int):
        serializer = CartUpdateItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        self.log.debug(
            "Handling cart update",
            user_id=user_id,
            actor_id=request.user.id,
            product_id=data["productId"],
            quantity=data["quantity"],
        )
        dto = self.service.update_item(user_id, data["productId"], data["quantity"])
        return success_response(CartReadSerializer(dto).data, "Cart updated")


@extend_schema(tags=["Cart"])
class CartRemoveItemView(CartBaseView):
    log = logger.bind(view="CartRemoveItemView")

    @extend_schema(
        summary="Remove cart item",
        parameters=[
            USER_ID_PARAM,
            OpenApiParameter("item_id", int, OpenApiParameter.PATH, description="Cart item id"),
        ],
        responses={200: CART_ENVELOPE, **CART_ERRORS},
    )
    def delete(self, request, user_id: int, item_id: int):
        self.log.debug(
            "Handling cart item removal", user_id=user_id, actor_id=request.user.id, item_id=item_id
        )
        dto = self.service.remove_item(user_id, item_id)
        return success_response(CartReadSerializer(dto).data, "Item removed from cart")


@extend_schema(tags=["Cart"])
class CartClearView(CartBaseView):
    log = logger.bind(view="CartClearView")

    @extend_schema(
        summary="Clear cart",
        parameters=[USER_ID_PARAM],
        responses={200: MessageEnvelopeSerializer, **CART_ERRORS},
    )
    def delete(self, request, user_id: int):
        self.service.clear_cart(user_id)
        self.log.info("Cart cleared via API", user_id=user_id, actor_id=request.user.id)
        return success_response(message="Cart cleared")
