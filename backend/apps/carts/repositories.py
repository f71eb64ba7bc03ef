from apps.common.repository import GenericRepository
from .models import Cart, CartItem


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)

    def _base_queryset(self):
        return self.model.objects.prefetch_related("items__product")

    def get(self, **filters):
        return self._base_queryset().filter(**filters).first()

    def get_for_user(self, user_id: int):
        return self.get(user_id=user_id)

    def touch(self, cart: Cart):
        cart.save(update_fields=["updated_at"])


class CartItemRepository(GenericRepository[CartItem]):
    def __init__(self):
        super().__init__(CartItem)

    def get(self, **filters):
        return self.model.objects.select_related("product").filter(**filters).first()

    def get_for_cart_product(self, cart_id: int, product_id: int):
        return self.get(cart_id=cart_id, product_id=product_id)

    def delete_for_cart(self, cart_id: int) -> int:
        deleted, _ = self.model.objects.filter(cart_id=cart_id).delete()
        return deleted
