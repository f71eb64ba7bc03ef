from django.urls import path
from .views import (
    CartAddItemView,
    CartClearView,
    CartDetailView,
    CartRemoveItemView,
    CartUpdateItemView,
)

urlpatterns = [
    path("<int:user_id>/", CartDetailView.as_view(), name="api-cart-detail"),
    path("<int:user_id>/add/", CartAddItemView.as_view(), name="api-cart-add"),
    path("<int:user_id>/update/", CartUpdateItemView.as_view(), name="api-cart-update"),
    path(
        "<int:user_id>/item/<int:item_id>/",
        CartRemoveItemView.as_view(),
        name="api-cart-remove-item",
    ),
    path("<int:user_id>/clear/", CartClearView.as_view(), name="api-cart-clear"),
]
