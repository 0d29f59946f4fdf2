"""Per-user cart operations.

A cart is created lazily on first access. Adding a product that is already
in the cart bumps the quantity of the existing row instead of inserting a
second one; setting a quantity of zero or less removes the row.
"""
import logging
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Iterable, Tuple
from storefront.core.helpers import discounted_price
from storefront.model.cart import Cart, CartItem
from storefront.model.cart_schema import CartItemResponse, CartResponse, CartSummary
from storefront.repository import cart as cart_repository
from storefront.repository import product as product_repository

logger = logging.getLogger(__name__)

MAX_ADD_QUANTITY = 100


def summarize(items: Iterable[CartItem]) -> CartSummary:
    total_items = 0
    total_price = 0.0
    final_price = 0.0

    for item in items:
        price = item.product.price
        total_items += item.quantity
        total_price += price * item.quantity
        final_price += discounted_price(price, item.product.discount_percentage) * item.quantity

    return CartSummary(
        total_items=total_items,
        total_price=round(total_price, 2),
        total_discount=round(total_price - final_price, 2),
        final_price=round(final_price, 2),
    )


def to_response(cart: Cart) -> CartResponse:
    response = CartResponse.model_validate(cart)
    response.summary = summarize(cart.items)
    return response


def remove_inactive_items(db: Session, cart: Cart) -> int:
    inactive = [item for item in cart.items if not item.product.is_active]
    if not inactive:
        return 0
    removed = cart_repository.remove_items(db, cart, inactive)
    logger.info("Removed %s inactive product(s) from cart %s", removed, cart.id)
    return removed


def get_cart(db: Session, user_id: int, validate: bool = False) -> CartResponse:
    cart = cart_repository.get_or_create_cart(db, user_id)
    if validate:
        remove_inactive_items(db, cart)
    return to_response(cart)


def add_to_cart(db: Session, user_id: int, product_id: int, quantity: int = 1) -> Tuple[CartItemResponse, bool]:
    if quantity <= 0:
        raise HTTPException(status_code=400, detail="Quantity must be greater than 0")
    if quantity > MAX_ADD_QUANTITY:
        raise HTTPException(status_code=400, detail=f"Quantity cannot exceed {MAX_ADD_QUANTITY}")

    product = product_repository.get_product(db, id=product_id)
    if not product or not product.is_active:
        raise HTTPException(status_code=404, detail="Product not found")

    cart = cart_repository.get_or_create_cart(db, user_id)
    item, created = cart_repository.add_item(db, cart, product.id, quantity)
    logger.info("%s product %s in cart %s (quantity %s)",
                "Added" if created else "Incremented", product.id, cart.id, item.quantity)
    return CartItemResponse.model_validate(item), created


def _get_item_or_404(db: Session, user_id: int, item_id: int) -> CartItem:
    item = cart_repository.get_user_cart_item(db, user_id, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return item


def update_item_quantity(db: Session, user_id: int, item_id: int, quantity: int):
    """Returns the updated item, or ``None`` when the quantity removed it."""
    item = _get_item_or_404(db, user_id, item_id)

    if quantity <= 0:
        cart_repository.remove_item(db, item)
        return None

    item = cart_repository.update_item_quantity(db, item, quantity)
    return CartItemResponse.model_validate(item)


def remove_item(db: Session, user_id: int, item_id: int) -> None:
    item = _get_item_or_404(db, user_id, item_id)
    cart_repository.remove_item(db, item)


def clear_cart(db: Session, user_id: int) -> CartResponse:
    cart = cart_repository.get_or_create_cart(db, user_id)
    cart_repository.clear_cart(db, cart)
    return to_response(cart)
