import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from storefront.model.cart import Cart, CartItem

logger = logging.getLogger(__name__)


def get_cart(db: Session, user_id: int) -> Optional[Cart]:
    return db.query(Cart).filter(Cart.user_id == user_id).first()


def get_or_create_cart(db: Session, user_id: int) -> Cart:
    cart = get_cart(db, user_id)
    if cart:
        return cart

    cart = Cart(user_id=user_id)
    db.add(cart)
    db.commit()
    db.refresh(cart)
    logger.info("Created cart %s for user %s", cart.id, user_id)
    return cart


def get_cart_item(db: Session, cart_id: int, product_id: int) -> Optional[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.cart_id == cart_id, CartItem.product_id == product_id)
        .first()
    )


def get_user_cart_item(db: Session, user_id: int, item_id: int) -> Optional[CartItem]:
    """A cart item only if it lives in ``user_id``'s cart."""
    return (
        db.query(CartItem)
        .join(Cart, CartItem.cart_id == Cart.id)
        .filter(CartItem.id == item_id, Cart.user_id == user_id)
        .first()
    )


def add_item(db: Session, cart: Cart, product_id: int, quantity: int):
    """Insert the product or bump the quantity of the existing row.

    Returns ``(item, created)``.
    """
    existing_item = get_cart_item(db, cart.id, product_id)

    if existing_item:
        existing_item.quantity = existing_item.quantity + quantity
        db.commit()
        db.refresh(existing_item)
        return existing_item, False

    new_item = CartItem(cart_id=cart.id, product_id=product_id, quantity=quantity)
    db.add(new_item)
    db.commit()
    db.refresh(new_item)
    return new_item, True


def update_item_quantity(db: Session, item: CartItem, quantity: int) -> CartItem:
    item.quantity = quantity
    db.commit()
    db.refresh(item)
    return item


def remove_item(db: Session, item: CartItem) -> None:
    db.delete(item)
    db.commit()


def remove_items(db: Session, cart: Cart, items: List[CartItem]) -> int:
    for item in items:
        db.delete(item)
    db.commit()
    return len(items)


def clear_cart(db: Session, cart: Cart) -> int:
    removed = db.query(CartItem).filter(CartItem.cart_id == cart.id).delete(synchronize_session=False)
    db.commit()
    logger.info("Cleared %s item(s) from cart %s", removed, cart.id)
    return removed


def get_cart_stats(db: Session) -> Dict:
    total_carts = db.query(func.count(Cart.id)).scalar()
    total_items = db.query(func.count(CartItem.id)).scalar()
    carts_with_items = db.query(func.count(func.distinct(CartItem.cart_id))).scalar()
    return {
        "total_carts": total_carts,
        "total_items": total_items,
        "average_items_per_cart": total_items / carts_with_items if carts_with_items else 0,
    }
