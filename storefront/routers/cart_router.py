from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional, Union
from storefront.auth.utils import get_current_user
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.base_schema import MessageResponse
from storefront.model.cart_schema import CartItemAdd, CartItemResponse, CartItemUpdate, CartResponse
from storefront.service import cart as cart_service

router = APIRouter(prefix="/api/cart", tags=["Cart"])

ITEM_REMOVED = {"message": "Item removed from cart"}


@router.get("", response_model=CartResponse)
def get_cart(
    validate: bool = Query(False),
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    try:
        return cart_service.get_cart(db, user["id"], validate=validate)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "get cart")
        raise HTTPException(status_code=500, detail="Failed to fetch cart")


@router.post("", response_model=CartItemResponse)
def add_to_cart(
    data: CartItemAdd,
    response: Response,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    """201 when a new line is created, 200 when an existing line was incremented."""
    try:
        item, created = cart_service.add_to_cart(db, user["id"], data.product_id, data.quantity)
        response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return item
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "add to cart")
        raise HTTPException(status_code=500, detail="Failed to add item to cart")


@router.delete("", response_model=CartResponse)
def clear_cart(db: Session = Depends(get_db), user: dict = Depends(get_current_user)):
    try:
        return cart_service.clear_cart(db, user["id"])
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "clear cart")
        raise HTTPException(status_code=500, detail="Failed to clear cart")


@router.put("/items", response_model=Union[CartItemResponse, MessageResponse])
def update_cart_item(
    data: CartItemUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    try:
        item = cart_service.update_item_quantity(db, user["id"], data.item_id, data.quantity)
        if item is None:
            return ITEM_REMOVED
        return item
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "update cart item")
        raise HTTPException(status_code=500, detail="Failed to update cart item")


@router.delete("/items", response_model=MessageResponse)
def remove_cart_item(
    item_id: Optional[int] = Query(None, alias="itemId"),
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    if item_id is None:
        raise HTTPException(status_code=400, detail="Item ID is required")
    try:
        cart_service.remove_item(db, user["id"], item_id)
        return ITEM_REMOVED
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "remove cart item")
        raise HTTPException(status_code=500, detail="Failed to remove item from cart")
