from datetime import datetime
from pydantic import Field
from typing import List, Optional
from storefront.model.base_schema import CamelModel
from storefront.model.brand_schema import BrandResponse
from storefront.model.category_schema import CategoryResponse

class CartItemAdd(CamelModel):
    product_id: int
    quantity: int = 1

class CartItemUpdate(CamelModel):
    item_id: int
    quantity: int

class CartProduct(CamelModel):
    id: int
    title: str
    price: float
    discount_percentage: float
    stock: int
    thumbnail: Optional[str] = None
    slug: str
    is_active: bool
    category: Optional[CategoryResponse] = None
    brand: Optional[BrandResponse] = None

class CartItemResponse(CamelModel):
    id: int
    cart_id: int
    product_id: int
    quantity: int
    added_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    product: CartProduct

class CartSummary(CamelModel):
    total_items: int = 0
    total_price: float = 0
    total_discount: float = 0
    final_price: float = 0

class CartResponse(CamelModel):
    id: int
    user_id: int
    items: List[CartItemResponse] = []
    summary: CartSummary = Field(default_factory=CartSummary)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
