from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import List, Optional, Union
from storefront.model.base_schema import CamelModel
from storefront.model.brand_schema import BrandResponse
from storefront.model.category_schema import CategoryResponse


class SortOption(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING_ASC = "rating_asc"
    RATING_DESC = "rating_desc"
    POPULAR = "popular"


class ProductCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    discount_percentage: float = Field(0, ge=0, le=100)
    stock: int = Field(0, ge=0)
    brand_id: int
    category_id: int
    thumbnail: Optional[str] = None
    images: List[str] = []
    tags: List[str] = []
    sku: Optional[str] = None
    is_active: bool = True


class ProductUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, gt=0)
    discount_percentage: Optional[float] = Field(None, ge=0, le=100)
    stock: Optional[int] = Field(None, ge=0)
    brand_id: Optional[int] = None
    category_id: Optional[int] = None
    thumbnail: Optional[str] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    sku: Optional[str] = None
    is_active: Optional[bool] = None


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    author: Optional[str] = None


class ReviewResponse(CamelModel):
    id: int
    rating: int
    comment: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[datetime] = None


class ProductResponse(CamelModel):
    id: int
    title: str
    description: str
    price: float
    discount_percentage: float
    stock: int
    sku: Optional[str] = None
    slug: str
    thumbnail: Optional[str] = None
    images: List[str] = []
    tags: List[str] = []
    is_active: bool
    category_id: int
    brand_id: int
    category: CategoryResponse
    brand: BrandResponse
    reviews: List[ReviewResponse] = []
    rating: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductListResponse(CamelModel):
    products: List[ProductResponse]
    total: int
    page: int
    limit: int
    total_pages: int
    page_numbers: List[Union[int, str]] = []
