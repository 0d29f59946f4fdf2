from datetime import datetime
from pydantic import Field
from typing import Optional
from storefront.model.base_schema import CamelModel

class BrandCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    is_active: bool = True

class BrandResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
