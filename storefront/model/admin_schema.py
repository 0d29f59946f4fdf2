from storefront.model.base_schema import CamelModel
from storefront.model.user_schema import UserStats

class ActiveStats(CamelModel):
    total: int
    active: int
    inactive: int

class CartStats(CamelModel):
    total_carts: int
    total_items: int
    average_items_per_cart: float

class AdminStats(CamelModel):
    products: ActiveStats
    categories: ActiveStats
    brands: ActiveStats
    users: UserStats
    carts: CartStats
