from storefront.model.role import Role
from storefront.model.user import User
from storefront.model.profile import Profile
from storefront.model.category import Category
from storefront.model.brand import Brand
from storefront.model.product import Product
from storefront.model.review import Review
from storefront.model.cart import Cart, CartItem

__all__ = [
    "Role", "User", "Profile", "Category", "Brand",
    "Product", "Review", "Cart", "CartItem",
]
