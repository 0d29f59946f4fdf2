from datetime import datetime
from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from storefront.core.helpers import average_rating
from storefront.model.base import Base


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    discount_percentage = Column(Float, nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    sku = Column(String, unique=True, nullable=True)
    slug = Column(String, unique=True, index=True, nullable=False)
    thumbnail = Column(String, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    category_id = Column(Integer, ForeignKey("category.id"), index=True, nullable=False)
    brand_id = Column(Integer, ForeignKey("brand.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category", back_populates="products", lazy="joined")
    brand = relationship("Brand", back_populates="products", lazy="joined")
    reviews = relationship("Review", back_populates="product", cascade="all, delete",
                           order_by="Review.created_at.desc()", lazy="selectin")
    cart_items = relationship("CartItem", back_populates="product", cascade="all, delete")

    @property
    def rating(self) -> float:
        return average_rating(review.rating for review in self.reviews)

    def __repr__(self):
        return f"<Product(id={self.id}, slug={self.slug})>"
