import logging
from sqlalchemy.orm import Session
from typing import Optional
from storefront.model.product import Product
from storefront.model.product_schema import ReviewCreate
from storefront.model.review import Review

logger = logging.getLogger(__name__)


def create_review(db: Session, product: Product, data: ReviewCreate, author: Optional[str] = None) -> Review:
    new_review = Review(
        product_id=product.id,
        rating=data.rating,
        comment=data.comment,
        author=data.author or author,
    )
    db.add(new_review)
    db.commit()
    db.refresh(new_review)
    logger.info("Added %s-star review to product %s", new_review.rating, product.id)
    return new_review
