from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from storefront.model.base import Base


class User(Base):
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    role = relationship("Role", back_populates="users", lazy="joined")
    profile = relationship("Profile", back_populates="user", uselist=False,
                           cascade="all, delete", lazy="joined")
    cart = relationship("Cart", back_populates="user", uselist=False, cascade="all, delete")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
