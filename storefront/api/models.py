# This file maps the storefront tables onto SQLAlchemy ORM classes.
# Column names keep the existing camelCase schema; Python attributes use snake_case.

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Integer, MetaData, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

_NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# Integer columns are 32-bit on every supported backend.
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=_NAMING_CONVENTION)


class Category(Base):
    __tablename__ = "category"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utc_now
    )

    products: Mapped[list[Product]] = relationship(back_populates="category")


class Product(Base):
    __tablename__ = "product"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    main_image: Mapped[str] = mapped_column("mainImage", String(500), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False)
    in_stock: Mapped[int] = mapped_column("inStock", Integer, nullable=False, default=1)
    category_id: Mapped[str] = mapped_column(
        "categoryId", String(36), ForeignKey("category.id"), nullable=False
    )

    category: Mapped[Category] = relationship(back_populates="products")
    images: Mapped[list[Image]] = relationship(back_populates="product")


class CustomerOrder(Base):
    __tablename__ = "customer_order"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    lastname: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    adress: Mapped[str] = mapped_column(String(500), nullable=False)
    apartment: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    postal_code: Mapped[str] = mapped_column("postalCode", String(32), nullable=False)
    date_time: Mapped[datetime] = mapped_column(
        "dateTime", DateTime(timezone=True), nullable=False, default=_utc_now
    )
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    order_notice: Mapped[str] = mapped_column("orderNotice", Text, nullable=False, default="")
    total: Mapped[int] = mapped_column(Integer, nullable=False)

    products: Mapped[list[OrderProduct]] = relationship(back_populates="customer_order")


class OrderProduct(Base):
    __tablename__ = "customer_order_product"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    customer_order_id: Mapped[str] = mapped_column(
        "customerOrderId", String(36), ForeignKey("customer_order.id"), nullable=False
    )
    product_id: Mapped[str] = mapped_column(
        "productId", String(36), ForeignKey("product.id"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    customer_order: Mapped[CustomerOrder] = relationship(back_populates="products")
    product: Mapped[Product] = relationship()


class Image(Base):
    __tablename__ = "image"

    image_id: Mapped[str] = mapped_column("imageID", String(36), primary_key=True, default=_new_id)
    product_id: Mapped[str] = mapped_column(
        "productID", String(36), ForeignKey("product.id"), nullable=False
    )
    image: Mapped[str] = mapped_column(String(500), nullable=False)

    product: Mapped[Product] = relationship(back_populates="images")


class User(Base):
    __tablename__ = "user"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="user")

    wishlist: Mapped[list[Wishlist]] = relationship(back_populates="user")


class Wishlist(Base):
    __tablename__ = "wishlist"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column("userId", String(36), ForeignKey("user.id"), nullable=False)
    product_id: Mapped[str] = mapped_column(
        "productId", String(36), ForeignKey("product.id"), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="wishlist")
    product: Mapped[Product] = relationship()
