"""Product database table model."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String
from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    Column names follow the ``Products`` schema shared with other consumers
    of the database, so each field pins its column explicitly.
    """

    __tablename__ = "Products"

    id: int | None = Field(
        default=None,
        sa_column=Column("Id", Integer, primary_key=True, autoincrement=True),
    )
    name: str = Field(sa_column=Column("Name", String(200), nullable=False))
    description: str | None = Field(
        default=None, sa_column=Column("Description", String(1000), nullable=True)
    )
    price: Decimal = Field(sa_column=Column("Price", Numeric(18, 2), nullable=False))
    stock_quantity: int = Field(
        sa_column=Column("StockQuantity", Integer, nullable=False)
    )
    category: str = Field(sa_column=Column("Category", String(100), nullable=False))
    created_at: datetime = Field(
        sa_column=Column("CreatedAt", DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column("UpdatedAt", DateTime(timezone=True), nullable=True),
    )
    is_active: bool = Field(
        default=True, sa_column=Column("IsActive", Boolean, nullable=False)
    )


products = ProductTable.__table__
