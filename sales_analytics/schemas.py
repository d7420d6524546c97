from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from . import settings


class TopProduct(BaseModel):
    """One entry of a seller's best-selling products list."""

    sku: str
    quantity: int | float = 0


class SellerStat(BaseModel):
    """
    Working accumulator for a single seller while purchase records are scanned.
    It is mutated in place during aggregation, then finalized with a bonus and
    the top products once sellers have been ranked.
    """

    seller_id: Any = None
    name: str = settings.UNKNOWN_SELLER_NAME
    revenue: float = 0
    profit: float = 0
    sales_count: int = 0
    products_sold: dict[str, int | float] = Field(default_factory=dict)
    bonus: float = 0
    top_products: list[TopProduct] = Field(default_factory=list)


class SellerReport(BaseModel):
    """
    Defines the data contract for a single row of the final seller report.
    Money fields are already rounded to 2 decimals when the row is built.
    """

    seller_id: Any = Field(..., alias="Seller ID")
    name: str = Field(..., alias="Name")
    revenue: float = Field(default=0, alias="Revenue")
    profit: float = Field(default=0, alias="Profit")
    sales_count: int = Field(default=0, ge=0, alias="Sales Count")
    top_products: list[TopProduct] = Field(default_factory=list, alias="Top Products")
    bonus: float = Field(default=0, alias="Bonus")

    # Rows are built from field names in code and exported with the
    # friendly aliases as CSV/JSON headers.
    model_config = ConfigDict(populate_by_name=True)
