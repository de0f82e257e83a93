"""Product record data model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Descriptive product record returned by ``get_items``."""

    id: str = Field(..., min_length=1)
    product: str
    price: Decimal = Field(..., ge=0)
    brand: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    @property
    def display_brand(self) -> str:
        """Brand for display; the API sends null for unbranded products."""
        return self.brand or "-"
