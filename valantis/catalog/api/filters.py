"""Filter form state and ``filter`` action parameters.

Architecture:
    The search form is captured as a ``FilterForm`` model holding the raw
    text of each input. ``build_filter_params`` turns it into the ``params``
    object of the ``filter`` action, applying only the fields the user
    actually filled in.

Design Decisions:
    - Raw text in, typed params out: the form never holds parsed values, so
      presentation code can bind inputs directly
    - Empty params mean "no filter"; the catalog short-circuits to an empty
      result instead of sending an unconstrained query
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import ValidationError

MIN_QUERY_LENGTH = 3


class FilterForm(BaseModel):
    """Raw contents of the search form inputs."""

    product: str | None = None
    brand: str | None = None
    price: str | None = None

    model_config = ConfigDict(frozen=True)

    def filled(self) -> dict[str, str]:
        """Inputs that hold a non-empty value."""
        values = {"product": self.product, "brand": self.brand, "price": self.price}
        return {name: value for name, value in values.items() if value}

    def can_submit(self, min_length: int = MIN_QUERY_LENGTH) -> bool:
        """Whether any input is long enough to enable the search button."""
        return any(len(value) >= min_length for value in self.filled().values())


def parse_price(text: str) -> float:
    """Parse the price input.

    Raises:
        ValidationError: If the text is not a number
    """
    try:
        return float(text.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid price: {text!r}") from e


def build_filter_params(form: FilterForm) -> dict[str, Any]:
    """Build ``filter`` action params from the filled-in form fields.

    Args:
        form: Current search form state

    Returns:
        Params containing only the fields present in the form. An empty dict
        means nothing should be requested.

    Example:
        >>> build_filter_params(FilterForm(brand="Acme"))
        {'brand': 'Acme'}
    """
    params: dict[str, Any] = {}
    if form.product:
        params["product"] = form.product
    if form.brand:
        params["brand"] = form.brand
    if form.price:
        params["price"] = parse_price(form.price)
    return params
