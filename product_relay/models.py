"""Pydantic models for the product record and response envelopes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class RegularPrice(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: float | None = None
    currency: str | None = None


class MinimumPrice(BaseModel):
    model_config = ConfigDict(extra="allow")

    regular_price: RegularPrice | None = None


class PriceRange(BaseModel):
    model_config = ConfigDict(extra="allow")

    minimum_price: MinimumPrice | None = None


class ProductRecord(BaseModel):
    """Shape of a product item as the upstream catalogue returns it.

    The relay forwards items untouched; this model only documents the fields
    the query selects and gives readers typed access to them.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    sku: str | None = None
    price_range: PriceRange | None = None

    @property
    def regular_price(self) -> RegularPrice | None:
        if self.price_range is None or self.price_range.minimum_price is None:
            return None
        return self.price_range.minimum_price.regular_price


class LookupSuccess(BaseModel):
    success: Literal[True] = True
    product: Any


class LookupFailure(BaseModel):
    success: Literal[False] = False
    error: str


@dataclass(frozen=True)
class LookupResponse:
    """Envelope plus the HTTP status it should be emitted with."""

    status_code: int
    body: LookupSuccess | LookupFailure

    @property
    def ok(self) -> bool:
        return self.body.success

    def to_dict(self) -> dict[str, Any]:
        return self.body.model_dump()
