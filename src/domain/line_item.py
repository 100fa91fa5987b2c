"""Line Item Domain Entity

A single product row as added to an invoice.
"""

import hashlib
from decimal import Decimal, InvalidOperation
from typing import Union
from pydantic import BaseModel, Field

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert a price or rate to Decimal through its string form (0.1 stays 0.1)

    Infinity and NaN are rejected with ValueError.
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid amount")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return result


def canonical(value: Decimal) -> str:
    """Plain string form without trailing zeros, so 100, 100.0 and 100.00 match"""
    normalized = value.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def identity_key(description: str, tax_rate: Decimal, net_price: Decimal) -> str:
    """MD5 over description/tax rate/net price, used only as an equality key"""
    raw = f"{description}/{canonical(tax_rate)}/{canonical(net_price)}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


class LineItem(BaseModel):
    """
    Line Item - One product on the invoice

    Domain Rules:
    - Two items with equal (description, tax_rate, net_price) share an identity key
    - net_price and gross_price are per unit
    - quantity is 1 until the ledger is finalized
    """

    description: str = Field(
        description="Product description"
    )

    net_price: Decimal = Field(
        description="Net (pre-tax) price per unit"
    )

    tax_rate: Decimal = Field(
        description="Tax rate in percent, 0 = untaxed"
    )

    gross_price: Decimal = Field(
        description="Gross (tax-inclusive) price per unit"
    )

    quantity: int = Field(
        default=1,
        ge=1,
        description="Number of additions sharing this identity key"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "description": "Consulting hour",
                "net_price": "100.00",
                "tax_rate": "20",
                "gross_price": "120.00",
                "quantity": 3,
            }
        }

    @property
    def identity_key(self) -> str:
        return identity_key(self.description, self.tax_rate, self.net_price)

    @property
    def is_taxed(self) -> bool:
        return self.tax_rate > 0

    @property
    def net_total(self) -> Decimal:
        return self.net_price * self.quantity

    @property
    def gross_total(self) -> Decimal:
        return self.gross_price * self.quantity
