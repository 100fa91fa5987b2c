"""Currency Value Record

Resolved reference data for the currency an invoice is billed in.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Currency(BaseModel):
    """
    Currency - Reference data for one ISO 4217 currency

    Domain Rules:
    - Amounts are always printed with `symbol` and two decimals,
      regardless of decimal_digits
    """

    code: str = Field(
        description="ISO 4217 code (e.g., EUR)"
    )

    symbol: str = Field(
        description="Symbol used when formatting amounts (e.g., €, CA$)"
    )

    symbol_native: Optional[str] = Field(
        default=None,
        description="Symbol as written in the currency's home locale"
    )

    decimal_digits: int = Field(
        default=2,
        ge=0,
        description="Native number of decimal digits"
    )

    name: Optional[str] = Field(
        default=None,
        description="English currency name"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "code": "EUR",
                "symbol": "€",
                "symbol_native": "€",
                "decimal_digits": 2,
                "name": "Euro",
            }
        }
