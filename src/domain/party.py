"""Party and Payment Value Records

Seller/buyer address blocks and bank details printed on the invoice.
"""

from pydantic import BaseModel, Field


class Party(BaseModel):
    """
    Party - Seller or buyer identity block

    Domain Rules:
    - All fields are required once the party is set
    - Immutable value record
    """

    name: str = Field(
        description="Name of business or client"
    )

    street: str = Field(
        description="Street and street number"
    )

    zip: str = Field(
        description="Zip code"
    )

    city: str = Field(
        description="City"
    )

    country: str = Field(
        description="Country"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Acme Consulting",
                "street": "Main Street 1",
                "zip": "1010",
                "city": "Vienna",
                "country": "Austria",
            }
        }


class PaymentInfo(BaseModel):
    """PaymentInfo - Bank account the buyer pays into"""

    iban: str = Field(description="IBAN")
    account_name: str = Field(description="Account holder name")
    bic: str = Field(description="BIC")
    bank_name: str = Field(description="Name of bank")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "iban": "AT611904300234573201",
                "account_name": "Acme Consulting",
                "bic": "BKAUATWW",
                "bank_name": "Bank Austria",
            }
        }

    def footer_line(self, delimiter: str) -> str:
        """Account name, IBAN, bank name and BIC joined by delimiter"""
        return delimiter.join([self.account_name, self.iban, self.bank_name, self.bic])
