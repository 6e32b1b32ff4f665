"""Request and response schemas for the invoice ledger endpoints."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, model_validator


class LineCreate(BaseModel):
    item_id: Optional[int] = None
    name: Optional[str] = None
    unit_price: Optional[Decimal] = None

    @model_validator(mode="after")
    def check_source(self):
        if self.item_id is None and (self.name is None or self.unit_price is None):
            raise ValueError("Provide either item_id or both name and unit_price")
        return self


class LineUpdate(BaseModel):
    quantity: Optional[int] = None
    unit_price: Optional[Decimal] = None


class DiscountUpdate(BaseModel):
    discount_percent: Decimal


class LineItemRead(BaseModel):
    id: int
    name: str
    quantity: int
    unit_price: str
    line_total: str


class InvoiceSnapshotRead(BaseModel):
    session_id: str
    lines: List[LineItemRead]
    grand_total: str
    discount_percent: str
    discount_amount: str
    net_payable: str
