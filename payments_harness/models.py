from typing import Optional, Union
from pydantic import BaseModel, ConfigDict

# Identifiers are assigned by the server and treated as opaque
ResourceId = Union[int, str]


class PaymentCreate(BaseModel):
    amount: int                 # minor currency units
    currency: str
    source: str                 # payment-method token
    description: str


class PaymentUpdate(BaseModel):
    amount: Optional[int] = None
    currency: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None


class Payment(PaymentCreate):
    model_config = ConfigDict(extra="allow")

    id: ResourceId


class RefundCreate(BaseModel):
    payment_id: ResourceId      # lookup key, not ownership
    amount: int


class Refund(RefundCreate):
    model_config = ConfigDict(extra="allow")

    id: ResourceId
