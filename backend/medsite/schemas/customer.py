"""
Medsite Backend — Customer (Lead) Schemas
==========================================

A public submission only echoes back `CustomerReceipt`; the full record is
visible to admins through GET /admin/customers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from medsite.schemas.common import RequestPayload


class CustomerPayload(RequestPayload):
    """Body of POST /customers."""
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email_address: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    college_of_interest: Optional[str] = None


class CustomerReceipt(BaseModel):
    id: int
    name: str
    phone_number: str
    created_at: datetime


class CustomerRecord(CustomerReceipt):
    email_address: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    college_of_interest: Optional[str] = None


class CustomerCreatedResponse(BaseModel):
    message: str = "Interest registered successfully"
    customer: CustomerReceipt


class CustomerListResponse(BaseModel):
    customers: List[CustomerRecord]
