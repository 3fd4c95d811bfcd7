"""
Medsite Backend — Country Schemas
==================================

The list view (`CountrySummary`) leaves out the long `body` text; the
detail view carries every column.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from medsite.schemas.common import RequestPayload


class CountryPayload(RequestPayload):
    """Body of POST /admin/countries and PUT /admin/countries/{id}."""
    name: Optional[str] = None
    flag_image: Optional[str] = None
    body: Optional[str] = None


class CountrySummary(BaseModel):
    id: int
    name: str
    flag_image: str
    created_at: datetime


class CountryDetail(CountrySummary):
    body: str
    updated_at: datetime


class CountryCreatedResponse(BaseModel):
    message: str = "Country created successfully"
    country: CountrySummary


class CountryUpdatedResponse(BaseModel):
    message: str = "Country updated successfully"
    country: CountryDetail


class CountryListResponse(BaseModel):
    countries: List[CountrySummary]


class CountryResponse(BaseModel):
    country: CountryDetail
