"""
Medsite Backend — College Schemas
==================================

`CollegeSummary` is the card shown on listing pages: no narrative fields
(intro, course_fees, admission_eligibility, benefits, campus_info).
`CollegeDetail` is the full row.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from medsite.schemas.common import RequestPayload


class CollegePayload(RequestPayload):
    """Body of POST /admin/colleges and PUT /admin/colleges/{id}."""
    name: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    year_of_establishment: Optional[int] = None
    logo_link: Optional[str] = None
    intake: Optional[str] = None
    duration: Optional[str] = None
    recognition: Optional[str] = None
    medium: Optional[str] = None
    intro: Optional[str] = None
    course_fees: Optional[str] = None
    admission_eligibility: Optional[str] = None
    benefits: Optional[str] = None
    campus_info: Optional[str] = None

    def column_values(self) -> Dict[str, Any]:
        """Every column value, in table order, for INSERT/UPDATE."""
        return self.model_dump()


class CollegeSummary(BaseModel):
    id: int
    logo_link: Optional[str] = None
    name: str
    country: str
    state: str
    intake: Optional[str] = None
    year_of_establishment: int
    recognition: Optional[str] = None
    duration: Optional[str] = None
    medium: Optional[str] = None


class CollegeDetail(CollegeSummary):
    intro: Optional[str] = None
    course_fees: Optional[str] = None
    admission_eligibility: Optional[str] = None
    benefits: Optional[str] = None
    campus_info: Optional[str] = None


class CollegeCreatedResponse(BaseModel):
    message: str = "College added successfully"
    college: CollegeDetail


class CollegeUpdatedResponse(BaseModel):
    message: str = "College updated successfully"
    college: CollegeDetail


class CollegeListResponse(BaseModel):
    colleges: List[CollegeSummary]


class CollegeResponse(BaseModel):
    college: CollegeDetail
