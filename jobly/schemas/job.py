from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from jobly.schemas.company import CompanyResponse

# Decimal string between 0 and 1 inclusive: "0", "0.25", ".5", "1", "1.0"
EQUITY_PATTERN = r"^(0(\.\d+)?|\.\d+|1(\.0+)?)$"


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, strict=True)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)

    class Config:
        populate_by_name = True
        extra = "forbid"


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    companyHandle and id cannot change, so any key besides title, salary and
    equity is rejected.
    """
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, strict=True)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v

    class Config:
        extra = "forbid"


class JobResponse(BaseModel):
    """Flat job, as returned by create, list and update"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle")

    class Config:
        populate_by_name = True


class JobDetailResponse(BaseModel):
    """Job with its company nested in place of companyHandle"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class JobDeleteResponse(BaseModel):
    deleted: int
