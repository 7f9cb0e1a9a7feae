from pydantic import BaseModel, Field
from typing import List, Optional


class CompanyResponse(BaseModel):
    """Schema for company response"""
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        populate_by_name = True


class CompanyJobResponse(BaseModel):
    """Job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJobResponse]


class CompanyEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]
