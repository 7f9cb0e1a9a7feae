from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.crud import company as company_crud
from jobly.schemas.company import CompanyEnvelope, CompanyListEnvelope

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("/", response_model=CompanyListEnvelope)
def list_companies(
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """List companies ordered by name, optionally filtered by name fragment."""
    return {"companies": company_crud.find_all(db, name=name)}


@router.get("/{handle}", response_model=CompanyEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company with its jobs."""
    return {"company": company_crud.get(db, handle)}
