import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import require_admin
from jobly.core.exceptions import BadRequestError
from jobly.crud import job as job_crud
from jobly.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobEnvelope,
    JobDetailEnvelope,
    JobListEnvelope,
    JobDeleteResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope, dependencies=[Depends(require_admin)])
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new job posting.

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    try:
        new_job = job_crud.create(
            db,
            company_handle=request.company_handle,
            title=request.title,
            salary=request.salary,
            equity=request.equity,
        )
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected job for company {request.company_handle}: {e.orig}")
        raise BadRequestError(f"No company: {request.company_handle}")

    return {"job": new_job}


@router.get("/", response_model=JobListEnvelope)
def list_jobs(
    title: Optional[str] = Query(None),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db)
):
    """
    List all jobs ordered by title.

    Optional filters:
    - title: case-insensitive substring match
    - minSalary: salary at least this much
    - hasEquity: when true, only jobs with non-zero equity

    Authorization required: none
    """
    jobs = job_crud.find_all(db, title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    Returns { job: { id, title, salary, equity, company } }
      where company is { handle, name, description, numEmployees, logoUrl }

    Authorization required: none
    """
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(require_admin)])
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Patch job data. Fields can be: { title, salary, equity }

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeleteResponse, dependencies=[Depends(require_admin)])
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
