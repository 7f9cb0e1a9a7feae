"""
CRUD operations for Job model.

Every statement is parameterized SQL run through run_query(); rows come back
as plain dicts keyed the way the API returns them (companyHandle, ...).
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from jobly.core.database import run_query
from jobly.core.exceptions import NotFoundError
from jobly.core.sql import decimal_to_str, sql_for_partial_update
from jobly.crud.company import get_summary as get_company_summary

logger = logging.getLogger(__name__)

# Fields a partial update may touch, mapped to their columns
UPDATABLE_FIELDS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def _to_job(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a result row to a job dict; equity is always a decimal string."""
    job = dict(row)
    if job.get("equity") is not None:
        job["equity"] = decimal_to_str(job["equity"])
    return job


def create(
    db: Session,
    company_handle: str,
    title: str,
    salary: Optional[int] = None,
    equity: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a new job in the database.

    Args:
        db: Database session
        company_handle: Handle of an existing company
        title: Job title
        salary: Optional salary
        equity: Optional equity as a decimal string in [0, 1]

    Returns:
        {id, title, salary, equity, companyHandle}
    """
    result = run_query(
        db,
        f"""INSERT INTO jobs (company_handle, title, salary, equity)
            VALUES ($1, $2, $3, $4)
            RETURNING {_JOB_COLUMNS}""",
        [company_handle, title, salary, equity],
    )
    job = _to_job(result.mappings().first())
    db.commit()

    logger.info(f"Created job {job['id']}: {title} ({company_handle})")
    return job


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None
) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title, with optional filters ANDed together.

    Args:
        db: Database session
        title: Case-insensitive substring of the title
        min_salary: Only jobs paying at least this much
        has_equity: If True, only jobs with equity > 0; otherwise no equity filter

    Returns:
        List of {id, title, salary, equity, companyHandle}
    """
    conditions = []
    values = []

    if title is not None:
        values.append(f"%{title}%")
        conditions.append(f"LOWER(title) LIKE LOWER(${len(values)})")

    if min_salary is not None:
        values.append(min_salary)
        conditions.append(f"salary >= ${len(values)}")

    if has_equity is True:
        conditions.append("equity > 0")

    where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""

    result = run_query(
        db,
        f"""SELECT {_JOB_COLUMNS}
            FROM jobs
            {where_clause}
            ORDER BY title""",
        values,
    )
    return [_to_job(row) for row in result.mappings().all()]


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job by its ID, with its company nested.

    Returns:
        {id, title, salary, equity, company: {handle, name, description, numEmployees, logoUrl}}

    Raises:
        NotFoundError: If no job has this ID
    """
    result = run_query(
        db,
        f"""SELECT {_JOB_COLUMNS}
            FROM jobs
            WHERE id = $1""",
        [job_id],
    )
    row = result.mappings().first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    job = _to_job(row)
    company_handle = job.pop("companyHandle")
    job["company"] = get_company_summary(db, company_handle)

    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job.

    Only title, salary and equity can change; other keys in data are ignored.

    Returns:
        {id, title, salary, equity, companyHandle}

    Raises:
        InvalidInputError: If data holds no updatable field
        NotFoundError: If no job has this ID
    """
    changes = {key: value for key, value in data.items() if key in UPDATABLE_FIELDS}
    set_cols, values = sql_for_partial_update(changes, UPDATABLE_FIELDS)
    id_var_idx = f"${len(values) + 1}"

    result = run_query(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_var_idx}
            RETURNING {_JOB_COLUMNS}""",
        [*values, job_id],
    )
    row = result.mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    job = _to_job(row)
    db.commit()

    logger.info(f"Updated job {job_id}: {', '.join(changes)}")
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    result = run_query(
        db,
        """DELETE FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    row = result.first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
