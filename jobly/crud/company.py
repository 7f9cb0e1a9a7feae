"""
Read-only queries for companies.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from jobly.core.database import run_query
from jobly.core.exceptions import NotFoundError
from jobly.core.sql import decimal_to_str

_COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


def get_summary(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company's own fields by handle.

    Returns:
        {handle, name, description, numEmployees, logoUrl}

    Raises:
        NotFoundError: If no company has this handle
    """
    result = run_query(
        db,
        f"""SELECT {_COMPANY_COLUMNS}
            FROM companies
            WHERE handle = $1""",
        [handle],
    )
    row = result.mappings().first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    return dict(row)


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company with its jobs.

    Returns:
        {handle, name, description, numEmployees, logoUrl, jobs: [{id, title, salary, equity}, ...]}

    Raises:
        NotFoundError: If no company has this handle
    """
    company = get_summary(db, handle)

    result = run_query(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    jobs = []
    for row in result.mappings().all():
        job = dict(row)
        if job["equity"] is not None:
            job["equity"] = decimal_to_str(job["equity"])
        jobs.append(job)

    company["jobs"] = jobs
    return company


def find_all(db: Session, name: Optional[str] = None) -> List[Dict[str, Any]]:
    """List companies ordered by name, optionally filtered by a case-insensitive name fragment."""
    where_clause = ""
    values = []
    if name is not None:
        where_clause = "WHERE LOWER(name) LIKE LOWER($1)"
        values.append(f"%{name}%")

    result = run_query(
        db,
        f"""SELECT {_COMPANY_COLUMNS}
            FROM companies
            {where_clause}
            ORDER BY name""",
        values,
    )
    return [dict(row) for row in result.mappings().all()]
