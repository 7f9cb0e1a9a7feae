"""
CRUD operations for users.

Password hashes are checked here and never returned to callers.
"""

import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from jobly.core.database import run_query
from jobly.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from jobly.core.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

_USER_COLUMNS = ('username, first_name AS "firstName", last_name AS "lastName", '
                 'email, is_admin AS "isAdmin"')


def _to_user(row) -> Dict[str, Any]:
    user = dict(row)
    user["isAdmin"] = bool(user["isAdmin"])
    return user


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Returns:
        {username, firstName, lastName, email, isAdmin}

    Raises:
        UnauthorizedError: If the user does not exist or the password is wrong
    """
    result = run_query(
        db,
        f"""SELECT {_USER_COLUMNS}, password
            FROM users
            WHERE username = $1""",
        [username],
    )
    row = result.mappings().first()

    if row is not None and verify_password(password, row["password"]):
        user = _to_user(row)
        del user["password"]
        return user

    logger.info(f"Failed login for {username}")
    raise UnauthorizedError("Invalid username/password")


def register(
    db: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str
) -> Dict[str, Any]:
    """
    Create a regular (non-admin) user.

    Raises:
        BadRequestError: If the username is taken
    """
    duplicate = run_query(
        db,
        """SELECT username
           FROM users
           WHERE username = $1""",
        [username],
    ).first()
    if duplicate is not None:
        raise BadRequestError(f"Duplicate username: {username}")

    result = run_query(
        db,
        f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {_USER_COLUMNS}""",
        [username, get_password_hash(password), first_name, last_name, email, False],
    )
    user = _to_user(result.mappings().first())
    db.commit()

    logger.info(f"Registered user {username}")
    return user


def find_all(db: Session) -> List[Dict[str, Any]]:
    """List users ordered by username."""
    result = run_query(
        db,
        f"""SELECT {_USER_COLUMNS}
            FROM users
            ORDER BY username""",
    )
    return [_to_user(row) for row in result.mappings().all()]


def get(db: Session, username: str) -> Dict[str, Any]:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: If no user has this username
    """
    result = run_query(
        db,
        f"""SELECT {_USER_COLUMNS}
            FROM users
            WHERE username = $1""",
        [username],
    )
    row = result.mappings().first()
    if row is None:
        raise NotFoundError(f"No user: {username}")

    return _to_user(row)
