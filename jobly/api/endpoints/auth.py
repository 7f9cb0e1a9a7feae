"""
Authentication endpoints.

- POST /token: Exchange username/password for a JWT
- POST /register: Create a regular user and return a JWT
- GET /me: Current user's profile
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import Principal, require_logged_in
from jobly.core.security import create_token_for
from jobly.crud import user as user_crud
from jobly.schemas.user import (
    UserEnvelope,
    UserLoginRequest,
    UserRegisterRequest,
    TokenResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(request: UserLoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate and receive a JWT carrying { username, isAdmin }.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    return TokenResponse(access_token=create_token_for(user["username"], user["isAdmin"]))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new (non-admin) user and return a JWT for immediate use.
    """
    user = user_crud.register(
        db,
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
    )
    return TokenResponse(access_token=create_token_for(user["username"], user["isAdmin"]))


@router.get("/me", response_model=UserEnvelope)
def get_me(
    principal: Principal = Depends(require_logged_in),
    db: Session = Depends(get_db)
):
    """Get the current user's profile."""
    return {"user": user_crud.get(db, principal.username)}
