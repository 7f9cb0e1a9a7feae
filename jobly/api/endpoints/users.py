from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import require_admin, require_admin_or_self
from jobly.crud import user as user_crud
from jobly.schemas.user import UserEnvelope, UserListEnvelope

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/", response_model=UserListEnvelope, dependencies=[Depends(require_admin)])
def list_users(db: Session = Depends(get_db)):
    """
    List all users.

    Authorization required: admin
    """
    return {"users": user_crud.find_all(db)}


@router.get("/{username}", response_model=UserEnvelope, dependencies=[Depends(require_admin_or_self)])
def get_user(username: str, db: Session = Depends(get_db)):
    """
    Retrieve a user's profile.

    Authorization required: admin or the same user
    """
    return {"user": user_crud.get(db, username)}
