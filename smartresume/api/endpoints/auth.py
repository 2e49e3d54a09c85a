from fastapi import APIRouter, Depends

from smartresume.api.deps import get_current_user
from smartresume.models.user import User
from smartresume.schemas.ResumeSchemas import UserResponse

router = APIRouter()


@router.get("/user", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    """The caller's user record, created on first sight from the identity headers."""
    return current_user
