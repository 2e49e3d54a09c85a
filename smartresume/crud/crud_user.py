from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
import logging

from smartresume.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def _apply_profile(user: User, profile: Dict[str, Any]) -> bool:
    changed = False
    for key, value in profile.items():
        if value is not None and getattr(user, key) != value:
            setattr(user, key, value)
            changed = True
    return changed


def upsert_user(
    db: Session,
    user_id: str,
    email: Optional[str] = None,
    firstName: Optional[str] = None,
    lastName: Optional[str] = None,
    profileImageUrl: Optional[str] = None,
) -> User:
    """Insert the user, or refresh the profile fields the identity provider sent.

    Fields that were not sent (None) keep their stored value. Nothing is
    written when the stored row already matches. A concurrent request that
    inserts the same user first is treated as an update.
    """
    profile = {
        "email": email,
        "firstName": firstName,
        "lastName": lastName,
        "profileImageUrl": profileImageUrl,
    }
    user = get_user(db, user_id)

    if user is None:
        try:
            user = User(id=user_id, **profile)
            db.add(user)
            db.commit()
            db.refresh(user)
            return user
        except IntegrityError:
            db.rollback()
            user = db.query(User).filter(User.id == user_id).first()
            if user is None:
                # Conflict on another column (e.g. an email owned by a different user)
                raise
            logger.info(f"User {user_id} was created by a concurrent request, updating instead")

    if not _apply_profile(user, profile):
        return user

    db.commit()
    db.refresh(user)
    return user
