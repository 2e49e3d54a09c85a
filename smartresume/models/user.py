from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from smartresume.db.session import Base


def generate_uuid():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_uuid)
    email = Column(String, unique=True, nullable=True)
    # Keep Python attrs camelCase (API shape) but map to snake_case DB columns
    firstName = Column("first_name", String, nullable=True)
    lastName = Column("last_name", String, nullable=True)
    profileImageUrl = Column("profile_image_url", String, nullable=True)
    createdAt = Column("created_at", DateTime, default=utcnow)
    updatedAt = Column("updated_at", DateTime, default=utcnow, onupdate=utcnow)

    resumes = relationship(
        "Resume",
        back_populates="user",
        cascade="all, delete-orphan",
    )
