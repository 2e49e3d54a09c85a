from sqlalchemy import Column, String, DateTime, JSON, Integer, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship

from smartresume.db.session import Base
from smartresume.models.user import generate_uuid, utcnow


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(String, primary_key=True, default=generate_uuid)
    userId = Column(
        "user_id",
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String, nullable=False)
    # Structured sub-records are validated by the pydantic schemas before they land here
    personalInfo = Column("personal_info", JSON, nullable=False)
    experience = Column(JSON, nullable=False)
    education = Column(JSON, nullable=False)
    skills = Column(JSON, nullable=False)
    summary = Column(Text, nullable=True)
    templateId = Column("template_id", String, nullable=False, default="modern")
    jobDescription = Column("job_description", Text, nullable=True)
    matchScore = Column("match_score", Integer, nullable=True)
    isPremium = Column("is_premium", Boolean, nullable=False, default=False)
    createdAt = Column("created_at", DateTime, default=utcnow)
    updatedAt = Column("updated_at", DateTime, default=utcnow, onupdate=utcnow, index=True)

    user = relationship("User", back_populates="resumes")
    coverLetters = relationship(
        "CoverLetter",
        back_populates="resume",
        cascade="all, delete-orphan",
    )
