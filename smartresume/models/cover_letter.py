from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from smartresume.db.session import Base
from smartresume.models.user import generate_uuid, utcnow


class CoverLetter(Base):
    __tablename__ = "cover_letters"

    id = Column(String, primary_key=True, default=generate_uuid)
    resumeId = Column(
        "resume_id",
        String,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    tone = Column(String, nullable=False, default="professional")
    jobDescription = Column("job_description", Text, nullable=True)
    createdAt = Column("created_at", DateTime, default=utcnow, index=True)

    resume = relationship("Resume", back_populates="coverLetters")
