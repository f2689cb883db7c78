"""
Job model: one tracked job application owned by exactly one user.
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Enum, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Stage of the application.

    - PENDING: applied, no response yet
    - INTERVIEW: interview stage reached
    - REJECT: application rejected
    """
    PENDING = "pending"
    INTERVIEW = "interview"
    REJECT = "reject"


class WorkType(str, enum.Enum):
    """Employment category of the job opening."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"
    CONTRACT = "contract"


def _enum_values(enum_cls):
    # Persist the lowercase values, not the member names
    return [member.value for member in enum_cls]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    """
    Job application record.

    Every read, update and delete is filtered by owner_id.
    """
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    owner_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    company = Column(String, nullable=False)
    position = Column(String, nullable=False, index=True)
    work_location = Column(String, nullable=False, default="Remote")
    work_type = Column(
        Enum(WorkType, name="worktype", values_callable=_enum_values),
        default=WorkType.FULL_TIME,
        nullable=False,
        index=True,
    )
    status = Column(
        Enum(JobStatus, name="jobstatus", values_callable=_enum_values),
        default=JobStatus.PENDING,
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    owner = relationship("User", back_populates="jobs")

    def __repr__(self):
        return f"<Job(id={self.id}, company='{self.company}', status={self.status.value})>"
