"""
Database models package.
"""

from app.models.job import Job, JobStatus, WorkType
from app.models.user import User

__all__ = ["Job", "JobStatus", "WorkType", "User"]
