from pydantic import BaseModel, Field, UUID4, field_validator, model_validator
from typing import Dict, Optional
from datetime import datetime
from enum import Enum


class JobStatusEnum(str, Enum):
    """Application stage"""
    PENDING = "pending"
    INTERVIEW = "interview"
    REJECT = "reject"


class WorkTypeEnum(str, Enum):
    """Employment category"""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"
    CONTRACT = "contract"


class JobSortEnum(str, Enum):
    """Ordering for the job list"""
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    company: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    work_location: str = Field("Remote", max_length=200)
    work_type: WorkTypeEnum = WorkTypeEnum.FULL_TIME
    status: JobStatusEnum = JobStatusEnum.PENDING

    @field_validator("company", "position")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _strip_required(v)


class JobUpdateRequest(BaseModel):
    """
    Partial update of a job. Only the fields present in the request body
    are written.
    """
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    position: Optional[str] = Field(None, min_length=1, max_length=200)
    work_location: Optional[str] = Field(None, max_length=200)
    work_type: Optional[WorkTypeEnum] = None
    status: Optional[JobStatusEnum] = None

    @field_validator("company", "position")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _strip_required(v)

    @model_validator(mode="after")
    def no_explicit_nulls(self) -> "JobUpdateRequest":
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class JobStatusUpdateRequest(BaseModel):
    """Schema for the status-only edit"""
    status: JobStatusEnum


class JobResponse(BaseModel):
    """Schema for job response"""
    id: UUID4
    owner_id: UUID4
    company: str
    position: str
    work_location: str
    work_type: WorkTypeEnum
    status: JobStatusEnum
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobMutationResponse(BaseModel):
    """Envelope returned by create, update and edit-status"""
    message: str
    job: JobResponse


class MessageResponse(BaseModel):
    message: str


class JobStatsResponse(BaseModel):
    """Counts of the caller's jobs grouped by status and by work type"""
    total_jobs: int
    status: Dict[str, int]
    work_type: Dict[str, int]


class JobListFilters(BaseModel):
    """Query filters for the job list, passed through to the query"""
    status: Optional[JobStatusEnum] = None
    work_type: Optional[WorkTypeEnum] = None
    search: Optional[str] = None
    sort: JobSortEnum = JobSortEnum.LATEST


