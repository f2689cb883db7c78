import logging
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.crud import job as job_crud
from app.models.job import JobStatus
from app.models.user import User
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobStatusUpdateRequest,
    JobResponse,
    JobMutationResponse,
    JobStatsResponse,
    JobListFilters,
    JobSortEnum,
    JobStatusEnum,
    MessageResponse,
    WorkTypeEnum,
)

router = APIRouter(prefix="/job", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _persistence_failure(db: Session, action: str, error: Exception) -> HTTPException:
    db.rollback()
    logger.error(f"Failed to {action}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {str(error)}"
    )


@router.post("/create-job", status_code=201, response_model=JobMutationResponse)
def create_job(
    request: JobCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create a job owned by the caller.

    The owner and created_at are assigned server-side.
    """
    try:
        new_job = job_crud.create(db, current_user.id, request)
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "create job", e)

    logger.info(f"Created job {new_job.id} ({new_job.company} / {new_job.position}) for user {current_user.id}")

    return JobMutationResponse(message="Job created successfully", job=JobResponse.model_validate(new_job))


@router.get("/get-jobs", response_model=List[JobResponse])
def list_jobs(
    status: Optional[JobStatusEnum] = None,
    work_type: Optional[WorkTypeEnum] = None,
    search: Optional[str] = None,
    sort: JobSortEnum = JobSortEnum.LATEST,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    List all of the caller's jobs.

    Args:
        status: Optional filter by status (pending, interview, reject)
        work_type: Optional filter by work type
        search: Case-insensitive substring of company or position
        sort: latest (default), oldest, a-z, z-a
    """
    filters = JobListFilters(status=status, work_type=work_type, search=search, sort=sort)
    try:
        return job_crud.get_multi(db, current_user.id, filters)
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "list jobs", e)


@router.patch("/update-job/{job_id}", response_model=JobMutationResponse)
def update_job(
    job_id: UUID,
    request: JobUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update any subset of a job's fields.

    Returns 404 if the job does not exist or belongs to another user.
    """
    if not request.model_fields_set:
        raise HTTPException(status_code=400, detail="Provide at least one field to update")

    try:
        job = job_crud.update(db, job_id, current_user.id, request)
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "update job", e)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Updated job {job_id} fields {sorted(request.model_fields_set)}")
    return JobMutationResponse(message="Job updated successfully", job=JobResponse.model_validate(job))


@router.post("/edit-job/{job_id}", response_model=JobMutationResponse)
def edit_job_status(
    job_id: UUID,
    request: JobStatusUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Change only the status of a job.
    """
    try:
        job = job_crud.update_status(db, job_id, current_user.id, JobStatus(request.status.value))
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "update job", e)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Job {job_id} status set to {job.status.value}")
    return JobMutationResponse(message="Status updated successfully!", job=JobResponse.model_validate(job))


@router.delete("/delete-job/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Delete a job by ID.
    """
    try:
        deleted = job_crud.delete(db, job_id, current_user.id)
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "delete job", e)

    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted job {job_id}")
    return MessageResponse(message="Success, Job Deleted!")


@router.get("/job-stats", response_model=JobStatsResponse)
def job_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Count the caller's jobs grouped by status and by work type.

    Every status and work type appears in the result, with zero when the
    caller has no jobs in that category.
    """
    try:
        return job_crud.stats(db, current_user.id)
    except SQLAlchemyError as e:
        raise _persistence_failure(db, "aggregate jobs", e)
