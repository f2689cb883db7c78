"""
CRUD operations for Job model.

Every function takes the caller's user id and filters on it, so a job that
belongs to someone else behaves exactly like a job that does not exist.
"""

from typing import Dict, List, Optional
from uuid import UUID
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from app.models.job import Job, JobStatus, WorkType, utcnow
from app.schemas.job import JobCreateRequest, JobUpdateRequest, JobListFilters, JobSortEnum


def create(db: Session, owner_id: UUID, job_data: JobCreateRequest) -> Job:
    """
    Create a new job owned by `owner_id`.

    Args:
        db: Database session
        owner_id: Authenticated caller's user id
        job_data: Validated job creation data

    Returns:
        Created Job instance with id and created_at
    """
    db_job = Job(
        owner_id=owner_id,
        company=job_data.company,
        position=job_data.position,
        work_location=job_data.work_location,
        work_type=WorkType(job_data.work_type.value),
        status=JobStatus(job_data.status.value),
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def _escape_like(term: str) -> str:
    # % and _ match literally
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def get_by_id(db: Session, job_id: UUID, owner_id: UUID) -> Optional[Job]:
    """Retrieve one of the caller's jobs, or None."""
    return db.query(Job).filter(Job.id == job_id, Job.owner_id == owner_id).first()


def get_multi(db: Session, owner_id: UUID, filters: Optional[JobListFilters] = None) -> List[Job]:
    """
    Retrieve all of the caller's jobs, optionally filtered and sorted.

    No page size is applied; see DESIGN.md.

    Args:
        db: Database session
        owner_id: Authenticated caller's user id
        filters: Optional status / work type / search / sort

    Returns:
        List of Job instances
    """
    filters = filters or JobListFilters()
    query = db.query(Job).filter(Job.owner_id == owner_id)

    if filters.status:
        query = query.filter(Job.status == JobStatus(filters.status.value))
    if filters.work_type:
        query = query.filter(Job.work_type == WorkType(filters.work_type.value))
    if filters.search:
        pattern = f"%{_escape_like(filters.search.lower())}%"
        query = query.filter(or_(
            func.lower(Job.position).like(pattern, escape="\\"),
            func.lower(Job.company).like(pattern, escape="\\"),
        ))

    if filters.sort == JobSortEnum.OLDEST:
        query = query.order_by(Job.created_at.asc())
    elif filters.sort == JobSortEnum.A_Z:
        query = query.order_by(Job.position.asc())
    elif filters.sort == JobSortEnum.Z_A:
        query = query.order_by(Job.position.desc())
    else:
        query = query.order_by(Job.created_at.desc())

    return query.all()


def update(db: Session, job_id: UUID, owner_id: UUID, changes: JobUpdateRequest) -> Optional[Job]:
    """
    Apply a partial update to one of the caller's jobs.

    Only fields explicitly set on `changes` are written. updated_at is set
    even when the values are unchanged.

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id, owner_id)
    if not job:
        return None

    for field, value in changes.model_dump(exclude_unset=True, mode="json").items():
        if field == "status":
            value = JobStatus(value)
        elif field == "work_type":
            value = WorkType(value)
        setattr(job, field, value)
    job.updated_at = utcnow()

    db.commit()
    db.refresh(job)

    return job


def update_status(db: Session, job_id: UUID, owner_id: UUID, status: JobStatus) -> Optional[Job]:
    """Status-only edit; a thin wrapper over update()."""
    return update(db, job_id, owner_id, JobUpdateRequest(status=status.value))


def delete(db: Session, job_id: UUID, owner_id: UUID) -> bool:
    """
    Delete one of the caller's jobs.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id, owner_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def count_by_status(db: Session, owner_id: UUID) -> Dict[str, int]:
    """Count the caller's jobs per status; every status is present."""
    counts = {status.value: 0 for status in JobStatus}
    rows = (
        db.query(Job.status, func.count(Job.id))
        .filter(Job.owner_id == owner_id)
        .group_by(Job.status)
        .all()
    )
    for status, count in rows:
        counts[JobStatus(status).value] = count
    return counts


def count_by_work_type(db: Session, owner_id: UUID) -> Dict[str, int]:
    """Count the caller's jobs per work type; every work type is present."""
    counts = {work_type.value: 0 for work_type in WorkType}
    rows = (
        db.query(Job.work_type, func.count(Job.id))
        .filter(Job.owner_id == owner_id)
        .group_by(Job.work_type)
        .all()
    )
    for work_type, count in rows:
        counts[WorkType(work_type).value] = count
    return counts


def stats(db: Session, owner_id: UUID) -> Dict[str, object]:
    """
    Aggregate the caller's jobs by status and by work type.

    Both groupings sum to total_jobs.
    """
    by_status = count_by_status(db, owner_id)
    return {
        "total_jobs": sum(by_status.values()),
        "status": by_status,
        "work_type": count_by_work_type(db, owner_id),
    }
