"""
Job list view: one card per job with edit and delete actions.

Jobs are the JSON dicts returned by the list endpoint. After every
successful write the view calls `refresh` to re-query the server instead of
patching its local copy.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel

from app.client.api import ApiError, JobsApiClient
from app.client.edit_modal import EditModal
from app.client.notifications import Notifier, Variant

logger = logging.getLogger(__name__)

STATUS_BADGE_CLASSES = {
    "interview": "bg-green-900 text-green-300",
    "reject": "bg-red-900 text-red-300",
}
DEFAULT_STATUS_BADGE_CLASS = "bg-yellow-900 text-yellow-300"

WORK_TYPE_BADGE_CLASSES = {
    "full-time": "bg-gray-700 text-blue-400 border border-blue-400",
    "part-time": "bg-gray-700 text-indigo-400 border border-indigo-400",
    "internship": "bg-gray-700 text-purple-400 border border-purple-400",
}
DEFAULT_WORK_TYPE_BADGE_CLASS = "bg-gray-700 text-pink-400 border border-pink-400"

EMPTY_MESSAGE = "No job entries found."

MINUTES_IN_DAY = 1440
MINUTES_IN_ALMOST_TWO_DAYS = 2520
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400


def status_badge_class(status: Optional[str]) -> str:
    return STATUS_BADGE_CLASSES.get(status, DEFAULT_STATUS_BADGE_CLASS)


def work_type_badge_class(work_type: Optional[str]) -> str:
    return WORK_TYPE_BADGE_CLASSES.get(work_type, DEFAULT_WORK_TYPE_BADGE_CLASS)


def _as_utc(value: Union[str, datetime]) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        # The API serializes UTC; naive values come from SQLite
        value = value.replace(tzinfo=timezone.utc)
    return value


def _round(value: float) -> int:
    # Half-up, unlike the builtin round()
    return math.floor(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _month_difference(earlier: datetime, later: datetime) -> int:
    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if (later.day, later.time()) < (earlier.day, earlier.time()):
        months -= 1
    return months


def format_distance(earlier: datetime, later: datetime) -> str:
    """Approximate, human wording for the time between two instants."""
    seconds = (later - earlier).total_seconds()
    minutes = _round(seconds / 60)

    if minutes < 2:
        return "less than a minute" if minutes == 0 else "1 minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        return f"about {_plural(_round(minutes / 60), 'hour')}"
    if minutes < MINUTES_IN_ALMOST_TWO_DAYS:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        return _plural(_round(minutes / MINUTES_IN_DAY), "day")
    if minutes < MINUTES_IN_TWO_MONTHS:
        return f"about {_plural(_round(minutes / MINUTES_IN_MONTH), 'month')}"

    months = _month_difference(earlier, later)
    if months < 12:
        return _plural(_round(minutes / MINUTES_IN_MONTH), "month")

    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def format_created_distance(created_at: Union[str, datetime], now: Optional[datetime] = None) -> str:
    """
    Relative age of a job, e.g. "3 days ago" (or "in 2 minutes" for clock skew).
    """
    created = _as_utc(created_at)
    now = _as_utc(now) if now else datetime.now(timezone.utc)
    if created <= now:
        return f"{format_distance(created, now)} ago"
    return f"in {format_distance(now, created)}"


class JobCard(BaseModel):
    id: str
    company: str
    position: str
    work_location: str
    work_type: str
    work_type_class: str
    status: str
    status_class: str
    created: str


class JobListRender(BaseModel):
    cards: List[JobCard]
    empty: bool
    empty_message: Optional[str] = None


class JobCardsView:
    """
    Args:
        jobs: Job dicts as returned by the list endpoint
        api: Client used for delete and status edits
        notifier: Where toasts go
        refresh: Re-fetches the job list after a successful write
    """

    def __init__(
        self,
        jobs: List[Dict[str, Any]],
        api: JobsApiClient,
        notifier: Notifier,
        refresh: Callable[[], Any],
    ):
        self.jobs = jobs
        self.api = api
        self.notifier = notifier
        self.refresh = refresh
        self.edit_modal = EditModal(api, notifier, refresh)

    def render(self, now: Optional[datetime] = None) -> JobListRender:
        cards = [
            JobCard(
                id=str(job["id"]),
                company=job.get("company", ""),
                position=job.get("position", ""),
                work_location=job.get("work_location", ""),
                work_type=job.get("work_type", ""),
                work_type_class=work_type_badge_class(job.get("work_type")),
                status=job.get("status", ""),
                status_class=status_badge_class(job.get("status")),
                created=format_created_distance(job["created_at"], now),
            )
            for job in self.jobs
        ]
        if cards:
            return JobListRender(cards=cards, empty=False)
        return JobListRender(cards=[], empty=True, empty_message=EMPTY_MESSAGE)

    def edit(self, job: Dict[str, Any]) -> EditModal:
        self.edit_modal.open(job)
        return self.edit_modal

    def delete(self, job_id: str) -> bool:
        """Delete immediately, with no confirmation step."""
        try:
            data = self.api.delete_job(job_id)
        except ApiError as e:
            logger.warning(f"Delete of job {job_id} failed: {e}")
            self.notifier.enqueue(e.message or "Failed to delete job", Variant.WARNING, horizontal="center")
            return False

        # Deletions are announced with the error variant
        self.notifier.enqueue(data.get("message", "Job deleted"), Variant.ERROR)
        self.refresh()
        return True


class JobBoard:
    """
    Owns the job list and hands out views over it; `load` is the refresh
    callback the views use.
    """

    def __init__(self, api: JobsApiClient, notifier: Optional[Notifier] = None, **filters: Optional[str]):
        self.api = api
        self.notifier = notifier or Notifier()
        self.filters = filters
        self.jobs: List[Dict[str, Any]] = []

    def load(self) -> List[Dict[str, Any]]:
        try:
            self.jobs[:] = self.api.get_jobs(**self.filters)
        except ApiError as e:
            self.notifier.enqueue(e.message or "Failed to load jobs", Variant.ERROR, horizontal="center")
        return self.jobs

    def view(self) -> JobCardsView:
        return JobCardsView(self.jobs, self.api, self.notifier, self.load)
