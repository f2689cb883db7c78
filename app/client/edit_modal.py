"""
Edit modal for changing a single job's status.

States: closed -> open -> submitting -> closed. Confirm and cancel are the
only ways out of the open state, and the modal ends up closed after a
confirm whether the call succeeded or not.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.client.api import ApiError, JobsApiClient
from app.client.notifications import Notifier, Variant

logger = logging.getLogger(__name__)

# (value, label) pairs offered by the status selector
STATUS_OPTIONS: List[Tuple[str, str]] = [
    ("pending", "Pending"),
    ("interview", "Interview"),
    ("reject", "Rejected"),
]


class ModalState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


class EditModal:
    def __init__(self, api: JobsApiClient, notifier: Notifier, refresh: Callable[[], Any]):
        self.api = api
        self.notifier = notifier
        self.refresh = refresh
        self.state = ModalState.CLOSED
        self.job: Optional[Dict[str, Any]] = None
        self.selected_status: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.state != ModalState.CLOSED

    def open(self, job: Dict[str, Any]) -> None:
        """Capture the job and seed the selector with its current status."""
        self.job = job
        self.selected_status = job.get("status")
        self.state = ModalState.OPEN

    def select(self, status: str) -> None:
        if self.state != ModalState.OPEN:
            raise RuntimeError("Edit modal is not open")
        if status not in {value for value, _ in STATUS_OPTIONS}:
            raise ValueError(f"Unknown status: {status}")
        self.selected_status = status

    def cancel(self) -> None:
        self._close()

    def confirm(self) -> bool:
        """
        Send the selected status for the captured job.

        Returns:
            True if the server accepted the change, False otherwise
            (including when there was nothing to submit)
        """
        if self.state != ModalState.OPEN or not self.job or not self.selected_status:
            return False

        self.state = ModalState.SUBMITTING
        try:
            data = self.api.edit_job(self.job["id"], {"status": self.selected_status})
            self.notifier.enqueue(data.get("message") or "Status updated successfully!", Variant.SUCCESS)
            self.refresh()
            return True
        except ApiError as e:
            logger.warning(f"Status update for job {self.job['id']} failed: {e}")
            self.notifier.enqueue(e.message or "Failed to update status", Variant.ERROR, horizontal="center")
            return False
        finally:
            self._close()

    def _close(self) -> None:
        self.state = ModalState.CLOSED
        self.job = None
        self.selected_status = None
