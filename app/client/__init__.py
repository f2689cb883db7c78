"""
Client-side views for the job tracker: job cards, the status edit modal,
and the HTTP wrapper they share.
"""

from app.client.api import ApiError, JobsApiClient
from app.client.edit_modal import EditModal, ModalState, STATUS_OPTIONS
from app.client.job_cards import JobBoard, JobCardsView, format_created_distance
from app.client.notifications import Notification, Notifier, Variant

__all__ = [
    "ApiError",
    "JobsApiClient",
    "EditModal",
    "ModalState",
    "STATUS_OPTIONS",
    "JobBoard",
    "JobCardsView",
    "format_created_distance",
    "Notification",
    "Notifier",
    "Variant",
]
