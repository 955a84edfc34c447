# src/services/contact_client.py

"""Fire-and-forget contact form submission to a form relay."""

import logging

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.contact_message import ContactMessage

logger = logging.getLogger("storefront.contact")

STATUS_IDLE = "idle"
STATUS_PENDING = "pending"
STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


class ContactClient:
    """POSTs contact messages and tracks the last submission's status.

    Failures are logged and surfaced through :attr:`status`; nothing is
    retried and nothing is raised to the caller.
    """

    def __init__(self, endpoint: str | None = None) -> None:
        self.settings = Settings()
        self.endpoint: str = endpoint or self.settings.CONTACT_ENDPOINT
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self.status: str = STATUS_IDLE

    def submit(self, message: ContactMessage) -> str:
        """Send *message* and return the final status."""
        missing = message.missing_fields()
        if missing:
            logger.warning(
                "Contact submission missing fields: %s",
                ", ".join(missing),
            )
            self.status = STATUS_FAILURE
            return self.status

        self.status = STATUS_PENDING
        try:
            resp = self.session.post(
                self.endpoint,
                json=message.to_payload(),
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.CONTACT_TIMEOUT,
            )
        except Exception as exc:
            logger.error(
                "Contact submission to %s failed: %s",
                self.endpoint,
                exc,
                exc_info=True,
            )
            self.status = STATUS_FAILURE
            return self.status

        if 200 <= resp.status_code < 300:
            logger.info("Contact message from %s sent", message.email)
            self.status = STATUS_SUCCESS
        else:
            logger.error(
                "Contact relay returned HTTP %d", resp.status_code
            )
            self.status = STATUS_FAILURE
        return self.status
