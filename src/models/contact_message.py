# src/models/contact_message.py

"""Contact form submission record."""

from dataclasses import dataclass


@dataclass
class ContactMessage:
    """A name/email/message record sent to the form relay."""

    name: str
    email: str
    message: str

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are blank."""
        return [
            field_name
            for field_name in ("name", "email", "message")
            if not getattr(self, field_name).strip()
        ]

    def to_payload(self) -> dict[str, str]:
        """JSON body expected by the form relay."""
        return {
            "name": self.name,
            "email": self.email,
            "message": self.message,
        }
