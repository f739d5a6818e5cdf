"""
Contact validation — presence only; format checks belong to the UI.
"""

from __future__ import annotations

import uuid

from kungfu import Result, Ok, Error

from storefront.checkout._types import Contact
from storefront.checkout._errors import ValidationError


def validate_contact(contact: Contact) -> Result[Contact, ValidationError]:
    """Every field must be non-blank. Values are returned stripped."""
    cleaned = Contact(
        name=contact.name.strip(),
        email=contact.email.strip(),
        phone=contact.phone.strip(),
    )
    missing = tuple(
        field for field in ("name", "email", "phone") if not getattr(cleaned, field)
    )
    if missing:
        return Error(ValidationError(missing))
    return Ok(cleaned)


def new_receipt() -> str:
    """Fresh idempotent receipt id; one per checkout attempt."""
    return f"rcpt_{uuid.uuid4().hex[:16]}"


__all__ = ("validate_contact", "new_receipt")
