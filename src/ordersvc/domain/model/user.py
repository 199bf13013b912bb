"""User entity.

Users are owned by the account system; orders only reference them. The
name is shown next to orders and the email, when present, receives the
order confirmation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ordersvc.domain.exceptions import ValidationError

# One local part, one domain with a dot; no whitespace or control characters
_EMAIL = re.compile(r"[^@\s\x00-\x1f\x7f]+@[^@\s\x00-\x1f\x7f]+\.[^@\s\x00-\x1f\x7f]+")


@dataclass
class User:
    id: str | None
    name: str
    email: str | None = None

    @staticmethod
    def create(name: str, email: str | None = None) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        if email is not None and not _EMAIL.fullmatch(email):
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(id=None, name=name.strip(), email=email or None)
