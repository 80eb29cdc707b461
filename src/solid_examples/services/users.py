"""
User registration (Single Responsibility Principle).

BAD: `BadUserManager.create_user` validates input, talks to the database,
sends the welcome email and writes the audit log all by itself. Any change
to any of those four concerns means editing this one method.

GOOD: each concern gets its own small class behind a Protocol, and
`UserManager` only orchestrates them:

    UserValidator            → is the data acceptable?
    UserRepository           → persist the user
    EmailService             → send the welcome email
    AuditLog                 → record what happened
    UserManager              → call the above in order

The implementations here only print what a real system would do, the same
way the rest of the services simulate their side effects.
"""

import logging
from typing import Protocol

from solid_examples.domain.models import User

logger = logging.getLogger(__name__)


# ── BAD EXAMPLE ─────────────────────────────────────────────────────


class BadUserManager:
    """Four reasons to change in one class."""

    CONNECTION_STRING = "Server=localhost;Database=Users"

    def create_user(self, name: str, email: str) -> None:
        # 1. Validation
        if not name or not email:
            raise ValueError("Name and email are required")

        # 2. Persistence
        print(f"Connecting to {self.CONNECTION_STRING} and inserting user {name}")

        # 3. Email
        print(f"Opening SMTP connection to send welcome email to {email}")

        # 4. Audit logging
        print(f"LOG: User {name} created")


# ── GOOD EXAMPLE ────────────────────────────────────────────────────


class UserValidator:
    """Decides whether a user may be registered: non-blank name and an email containing "@"."""

    def is_valid(self, user: User) -> bool:
        return bool(user.name) and bool(user.email) and "@" in user.email


class UserRepository(Protocol):
    """Anything that can persist a user."""

    def save(self, user: User) -> None: ...


class EmailService(Protocol):
    """Anything that can send the welcome email."""

    def send_welcome_email(self, email: str) -> None: ...


class AuditLog(Protocol):
    """Anything that can record an audit message."""

    def log(self, message: str) -> None: ...


class DatabaseUserRepository:
    """Simulates inserting the user into the users database."""

    def save(self, user: User) -> None:
        print(f"Saving user {user.name} to database")


class WelcomeEmailService:
    """Simulates sending the welcome email."""

    def send_welcome_email(self, email: str) -> None:
        print(f"Sending welcome email to {email}")


class ConsoleAuditLog:
    """Writes audit messages to the console with a "LOG:" prefix."""

    def log(self, message: str) -> None:
        print(f"LOG: {message}")


class UserManager:
    """Coordinates user creation; does none of the work itself.

    Collaborators are injected through the constructor. The validator
    defaults to a plain UserValidator because it has no external
    dependencies worth swapping.
    """

    def __init__(
        self,
        repository: UserRepository,
        email_service: EmailService,
        audit_log: AuditLog,
        validator: UserValidator | None = None,
    ) -> None:
        self._repository = repository
        self._email_service = email_service
        self._audit_log = audit_log
        self._validator = validator or UserValidator()

    def create_user(self, user: User) -> None:
        """Validate, save, welcome and log.

        Raises ``ValueError`` if the user fails validation; nothing is saved
        or sent in that case.
        """
        if not self._validator.is_valid(user):
            logger.debug("Rejected user %r", user)
            raise ValueError("Invalid user data")

        self._repository.save(user)
        self._email_service.send_welcome_email(user.email)
        self._audit_log.log(f"User {user.name} created successfully")
