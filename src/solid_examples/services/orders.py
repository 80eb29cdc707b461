"""
Order processing (Dependency Inversion Principle).

BAD: `BadOrderProcessor` (high-level policy) builds `SqlServerDatabase`,
`SmtpMailer` and `FileLogger` (low-level details) in its own constructor.
Switching databases or testing without a real SMTP server means editing the
processor.

GOOD: `OrderProcessor` depends on three Protocols (`OrderRepository`,
`OrderNotifier`, `OrderLog`). Concrete implementations are chosen by the
composition root (see services/factory.py) and passed in through the
constructor, so the processor never changes when a detail does.
"""

import logging
from typing import Protocol

from solid_examples.domain.models import Order

logger = logging.getLogger(__name__)


# ── BAD EXAMPLE ─────────────────────────────────────────────────────
# Low-level details with no abstraction in front of them.


class SqlServerDatabase:
    """Concrete SQL Server access, used directly by BadOrderProcessor."""

    def save(self, order: Order) -> None:
        print(f"Saving order {order.id} to SQL Server")


class SmtpMailer:
    """Concrete SMTP client, used directly by BadOrderProcessor."""

    def send_confirmation(self, email: str) -> None:
        print(f"Sending confirmation email to {email} via SMTP")


class FileLogger:
    """Concrete file logger, used directly by BadOrderProcessor."""

    def log(self, message: str) -> None:
        print(f"Logging to file: {message}")


class BadOrderProcessor:
    """High-level policy that constructs its own low-level details."""

    def __init__(self) -> None:
        # Hard-wired: the processor is now tied to these exact classes.
        self._database = SqlServerDatabase()
        self._mailer = SmtpMailer()
        self._logger = FileLogger()

    def process_order(self, order: Order) -> None:
        self._database.save(order)
        self._mailer.send_confirmation(order.customer_email)
        self._logger.log(f"Order {order.id} processed")


# ── GOOD EXAMPLE ────────────────────────────────────────────────────


class OrderRepository(Protocol):
    """Anything that can persist an order."""

    def save(self, order: Order) -> None: ...


class OrderNotifier(Protocol):
    """Anything that can send an order confirmation."""

    def send_confirmation(self, email: str) -> None: ...


class OrderLog(Protocol):
    """Anything that can record an order event."""

    def log(self, message: str) -> None: ...


class OrderProcessor:
    """High-level policy: save, confirm, log. Knows nothing about SQL or SMTP."""

    def __init__(self, repository: OrderRepository, notifier: OrderNotifier, order_log: OrderLog) -> None:
        self._repository = repository
        self._notifier = notifier
        self._order_log = order_log

    def process_order(self, order: Order) -> None:
        logger.debug(
            "Processing order %s with %s, %s, %s",
            order.id,
            type(self._repository).__name__,
            type(self._notifier).__name__,
            type(self._order_log).__name__,
        )
        self._repository.save(order)
        self._notifier.send_confirmation(order.customer_email)
        self._order_log.log(f"Order {order.id} processed")


# Low-level implementations of the abstractions above.


class SqlServerOrderRepository:
    """Simulates saving orders to SQL Server."""

    def save(self, order: Order) -> None:
        print(f"Saving order {order.id} to SQL Server")


class MongoDbOrderRepository:
    """Simulates saving orders to MongoDB."""

    def save(self, order: Order) -> None:
        print(f"Saving order {order.id} to MongoDB")


class SmtpOrderNotifier:
    """Simulates sending confirmations over SMTP."""

    def send_confirmation(self, email: str) -> None:
        print(f"Sending confirmation email to {email} via SMTP")


class SendGridOrderNotifier:
    """Simulates sending confirmations through the SendGrid API."""

    def send_confirmation(self, email: str) -> None:
        print(f"Sending confirmation email to {email} via SendGrid")


class FileOrderLog:
    """Simulates appending order events to a log file."""

    def log(self, message: str) -> None:
        print(f"Logging to file: {message}")


class ConsoleOrderLog:
    """Writes order events to the console."""

    def log(self, message: str) -> None:
        print(f"Console log: {message}")
