"""
Composition root for the demos.

`ServiceContainer` is the one place that knows which concrete classes sit
behind each abstraction. The CLI creates exactly one container at startup
and hands it to the runner; everything below it receives its collaborators
through constructors.

Unlike a class-level service locator, the container is an ordinary object:
there is no process-wide state, and a test can build its own container (or
skip it entirely and wire objects by hand).
"""

import logging

from solid_examples.domain.discounts import StrategyRegistry
from solid_examples.services.orders import (
    ConsoleOrderLog,
    FileOrderLog,
    MongoDbOrderRepository,
    OrderProcessor,
    SendGridOrderNotifier,
    SmtpOrderNotifier,
    SqlServerOrderRepository,
)
from solid_examples.services.users import (
    ConsoleAuditLog,
    DatabaseUserRepository,
    UserManager,
    WelcomeEmailService,
)

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Lazily creates and caches the services one demo run needs."""

    def __init__(self) -> None:
        self._registry: StrategyRegistry | None = None
        self._user_manager: UserManager | None = None

    def discount_registry(self) -> StrategyRegistry:
        if self._registry is None:
            self._registry = StrategyRegistry.with_defaults()
            logger.info("Discount registry ready with categories %s", self._registry.categories())
        return self._registry

    def user_manager(self) -> UserManager:
        if self._user_manager is None:
            self._user_manager = UserManager(
                DatabaseUserRepository(),
                WelcomeEmailService(),
                ConsoleAuditLog(),
            )
            logger.info("Wired UserManager")
        return self._user_manager

    # Order processors are cheap and stateless; build a fresh one per call
    # so each demo can pick its own wiring.

    def sql_server_order_processor(self) -> OrderProcessor:
        logger.info("Wiring OrderProcessor: SQL Server / SMTP / file log")
        return OrderProcessor(SqlServerOrderRepository(), SmtpOrderNotifier(), FileOrderLog())

    def mongo_order_processor(self) -> OrderProcessor:
        logger.info("Wiring OrderProcessor: MongoDB / SendGrid / console log")
        return OrderProcessor(MongoDbOrderRepository(), SendGridOrderNotifier(), ConsoleOrderLog())
