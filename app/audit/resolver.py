"""Registry of audit-trail strategies with one active provider."""

from __future__ import annotations

import structlog

from app.config import Configuration
from app.domain import AuditProvider, StrategyNotFoundError

from .interfaces import AuditTrailStrategyPort

logger = structlog.get_logger(__name__)


class AuditStrategyResolver:
    """Resolve audit strategies by provider and track the active one.

    The active provider starts as `database` in production and `console`
    everywhere else.
    """

    def __init__(
        self,
        config: Configuration,
        console_strategy: AuditTrailStrategyPort,
        database_strategy: AuditTrailStrategyPort | None = None,
    ):
        """Initialize the resolver.

        Args:
            config: Configuration snapshot used to pick the initial provider.
            console_strategy: Log-backed strategy, always available.
            database_strategy: Table-backed strategy, when a datastore is wired.

        Raises:
            ValueError: Raised when production has no database strategy.
        """

        self._strategies: dict[str, AuditTrailStrategyPort] = {"console": console_strategy}
        if database_strategy is not None:
            self._strategies["database"] = database_strategy
        if config.is_production() and database_strategy is None:
            raise ValueError("database_strategy is required in production")
        self._active_provider: str = "database" if config.is_production() else "console"

    def resolve(self, provider: AuditProvider) -> AuditTrailStrategyPort:
        """Return the strategy registered for a provider.

        Raises:
            StrategyNotFoundError: Raised when the provider is not registered.
        """

        strategy = self._strategies.get(provider)
        if strategy is None:
            raise StrategyNotFoundError(f"Audit strategy not found for provider: {provider}")
        return strategy

    def get_active(self) -> AuditTrailStrategyPort:
        return self.resolve(self._active_provider)

    def set_active(self, provider: AuditProvider) -> None:
        """Switch the active provider.

        Raises:
            StrategyNotFoundError: Raised when the provider is not registered.
        """

        self.resolve(provider)
        self._active_provider = provider
        logger.info("audit_strategy_switched", provider=provider)

    def get_available_providers(self) -> tuple[str, ...]:
        return tuple(self._strategies)
