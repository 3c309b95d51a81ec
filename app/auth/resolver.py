"""Registry of authentication strategies keyed by provider."""

from __future__ import annotations

from app.domain import AuthProvider, StrategyNotFoundError

from .interfaces import AuthStrategyPort


class AuthStrategyResolver:
    """Resolve auth strategies by provider; `local` is the default."""

    def __init__(self, local_strategy: AuthStrategyPort):
        self._strategies: dict[str, AuthStrategyPort] = {"local": local_strategy}

    def resolve(self, provider: AuthProvider) -> AuthStrategyPort:
        """Return the strategy registered for a provider.

        Raises:
            StrategyNotFoundError: Raised when the provider is not registered.
        """

        strategy = self._strategies.get(provider)
        if strategy is None:
            raise StrategyNotFoundError(f"Auth strategy not found for provider: {provider}")
        return strategy

    def get_default(self) -> AuthStrategyPort:
        return self.resolve("local")

    def get_available_providers(self) -> tuple[str, ...]:
        return tuple(self._strategies)
