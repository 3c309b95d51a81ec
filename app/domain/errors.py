"""Domain-level errors shared by pluggable strategy registries."""


class StrategyNotFoundError(LookupError):
    """Raised when a registry has no strategy for the requested provider."""
