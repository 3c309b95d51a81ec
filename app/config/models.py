"""Immutable configuration snapshot and per-environment override bundles.

Every section is a frozen dataclass and list-valued fields are tuples, so a
built `Configuration` cannot be mutated by any consumer after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.engine import URL

from .constants import DEFAULT_ADMIN_EMAIL
from .environments import Environment


@dataclass(frozen=True)
class AppConfig:
    """Application section of the resolved configuration.

    Attributes:
        name: Service name.
        environment: Resolved deployment environment.
        port: HTTP listen port in `[PORT_MIN, PORT_MAX]`.
        api_prefix: Route prefix without leading or trailing slashes.
        cors_origins: Allowed cross-origin sources in declaration order.
        log_level: Log verbosity name.
        log_format: Log rendering format (`json` or `pretty`).
        host: Interface the HTTP server binds to.
    """

    name: str
    environment: Environment
    port: int
    api_prefix: str
    cors_origins: tuple[str, ...]
    log_level: str
    log_format: str
    host: str


@dataclass(frozen=True)
class DatabaseConfig:
    """Datastore section of the resolved configuration.

    Attributes:
        host: Database host name.
        port: Database port.
        username: Database role name.
        password: Database role password.
        name: Database name.
        url: Optional full connection URL that wins over the discrete fields.
    """

    host: str
    port: int
    username: str
    password: str = field(repr=False)
    name: str
    url: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class CacheConfig:
    """Cache section of the resolved configuration."""

    host: str
    port: int
    password: str = field(default="", repr=False)


@dataclass(frozen=True)
class SecurityConfig:
    """Security section of the resolved configuration."""

    jwt_secret: str = field(repr=False)
    session_secret: str = field(repr=False)
    api_key: str | None = field(default=None, repr=False)
    admin_email: str = DEFAULT_ADMIN_EMAIL
    admin_bootstrap_password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class Configuration:
    """Fully resolved configuration snapshot shared read-only across the process."""

    app: AppConfig
    database: DatabaseConfig
    cache: CacheConfig
    security: SecurityConfig

    def is_production(self) -> bool:
        """Return whether the resolved environment is production."""

        return self.app.environment is Environment.PRODUCTION

    def database_url(self) -> str:
        """Return the connection string consumers should use for the datastore.

        Returns:
            str: `DB_URL` verbatim when configured, otherwise a psycopg URL
            composed from the discrete datastore fields.
        """

        if self.database.url:
            return self.database.url
        composed_url = URL.create(
            "postgresql+psycopg",
            username=self.database.username,
            password=self.database.password,
            host=self.database.host,
            port=self.database.port,
            database=self.database.name,
        )
        return composed_url.render_as_string(hide_password=False)


@dataclass(frozen=True)
class AppOverrides:
    """Optional application values supplied by an environment overlay."""

    port: int | None = None
    api_prefix: str | None = None
    cors_origins: tuple[str, ...] | None = None
    log_level: str | None = None
    log_format: str | None = None


@dataclass(frozen=True)
class DatabaseOverrides:
    """Optional datastore values supplied by an environment overlay."""

    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    name: str | None = None
    url: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class CacheOverrides:
    """Optional cache values supplied by an environment overlay."""

    host: str | None = None
    port: int | None = None
    password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class SecurityOverrides:
    """Optional security values supplied by an environment overlay."""

    jwt_secret: str | None = field(default=None, repr=False)
    session_secret: str | None = field(default=None, repr=False)
    api_key: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class ConfigurationOverrides:
    """Per-environment bundle of optional section values."""

    app: AppOverrides = field(default_factory=AppOverrides)
    database: DatabaseOverrides = field(default_factory=DatabaseOverrides)
    cache: CacheOverrides = field(default_factory=CacheOverrides)
    security: SecurityOverrides = field(default_factory=SecurityOverrides)
