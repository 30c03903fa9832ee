"""Model with service configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
    FilePath,
    PositiveInt,
    SecretStr,
)

from typing_extensions import Self, Literal

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class TLSConfiguration(ConfigurationBase):
    """TLS configuration."""

    tls_certificate_path: Optional[FilePath] = None
    tls_key_path: Optional[FilePath] = None
    tls_key_password: Optional[FilePath] = None

    @model_validator(mode="after")
    def check_tls_configuration(self) -> Self:
        """Check TLS configuration."""
        if (self.tls_certificate_path is None) != (self.tls_key_path is None):
            raise ValueError(
                "Both TLS certificate and TLS key need to be specified together"
            )
        return self


class CORSConfiguration(ConfigurationBase):
    """CORS configuration."""

    allow_origins: list[str] = [
        "*"
    ]  # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_credentials: bool = False
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins per CORS/Fetch spec.
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains '*' wildcard."
                "Use explicit origins or disable credential."
            )
        return self


class SQLiteDatabaseConfiguration(ConfigurationBase):
    """SQLite database configuration."""

    db_path: str = Field(..., min_length=1)


class PostgreSQLDatabaseConfiguration(ConfigurationBase):
    """PostgreSQL database configuration."""

    host: str = "localhost"
    port: PositiveInt = 5432
    db: str
    user: str
    password: SecretStr
    namespace: Optional[str] = None
    ssl_mode: str = constants.POSTGRES_DEFAULT_SSL_MODE
    gss_encmode: str = constants.POSTGRES_DEFAULT_GSS_ENCMODE
    ca_cert_path: Optional[FilePath] = None
    pool_min_size: PositiveInt = constants.POSTGRES_DEFAULT_POOL_MIN_SIZE
    pool_max_size: PositiveInt = constants.POSTGRES_DEFAULT_POOL_MAX_SIZE

    @model_validator(mode="after")
    def check_postgres_configuration(self) -> Self:
        """Check PostgreSQL configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        if self.pool_min_size > self.pool_max_size:
            raise ValueError(
                "Minimal connection pool size can not be greater than maximal size"
            )
        return self


class CredentialStoreConfiguration(ConfigurationBase):
    """Credential store configuration.

    Exactly one data source (SQLite or PostgreSQL) has to be configured,
    together with the symmetric key used to encrypt tokens at rest. Both are
    mandatory, the service can not start without them.
    """

    encryption_key: SecretStr
    sqlite: Optional[SQLiteDatabaseConfiguration] = None
    postgres: Optional[PostgreSQLDatabaseConfiguration] = None

    @model_validator(mode="after")
    def check_credential_store_configuration(self) -> Self:
        """Check that key is set and exactly one data source is configured."""
        if not self.encryption_key.get_secret_value().strip():
            raise ValueError("Encryption key for credential store is not set")

        total_configured_dbs = sum([self.sqlite is not None, self.postgres is not None])
        if total_configured_dbs == 0:
            raise ValueError("Data source for credential store is not set")
        if total_configured_dbs > 1:
            raise ValueError("Only one data source can be provided")
        return self

    @property
    def store_type(self) -> Literal["sqlite", "postgres"]:
        """Return the configured credential store type."""
        if self.sqlite is not None:
            return "sqlite"
        if self.postgres is not None:
            return "postgres"
        raise ValueError("No data source configuration found")


class ServiceConfiguration(ConfigurationBase):
    """Service configuration."""

    host: str = "localhost"
    port: PositiveInt = 8080
    workers: PositiveInt = 1
    color_log: bool = True
    access_log: bool = True
    tls_config: TLSConfiguration = Field(default_factory=TLSConfiguration)
    cors: CORSConfiguration = Field(default_factory=CORSConfiguration)

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class QuotaSchedulerConfiguration(ConfigurationBase):
    """Quota scheduler configuration."""

    enabled: bool = True


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str = constants.DEFAULT_SERVICE_NAME
    service: ServiceConfiguration = Field(default_factory=ServiceConfiguration)
    credential_store: CredentialStoreConfiguration
    quota_scheduler: QuotaSchedulerConfiguration = Field(
        default_factory=QuotaSchedulerConfiguration
    )

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file.

        Secret values (encryption key, database password) are masked.
        """
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
