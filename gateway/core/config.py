"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the user-facing
texts written into normalized responses.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from gateway.domain.normalization.entities import (
    CLIENT_ERROR_MESSAGE,
    DELETED_MESSAGE,
    SERVER_ERROR_MESSAGE,
    UNCLASSIFIED_ERROR_MESSAGE,
    NormalizationPolicy,
    Severity,
)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_rewrites: Log every rewritten response at DEBUG, whatever
            the global log level.
        deleted_message: Message for a successful DELETE.
        client_error_message: Message for a 400 on an unrecognized verb.
        server_error_message: Message for 500-503 responses.
        unclassified_error_message: Message for any other error status.
        emit_error_severity: Tag server and unclassified envelopes
            with ``"type": "Error"`` instead of omitting the key.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Response Envelope Gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_rewrites: bool = False

    deleted_message: str = DELETED_MESSAGE
    client_error_message: str = CLIENT_ERROR_MESSAGE
    server_error_message: str = SERVER_ERROR_MESSAGE
    unclassified_error_message: str = UNCLASSIFIED_ERROR_MESSAGE
    emit_error_severity: bool = False

    def to_policy(self) -> NormalizationPolicy:
        """Build the domain policy from these settings."""
        return NormalizationPolicy(
            deleted_message=self.deleted_message,
            client_error_message=self.client_error_message,
            server_error_message=self.server_error_message,
            unclassified_error_message=self.unclassified_error_message,
            error_severity=Severity.ERROR if self.emit_error_severity else None,
        )


settings = Settings()
