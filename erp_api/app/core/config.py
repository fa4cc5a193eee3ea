"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all.  In a production
deployment you should override these via environment variables or a
dedicated configuration service.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "ERP API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Optional static token for administrator API access.  Requests
    # carrying this token in the Authorization header bypass normal
    # authentication and act as an admin of ``default_company_id``.
    super_admin_static_token: str = os.getenv("SUPER_ADMIN_TOKEN", "")

    # Company assigned to users that register without one and to the
    # static administrator token.
    default_company_id: str = os.getenv("DEFAULT_COMPANY_ID", "default")

    # Upper bound of the in-memory audit trail; oldest entries are dropped.
    max_audit_entries: int = int(os.getenv("MAX_AUDIT_ENTRIES", "10000"))

    # Login attempts allowed per e-mail address within the window.
    login_max_attempts: int = int(os.getenv("LOGIN_MAX_ATTEMPTS", "5"))
    login_window_seconds: int = int(os.getenv("LOGIN_WINDOW_SECONDS", str(15 * 60)))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
