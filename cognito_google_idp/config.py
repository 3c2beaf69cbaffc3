"""
Configuration settings for the Pulumi deployment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pulumi
from dotenv import load_dotenv

from .secrets import SecretValue

LOGGER = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "cognito-google-idp"
DEFAULT_ENVIRONMENT = "dev"


class ConfigError(ValueError):
    """Raised when required configuration is missing or unusable."""


@dataclass(frozen=True)
class GoogleProviderSettings:
    project_name: str
    environment: str
    user_pool_id: str
    client_id: str
    client_secret: SecretValue
    scopes: Optional[Tuple[str, ...]] = None


def load_settings(config=None, env_file: Optional[str] = ".env") -> GoogleProviderSettings:
    """Load provider settings, preferring environment variables over Pulumi config."""
    if env_file and os.path.exists(env_file):
        load_dotenv(dotenv_path=env_file, override=False)

    if config is None:
        config = pulumi.Config()

    project_name = _setting("PROJECT_NAME", config, "projectName") or DEFAULT_PROJECT_NAME
    environment = _setting("ENVIRONMENT", config, "environment") or DEFAULT_ENVIRONMENT
    user_pool_id = _require_setting("USER_POOL_ID", config, "userPoolId")
    client_id = _require_setting("GOOGLE_CLIENT_ID", config, "googleClientId")
    client_secret = _resolve_client_secret(config)
    scopes = _parse_scopes(_setting("GOOGLE_SCOPES", config, "googleScopes"))

    LOGGER.debug(
        "Loaded Google provider settings for project=%s environment=%s user_pool=%s",
        project_name,
        environment,
        user_pool_id,
    )
    return GoogleProviderSettings(
        project_name=project_name,
        environment=environment,
        user_pool_id=user_pool_id,
        client_id=client_id,
        client_secret=client_secret,
        scopes=scopes,
    )


def common_tags(settings: GoogleProviderSettings) -> Dict[str, str]:
    return {
        "Project": settings.project_name,
        "Environment": settings.environment,
        "ManagedBy": "Pulumi",
    }


def _setting(env_key: str, config, config_key: str) -> Optional[str]:
    value = os.environ.get(env_key)
    if value is not None and value.strip():
        return value.strip()
    value = config.get(config_key)
    if value is not None and str(value).strip():
        return str(value).strip()
    return None


def _require_setting(env_key: str, config, config_key: str) -> str:
    value = _setting(env_key, config, config_key)
    if not value:
        raise ConfigError(
            f"Missing required setting: {env_key} (or Pulumi config '{config_key}')"
        )
    return value


def _resolve_client_secret(config) -> SecretValue:
    if "GOOGLE_CLIENT_SECRET" in os.environ and os.environ["GOOGLE_CLIENT_SECRET"].strip():
        return SecretValue.from_env("GOOGLE_CLIENT_SECRET")
    secret = config.get_secret("googleClientSecret")
    if secret is None:
        raise ConfigError(
            "Missing required setting: GOOGLE_CLIENT_SECRET (or Pulumi secret 'googleClientSecret')"
        )
    return SecretValue.from_output(secret)


def _parse_scopes(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    if not raw:
        return None
    scopes = tuple(chunk.strip() for chunk in raw.replace(" ", ",").split(",") if chunk.strip())
    return scopes or None
