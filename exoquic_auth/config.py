"""
Configuration for the Exoquic subscription authorizer, loading settings from environment variables with defaults and type conversion. This module defines a `Config` class holding the deployment environment tag, the optional API key, and the transport tuning handed to the HTTP client, together with the pure resolution functions that turn an explicit server URL, an explicit environment tag, or the process environment into the base address of the authorization service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "dev"
ENV_CONTEXT_VARIABLE = "EXOQUIC_ENV_CONTEXT"
SERVER_URL_TEMPLATE = "https://{env}.exoquic.com"


def _to_float(value: Optional[str], default: float) -> float:
    if value is None or not str(value).strip():
        return default
    return float(value)


def _to_int(value: Optional[str], default: int) -> int:
    if value is None or not str(value).strip():
        return default
    return int(value)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None


def resolve_environment(env: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Pick the deployment tag: explicit `env`, then EXOQUIC_ENV_CONTEXT, then "dev"."""
    explicit = _clean(env)
    if explicit:
        return explicit
    source = os.environ if environ is None else environ
    return _clean(source.get(ENV_CONTEXT_VARIABLE)) or DEFAULT_ENVIRONMENT


def resolve_server_url(
    server_url: Optional[str] = None,
    env: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Base address of the authorization service.

    An explicit `server_url` always wins; otherwise the address is derived from
    the environment tag picked by `resolve_environment`.
    """
    explicit = _clean(server_url)
    if explicit:
        return explicit.rstrip("/")
    return SERVER_URL_TEMPLATE.format(env=resolve_environment(env, environ))


class Config:
    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        source = os.environ if environ is None else environ

        # Deployment
        self.EXOQUIC_ENV_CONTEXT: str = resolve_environment(environ=source)
        self.EXOQUIC_API_KEY: Optional[str] = _clean(source.get("EXOQUIC_API_KEY"))

        # Request settings
        self.EXOQUIC_TIMEOUT: float = _to_float(source.get("EXOQUIC_TIMEOUT"), 30.0)

        # Shared upstream HTTP client pool tuning
        self.HTTP_CLIENT_MAX_CONNECTIONS: int = _to_int(source.get("HTTP_CLIENT_MAX_CONNECTIONS"), 100)
        self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS: int = _to_int(
            source.get("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS"), 20
        )
        self.HTTP_CLIENT_KEEPALIVE_EXPIRY: float = _to_float(source.get("HTTP_CLIENT_KEEPALIVE_EXPIRY"), 30.0)

        self.validate()
        logger.debug("Exoquic environment: %s", self.EXOQUIC_ENV_CONTEXT)

    @property
    def DEFAULT_SERVER_URL(self) -> str:
        return resolve_server_url(env=self.EXOQUIC_ENV_CONTEXT)

    def validate(self) -> None:
        if self.EXOQUIC_TIMEOUT <= 0:
            raise ValueError("EXOQUIC_TIMEOUT must be greater than 0")
        if self.HTTP_CLIENT_MAX_CONNECTIONS <= 0:
            raise ValueError("HTTP_CLIENT_MAX_CONNECTIONS must be greater than 0")
        if self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS < 0:
            raise ValueError("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS cannot be negative")
        if self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS > self.HTTP_CLIENT_MAX_CONNECTIONS:
            raise ValueError("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS cannot exceed HTTP_CLIENT_MAX_CONNECTIONS")
        if self.HTTP_CLIENT_KEEPALIVE_EXPIRY < 0:
            raise ValueError("HTTP_CLIENT_KEEPALIVE_EXPIRY cannot be negative")


config = Config()
