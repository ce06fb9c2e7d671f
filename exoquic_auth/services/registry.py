"""
Process-wide registry for the subscription authorizer and the convenience functions built on it. `init_subscription_authorizer` builds an authorizer and stores it; `authorize_subscription` fills in the reset policy and a fresh expiration, then forwards to the stored authorizer. Code that prefers explicit wiring can pass its own `AuthorizerRegistry`, or skip the registry and hold an `ExoquicSubscriptionAuthorizer` directly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import threading
from typing import Optional

import httpx

from exoquic_auth.config import config
from exoquic_auth.errors import SubscriptionAuthorizerNotInitializedError
from exoquic_auth.models.subscription import SubscriptionAuthorizationRequest
from exoquic_auth.services.subscription_authorizer import ExoquicSubscriptionAuthorizer

logger = logging.getLogger(__name__)


class AuthorizerRegistry:

    def __init__(self) -> None:
        self._authorizer: Optional[ExoquicSubscriptionAuthorizer] = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        with self._lock:
            return self._authorizer is not None

    def set(self, authorizer: ExoquicSubscriptionAuthorizer) -> Optional[ExoquicSubscriptionAuthorizer]:
        with self._lock:
            previous, self._authorizer = self._authorizer, authorizer
        if previous is not None:
            logger.info("Replaced subscription authorizer for %s with %s", previous.server_url, authorizer.server_url)
        return previous

    def get(self) -> ExoquicSubscriptionAuthorizer:
        with self._lock:
            authorizer = self._authorizer
        if authorizer is None:
            raise SubscriptionAuthorizerNotInitializedError(
                "Subscription authorizer is not initialized. Call init_subscription_authorizer() first."
            )
        return authorizer

    def clear(self) -> Optional[ExoquicSubscriptionAuthorizer]:
        with self._lock:
            previous, self._authorizer = self._authorizer, None
        return previous


default_registry = AuthorizerRegistry()


def init_subscription_authorizer(
    api_key: Optional[str] = None,
    env: Optional[str] = None,
    server_url: Optional[str] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    registry: Optional[AuthorizerRegistry] = None,
) -> ExoquicSubscriptionAuthorizer:
    """Create the authorizer used by `authorize_subscription`.

    Call once at application startup. Calling again replaces the stored
    authorizer without closing it; fetch it first with
    `get_subscription_authorizer()` and `await old.aclose()` once it is no
    longer in use, or its connection pool stays open. Without `api_key` the
    EXOQUIC_API_KEY environment variable is used.
    """
    key = api_key or config.EXOQUIC_API_KEY
    if not key:
        raise ValueError("An Exoquic API key is required (pass api_key or set EXOQUIC_API_KEY)")

    authorizer = ExoquicSubscriptionAuthorizer(key, server_url, env=env, client=client)
    (registry or default_registry).set(authorizer)
    logger.info("Subscription authorizer initialized for %s", authorizer.server_url)
    return authorizer


def get_subscription_authorizer(registry: Optional[AuthorizerRegistry] = None) -> ExoquicSubscriptionAuthorizer:
    return (registry or default_registry).get()


async def authorize_subscription(
    topic: str,
    channel: Optional[str] = None,
    subscription_id: Optional[str] = None,
    reset_from: Optional[str] = None,
    expires_at: Optional[int] = None,
    *,
    registry: Optional[AuthorizerRegistry] = None,
) -> str:
    """Return a subscription token for the end-user.

    The token is a signed JWT from Exoquic carrying the topic, channel and
    subscription ID. `reset_from` defaults to "earliest" and decides where the
    subscriber restarts when `subscription_id` is unknown or points at a deleted
    event. `expires_at` defaults to two minutes from now in unix seconds.

    Raises:
        SubscriptionAuthorizerNotInitializedError: `init_subscription_authorizer`
            was never called for this registry.
        ExoquicError: the authorization failed.
    """
    authorizer = get_subscription_authorizer(registry)
    request = SubscriptionAuthorizationRequest(
        topic=topic,
        channel=channel,
        subscription_id=subscription_id,
        reset_from=reset_from,
        expires_at=expires_at,
    ).with_defaults()
    return await authorizer.authorize(request)
