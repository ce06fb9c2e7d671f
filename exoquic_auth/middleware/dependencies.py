"""
FastAPI dependencies exposing the registered subscription authorizer to route handlers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, status

from exoquic_auth.errors import SubscriptionAuthorizerNotInitializedError
from exoquic_auth.services.registry import AuthorizerRegistry, get_subscription_authorizer
from exoquic_auth.services.subscription_authorizer import ExoquicSubscriptionAuthorizer

logger = logging.getLogger(__name__)


def get_subscription_authorizer_dependency(registry: Optional[AuthorizerRegistry] = None):
    def dependency() -> ExoquicSubscriptionAuthorizer:
        try:
            return get_subscription_authorizer(registry)
        except SubscriptionAuthorizerNotInitializedError as exc:
            logger.error("Subscription authorization requested before the authorizer was initialized")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Subscription authorization is not configured",
            ) from exc

    return dependency
