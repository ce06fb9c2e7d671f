"""
Subscription authorization endpoint for backends built on FastAPI. The router checks whether the calling end-user may subscribe to the requested topic, then exchanges the request for a subscription token through the registered authorizer and returns `{"token": ...}` to the end-user's client.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from exoquic_auth.middleware.dependencies import get_subscription_authorizer_dependency
from exoquic_auth.middleware.error_handlers import handle_route_errors
from exoquic_auth.models.subscription import SubscriptionAuthorizationRequest
from exoquic_auth.services.registry import AuthorizerRegistry
from exoquic_auth.services.subscription_authorizer import ExoquicSubscriptionAuthorizer

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/authorize-subscriptions"
FORBIDDEN_DETAIL = "User is not allowed to subscribe to this topic"

AccessCheck = Callable[[Request, SubscriptionAuthorizationRequest], Union[bool, Awaitable[bool]]]


def build_subscription_router(
    is_allowed: AccessCheck,
    *,
    prefix: str = "",
    path: str = DEFAULT_PATH,
    registry: Optional[AuthorizerRegistry] = None,
    tags: Optional[list[str]] = None,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags or ["exoquic-subscriptions"])
    authorizer_dependency = get_subscription_authorizer_dependency(registry)

    @router.post(path)
    @handle_route_errors()
    async def authorize_subscriptions(
        request: Request,
        payload: SubscriptionAuthorizationRequest = Body(...),
        authorizer: ExoquicSubscriptionAuthorizer = Depends(authorizer_dependency),
    ):
        allowed = is_allowed(request, payload)
        if inspect.isawaitable(allowed):
            allowed = await allowed
        if not allowed:
            logger.info("Denied subscription authorization for topic %s", payload.topic)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL)

        token = await authorizer.authorize(payload.with_defaults())
        return {"token": token}

    return router
