"""
Service for obtaining subscription tokens from Exoquic on behalf of end-users. The authorizer holds the API key and the base address of the authorization service, posts the subscription parameters to `/authorize-subscription`, and returns the signed token the service answers with so the backend can hand it to the end-user without ever exposing the API key. Every failure surfaces as an `ExoquicError`: rejections carry the status code returned by the service, requests that never got a response carry 500.

The success body is read as plain text and returned verbatim as the token.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, Dict, Optional

import httpx

from exoquic_auth.config import config, resolve_server_url
from exoquic_auth.errors import TRANSPORT_FAILURE_STATUS, ExoquicError
from exoquic_auth.models.subscription import SubscriptionAuthorizationRequest
from exoquic_auth.services.common.http_client import create_async_client

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/authorize-subscription"
ERROR_PREFIX = "Failed to authorize subscription: "


class ExoquicSubscriptionAuthorizer:
    def __init__(
        self,
        api_key: str,
        server_url: Optional[str] = None,
        *,
        env: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self._server_url = resolve_server_url(server_url, env)
        self.timeout = float(timeout or config.EXOQUIC_TIMEOUT)
        self._owns_client = client is None
        self._client = client if client is not None else create_async_client(self.timeout)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def server_url(self) -> str:
        return self._server_url

    @property
    def authorize_url(self) -> str:
        return f"{self._server_url}{AUTHORIZE_PATH}"

    def __repr__(self) -> str:
        return f"ExoquicSubscriptionAuthorizer(server_url={self._server_url!r})"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._api_key,
        }

    async def authorize(self, request: Optional[SubscriptionAuthorizationRequest] = None, **fields: Any) -> str:
        """Exchange the subscription parameters for a subscription token.

        Accepts either a `SubscriptionAuthorizationRequest` or its fields as
        keyword arguments. Fields are sent as given; defaults for `reset_from`
        and `expires_at` are applied by `authorize_subscription`, not here.

        Raises:
            ExoquicError: the service rejected the request (status code of the
                response) or the request could not be completed (500).
        """
        if request is None:
            request = SubscriptionAuthorizationRequest(**fields)
        elif fields:
            raise TypeError("Pass either a SubscriptionAuthorizationRequest or keyword fields, not both")

        url = self.authorize_url
        logger.debug("Authorizing subscription to topic %s via %s", request.topic, url)
        try:
            response = await self._client.post(url, json=request.to_payload(), headers=self._headers())
            content = response.text
            if not response.is_success:
                logger.warning(
                    "Exoquic rejected subscription authorization: %s %s",
                    response.status_code,
                    content[:240],
                )
                raise ExoquicError(f"{ERROR_PREFIX}{content}", response.status_code)
            return content
        except ExoquicError:
            raise
        except Exception as exc:
            logger.warning("Subscription authorization request to %s failed: %s", url, exc)
            raise ExoquicError(f"{ERROR_PREFIX}{exc}", TRANSPORT_FAILURE_STATUS) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ExoquicSubscriptionAuthorizer":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
