"""
Backend helper for authorizing end-user subscriptions to Exoquic topics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from exoquic_auth.config import resolve_environment, resolve_server_url
from exoquic_auth.errors import ExoquicError, SubscriptionAuthorizerNotInitializedError
from exoquic_auth.models.subscription import ResetFrom, SubscriptionAuthorizationRequest
from exoquic_auth.services.registry import (
    AuthorizerRegistry,
    authorize_subscription,
    default_registry,
    get_subscription_authorizer,
    init_subscription_authorizer,
)
from exoquic_auth.services.subscription_authorizer import ExoquicSubscriptionAuthorizer

__version__ = "1.0.0"

__all__ = [
    "AuthorizerRegistry",
    "ExoquicError",
    "ExoquicSubscriptionAuthorizer",
    "ResetFrom",
    "SubscriptionAuthorizationRequest",
    "SubscriptionAuthorizerNotInitializedError",
    "authorize_subscription",
    "default_registry",
    "get_subscription_authorizer",
    "init_subscription_authorizer",
    "resolve_environment",
    "resolve_server_url",
]
