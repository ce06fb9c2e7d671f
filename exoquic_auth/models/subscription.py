"""
Pydantic model for the subscription authorization request sent to Exoquic, with the camelCase wire aliases, the serialization used for the request body, and the per-call defaults for the reset policy and token expiration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
import time
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Description constants
DESC_TOPIC = "Topic to authorize"
DESC_CHANNEL = "Channel within the topic to authorize"
DESC_SUBSCRIPTION_ID = "Subscription ID used to resume from a prior read position"
DESC_RESET_FROM = "Where to reset the subscriber when the subscription ID is not found: 'earliest' or 'latest'"
DESC_EXPIRES_AT = "Expiration of the subscription token in unix seconds"


class ResetFrom(str, Enum):
    EARLIEST = "earliest"
    LATEST = "latest"


DEFAULT_RESET_FROM = ResetFrom.EARLIEST.value
DEFAULT_TOKEN_TTL_SECONDS = 120


class SubscriptionAuthorizationRequest(BaseModel):
    topic: str = Field(..., description=DESC_TOPIC)
    channel: Optional[str] = Field(None, description=DESC_CHANNEL)
    subscription_id: Optional[str] = Field(None, alias="subscriptionId", description=DESC_SUBSCRIPTION_ID)
    reset_from: Optional[str] = Field(None, alias="resetFrom", description=DESC_RESET_FROM)
    expires_at: Optional[int] = Field(None, alias="expiresAt", description=DESC_EXPIRES_AT)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("reset_from", mode="before")
    @classmethod
    def _unwrap_reset_from(cls, value: Any) -> Any:
        return value.value if isinstance(value, ResetFrom) else value

    def with_defaults(self, now: Optional[float] = None) -> "SubscriptionAuthorizationRequest":
        """Copy with the reset policy and expiration filled in when missing.

        The expiration is computed from `now` (default: the current time) on every
        call so each authorization gets a fresh two minute window.
        """
        update: Dict[str, Any] = {}
        if self.reset_from is None:
            update["reset_from"] = DEFAULT_RESET_FROM
        if self.expires_at is None:
            current = time.time() if now is None else now
            update["expires_at"] = int(current) + DEFAULT_TOKEN_TTL_SECONDS
        return self.model_copy(update=update) if update else self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
