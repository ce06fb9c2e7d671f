"""
Error types raised by the subscription authorizer. A single `ExoquicError` carries a human-readable message and the HTTP status code of the failure, used both when the authorization service rejects a request and when the request could not be completed at all.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

TRANSPORT_FAILURE_STATUS = 500


class ExoquicError(Exception):
    def __init__(self, message: str, status_code: int = TRANSPORT_FAILURE_STATUS) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"ExoquicError(message={self.message!r}, status_code={self.status_code})"


class SubscriptionAuthorizerNotInitializedError(RuntimeError):
    pass
