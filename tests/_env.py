"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

_UNSET_FOR_TESTS = ("EXOQUIC_ENV_CONTEXT", "EXOQUIC_API_KEY")


def ensure_test_env() -> None:
    for key in _UNSET_FOR_TESTS:
        os.environ.pop(key, None)
    os.environ.setdefault("EXOQUIC_TIMEOUT", "5")
