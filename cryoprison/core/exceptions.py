# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Cryoprison exceptions.

This module defines custom exceptions for Cryoprison operations.
All exceptions inherit from CryoprisonError for easy catching.

Example:
    >>> from cryoprison.core.checks import CheckBuilder
    >>> from cryoprison.core.exceptions import InvalidCheckError
    >>>
    >>> try:
    ...     CheckBuilder().add("SU", None)
    ... except InvalidCheckError as e:
    ...     print(f"Bad check declaration: {e}")
"""


class CryoprisonError(Exception):
    """Base exception for all Cryoprison errors."""

    pass


class InvalidCheckError(CryoprisonError, ValueError):
    """Raised when a check declaration is missing a required part.

    This indicates:
    - A ``None`` check identifier
    - A ``None`` value or root path
    """

    pass


class CheckPackError(CryoprisonError):
    """Raised when a check pack cannot be loaded.

    This can indicate:
    - Missing pack file
    - Invalid YAML
    - Unknown step kind or non-string values
    """

    pass


class InspectorNotInitializedError(CryoprisonError):
    """Raised when an inspector is used before ``init`` was called."""

    pass
