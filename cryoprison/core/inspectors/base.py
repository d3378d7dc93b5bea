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

"""
Base inspector interface for jailbreak checks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..exceptions import InspectorNotInitializedError


@runtime_checkable
class Inspector(Protocol):
    """Anything a :class:`~cryoprison.core.checks.CheckBuilder` can initialize."""

    def init(self, check_id: str, value: str) -> Inspector: ...


class BaseInspector(ABC):
    """Abstract base class for inspectors.

    Subclasses set ``id_prefix`` and ``id_suffix``; the jailbreak ID is
    ``<prefix>_<check_id>_<suffix>``.
    """

    id_prefix: str = "CHECK"
    id_suffix: str = "SHOULD_PASS"

    def __init__(self) -> None:
        self.check_id: str | None = None
        self.value: str | None = None

    def init(self, check_id: str, value: str) -> BaseInspector:
        """
        Initialize the inspector.

        Args:
            check_id: Normalized (upper-case) check identifier
            value: Parameter of the check, e.g. a file path

        Returns:
            The inspector itself
        """
        self.check_id = check_id
        self.value = value
        return self

    @property
    def initialized(self) -> bool:
        return self.check_id is not None

    @property
    def id(self) -> str:
        """The jailbreak ID, e.g. ``FILE_SU_SHOULD_NOT_BE_PRESENT``."""
        self._require_init()
        return f"{self.id_prefix}_{self.check_id}_{self.id_suffix}"

    @abstractmethod
    def ok(self) -> bool:
        """
        Run the inspection.

        Returns:
            True if no jailbreak indicator was found
        """
        pass

    def _require_init(self) -> None:
        if not self.initialized:
            raise InspectorNotInitializedError(f"{type(self).__name__} used before init()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(check_id={self.check_id!r}, value={self.value!r})"
