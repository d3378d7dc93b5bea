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
Fluent check builder.

A *check* pairs an identifier with the parameter handed to an inspector.
The :class:`CheckBuilder` collects checks against a list of root paths and
later turns them into initialized inspectors:

.. code-block:: python

    inspectors = (
        CheckBuilder()
        .add_roots("/system/bin/", "/system/xbin/")
        .add("SU", "su")
        .get_inspectors(FileNotPresentInspector)
    )

Roots are expanded when a check is *added*.  Roots registered after an
``add`` call do not apply to the checks that call produced.  If a path
separator is required, include it consistently either in every root or in
every added value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config.constants import CryoprisonConstants
from .exceptions import InvalidCheckError

if TYPE_CHECKING:
    from ..config.config import Config
    from .inspectors.base import Inspector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Check:
    """An id/value pair naming one inspector to instantiate."""

    check_id: str
    """Identifier of the check, e.g. ``SU``.  Upper-cased only when an
    inspector is initialized."""

    value: str
    """The parameter passed to the inspector: root prefix plus suffix."""


class CheckBuilder:
    """Fluent factory that accumulates checks for a jailbreak test run.

    Both internal lists are append-only.  Mutating methods return the
    builder itself so calls can be chained.
    """

    def __init__(self) -> None:
        self._root_paths: list[str] = [CryoprisonConstants.DEFAULT_ROOT]
        self._checks: list[Check] = []

    @classmethod
    def from_config(cls, config: Config) -> CheckBuilder:
        """Create a builder seeded with the roots from *config*."""
        return cls().add_roots(*config.root_paths)

    # -- Mutation -----------------------------------------------------------

    def add_roots(self, *roots: str) -> CheckBuilder:
        """Append *roots*, in order, to the root paths.

        Raises :class:`InvalidCheckError` if any root is ``None``; nothing is
        appended in that case.
        """
        if any(root is None for root in roots):
            raise InvalidCheckError("Root path must not be None")
        self._root_paths.extend(roots)
        logger.debug("Added %d root path(s); %d total", len(roots), len(self._root_paths))
        return self

    def add(self, check_id: str, value: str) -> CheckBuilder:
        """Add one check per current root path, with value ``root + value``."""
        self._validate(check_id, value)
        for root in self._root_paths:
            self._checks.append(Check(check_id=check_id, value=root + value))
        return self

    def add_many(self, check_id: str, *values: str) -> CheckBuilder:
        """Call :meth:`add` for each of *values*, in order."""
        for value in values:
            self._validate(check_id, value)
        for value in values:
            self.add(check_id, value)
        return self

    # -- Read-only accessors ------------------------------------------------

    @property
    def root_paths(self) -> tuple[str, ...]:
        """Snapshot of the root paths, default empty root first."""
        return tuple(self._root_paths)

    @property
    def checks(self) -> tuple[Check, ...]:
        """Snapshot of the accumulated checks in insertion order."""
        return tuple(self._checks)

    def get_inspectors(self, inspector_type: Callable[[], Inspector]) -> list[Inspector]:
        """Build one initialized inspector per accumulated check.

        Args:
            inspector_type: A class or zero-argument factory producing an
                object with ``init(check_id, value)``.

        Returns:
            A new list of inspectors, in check order.  Each is the object
            returned by ``init`` called with the upper-cased check ID and
            the stored value.  Errors raised by the factory or by ``init``
            propagate unchanged.
        """
        inspectors = [inspector_type().init(check.check_id.upper(), check.value) for check in self._checks]
        logger.debug("Built %d inspector(s) from %r", len(inspectors), inspector_type)
        return inspectors

    def __len__(self) -> int:
        return len(self._checks)

    def __iter__(self) -> Iterator[Check]:
        return iter(tuple(self._checks))

    def __repr__(self) -> str:
        return f"CheckBuilder(roots={len(self._root_paths)}, checks={len(self._checks)})"

    @staticmethod
    def _validate(check_id: str, value: str) -> None:
        if check_id is None:
            raise InvalidCheckError("Check ID must not be None")
        if value is None:
            raise InvalidCheckError(f"Value for check '{check_id}' must not be None")
