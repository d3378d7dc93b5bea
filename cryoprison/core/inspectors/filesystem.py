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
File-system inspectors.

Each inspector treats its value as a path and reports a jailbreak
indicator when that path exists.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path

from .base import BaseInspector

logger = logging.getLogger(__name__)


class _PathNotPresentInspector(BaseInspector):
    id_suffix = "SHOULD_NOT_BE_PRESENT"

    @abstractmethod
    def _present(self, path: Path) -> bool:
        pass

    def ok(self) -> bool:
        self._require_init()
        path = Path(self.value)
        try:
            present = self._present(path)
        except OSError as exc:
            # Unreadable paths count as absent
            logger.debug("Could not probe %s for %s: %s", path, self.check_id, exc)
            return True
        if present:
            logger.debug("Jailbreak indicator %s found at %s", self.id, path)
        return not present


class FileNotPresentInspector(_PathNotPresentInspector):
    """Passes unless the value names an existing regular file."""

    id_prefix = "FILE"

    def _present(self, path: Path) -> bool:
        return path.is_file()


class DirectoryNotPresentInspector(_PathNotPresentInspector):
    """Passes unless the value names an existing directory."""

    id_prefix = "DIRECTORY"

    def _present(self, path: Path) -> bool:
        return path.is_dir()
