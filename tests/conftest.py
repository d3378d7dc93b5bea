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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from dotenv import load_dotenv

from cryoprison.core.checks import CheckBuilder

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

project_root = Path(__file__).parent.parent
env_file = project_root / ".env"

if env_file.exists():
    load_dotenv(env_file)


# ---------------------------------------------------------------------------
# Inspector doubles
# ---------------------------------------------------------------------------


class RecordingInspector:
    """Inspector double that records what ``init`` received."""

    instances: list[RecordingInspector] = []

    def __init__(self) -> None:
        self.check_id: str | None = None
        self.value: str | None = None
        RecordingInspector.instances.append(self)

    def init(self, check_id: str, value: str) -> RecordingInspector:
        self.check_id = check_id
        self.value = value
        return self


@pytest.fixture
def recording_inspector() -> type[RecordingInspector]:
    """The ``RecordingInspector`` class with a cleared instance log."""
    RecordingInspector.instances = []
    return RecordingInspector


# ---------------------------------------------------------------------------
# Builder and pack fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> CheckBuilder:
    return CheckBuilder()


@pytest.fixture
def write_pack(tmp_path: Path):
    """Factory fixture: write a YAML check pack and return its path."""

    def _write(name: str, body: str, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / f"{name}.yaml"
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write
