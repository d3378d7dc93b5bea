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
Check packs – builder declarations stored as YAML.

A pack replays a sequence of builder calls:

.. code-block:: yaml

    name: android
    description: Common root artefacts on Android
    steps:
      - roots: ["/system/bin/", "/system/xbin/"]
      - check: SU
        values: [su]

Steps run in document order, so a ``roots`` step only affects the checks
declared after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..config.constants import CryoprisonConstants
from .checks import CheckBuilder
from .exceptions import CheckPackError

if TYPE_CHECKING:
    from ..config.config import Config

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RootsStep:
    """Register additional root paths."""

    roots: tuple[str, ...]

    def apply(self, builder: CheckBuilder) -> None:
        builder.add_roots(*self.roots)


@dataclass(frozen=True)
class CheckStep:
    """Declare one check ID with one or more values."""

    check_id: str
    values: tuple[str, ...]

    def apply(self, builder: CheckBuilder) -> None:
        builder.add_many(self.check_id, *self.values)


@dataclass
class CheckPack:
    """A named sequence of builder steps loaded from one YAML file.

    Attributes:
        name: Pack name (defaults to the file stem).
        description: Human-readable description.
        path: File the pack was loaded from, if any.
        steps: Builder steps in document order.
    """

    name: str
    description: str = ""
    path: Path | None = None
    steps: list[RootsStep | CheckStep] = field(default_factory=list)

    def build(self, builder: CheckBuilder | None = None) -> CheckBuilder:
        """Replay the steps on *builder* (a fresh one if omitted)."""
        builder = builder if builder is not None else CheckBuilder()
        for step in self.steps:
            step.apply(builder)
        logger.debug("Pack '%s' produced %d check(s)", self.name, len(builder))
        return builder

    @property
    def check_ids(self) -> list[str]:
        """Check IDs declared by this pack, in order, without repeats."""
        seen: dict[str, None] = {}
        for step in self.steps:
            if isinstance(step, CheckStep):
                seen.setdefault(step.check_id, None)
        return list(seen)


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _string_list(raw: Any, what: str, source: str) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise CheckPackError(f"{source}: '{what}' must be a string or a list of strings")
    return tuple(raw)


def _parse_step(raw: Any, index: int, source: str) -> RootsStep | CheckStep:
    where = f"{source} step {index}"
    if not isinstance(raw, dict):
        raise CheckPackError(f"{where}: expected a mapping, got {type(raw).__name__}")

    if "roots" in raw:
        return RootsStep(roots=_string_list(raw["roots"], "roots", where))

    if "check" in raw:
        check_id = raw["check"]
        if not isinstance(check_id, str) or not check_id:
            raise CheckPackError(f"{where}: 'check' must be a non-empty string")
        if "values" in raw:
            values = _string_list(raw["values"], "values", where)
        elif "value" in raw:
            values = _string_list(raw["value"], "value", where)
        else:
            raise CheckPackError(f"{where}: check '{check_id}' has no 'values'")
        return CheckStep(check_id=check_id, values=values)

    raise CheckPackError(f"{where}: unknown step kind {sorted(raw)}")


# ---------------------------------------------------------------------------
# Pack loader
# ---------------------------------------------------------------------------


class CheckPackLoader:
    """Discovers and loads check packs from the filesystem."""

    _BUILT_IN_PACKS_DIR: Path = CryoprisonConstants.get_packs_path()

    def parse_pack(self, raw: Any, *, name: str, path: Path | None = None) -> CheckPack:
        """Build a :class:`CheckPack` from an already-parsed YAML document."""
        source = str(path) if path else name
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise CheckPackError(f"{source}: pack must be a mapping")

        steps_raw = raw.get("steps") or []
        if not isinstance(steps_raw, list):
            raise CheckPackError(f"{source}: 'steps' must be a list")

        return CheckPack(
            name=str(raw.get("name", name)),
            description=str(raw.get("description", "")),
            path=path,
            steps=[_parse_step(step, i, source) for i, step in enumerate(steps_raw)],
        )

    def load_pack(self, path: Path | str) -> CheckPack:
        """Load a single check pack from a YAML file.

        Raises:
            CheckPackError: If the file is missing or malformed.
        """
        path = Path(path)
        if not path.is_file():
            raise CheckPackError(f"Check pack not found: {path}")

        try:
            with open(path, encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise CheckPackError(f"Invalid YAML in check pack {path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CheckPackError(f"Cannot read check pack {path}: {exc}") from exc

        pack = self.parse_pack(raw, name=path.stem, path=path)
        logger.debug("Loaded check pack '%s' with %d step(s) from %s", pack.name, len(pack.steps), path)
        return pack

    def _load_dir(self, directory: Path) -> list[CheckPack]:
        packs: list[CheckPack] = []
        for child in sorted(directory.glob(f"*{CryoprisonConstants.PACK_FILE_SUFFIX}")):
            try:
                packs.append(self.load_pack(child))
            except CheckPackError as exc:
                logger.warning("Failed to load check pack '%s': %s", child.name, exc)
        return packs

    def discover_packs(
        self,
        built_in_dir: Path | None = None,
        extra_dirs: list[Path | str] | None = None,
    ) -> list[CheckPack]:
        """Discover and load all check packs.

        Packs are loaded in order:

        1. Built-in packs from *built_in_dir* (default:
           ``cryoprison/data/packs/``).
        2. Extra packs from each directory in *extra_dirs*.

        Returns:
            Ordered list of loaded packs (built-in first).
        """
        search_dir = built_in_dir or self._BUILT_IN_PACKS_DIR
        packs = self._load_dir(search_dir) if search_dir.is_dir() else []

        for extra in extra_dirs or []:
            extra = Path(extra)
            if not extra.is_dir():
                logger.warning("Extra check-pack path is not a directory: %s", extra)
                continue
            packs.extend(self._load_dir(extra))

        return packs

    def discover_from_config(self, config: Config, built_in_dir: Path | None = None) -> list[CheckPack]:
        """Convenience: discover built-in packs plus ``config.extra_pack_dirs``."""
        return self.discover_packs(built_in_dir=built_in_dir, extra_dirs=list(config.extra_pack_dirs))
