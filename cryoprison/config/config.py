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
Configuration class for Cryoprison.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .constants import CryoprisonConstants


def _split_paths(raw: str | None) -> list[str]:
    """Split an ``os.pathsep`` separated list, dropping empty entries."""
    if not raw:
        return []
    return [part for part in raw.split(os.pathsep) if part]


@dataclass
class Config:
    """
    Configuration for Cryoprison.

    Explicit values win; anything left at its default is filled from the
    environment.
    """

    # Builder Configuration
    root_paths: list[str] = field(default_factory=list)

    # Check Pack Configuration
    extra_pack_dirs: list[str] = field(default_factory=list)

    # Logging
    log_level: str = CryoprisonConstants.DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if not self.root_paths:
            self.root_paths = _split_paths(os.getenv(CryoprisonConstants.ENV_ROOT_PATHS))

        if not self.extra_pack_dirs:
            self.extra_pack_dirs = _split_paths(os.getenv(CryoprisonConstants.ENV_PACK_DIRS))

        if self.log_level == CryoprisonConstants.DEFAULT_LOG_LEVEL:
            if env_level := os.getenv(CryoprisonConstants.ENV_LOG_LEVEL):
                self.log_level = env_level

        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from .env file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        config_file = Path(config_file)
        if config_file.exists():
            load_dotenv(config_file, override=True)

        return cls.from_env()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Set the level of the ``cryoprison`` logger.

    Handlers are left to the application.  Without *level*, the level from
    :class:`Config` (and so ``CRYOPRISON_LOG_LEVEL``) is used.
    """
    if level is None:
        level = Config.from_env().log_level
    if isinstance(level, str):
        level = level.upper()
    package_logger = logging.getLogger("cryoprison")
    package_logger.setLevel(level)
    return package_logger
