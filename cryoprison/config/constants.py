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
Constants for Cryoprison.
"""

from pathlib import Path

from .._version import __version__ as PACKAGE_VERSION


class CryoprisonConstants:
    """Constants used throughout the check builder."""

    VERSION = PACKAGE_VERSION

    # Project paths
    PACKAGE_ROOT = Path(__file__).parent.parent

    # Resource paths
    DATA_DIR = PACKAGE_ROOT / "data"
    PACKS_DIR = DATA_DIR / "packs"

    # Default values
    DEFAULT_ROOT = ""
    DEFAULT_LOG_LEVEL = "WARNING"
    PACK_FILE_SUFFIX = ".yaml"

    # Environment variables
    ENV_ROOT_PATHS = "CRYOPRISON_ROOT_PATHS"
    ENV_PACK_DIRS = "CRYOPRISON_PACK_DIRS"
    ENV_LOG_LEVEL = "CRYOPRISON_LOG_LEVEL"

    @classmethod
    def get_packs_path(cls) -> Path:
        """Get path to the built-in check packs directory."""
        return cls.PACKS_DIR
