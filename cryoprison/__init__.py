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
Cryoprison - fluent check declarations for jailbreak detection.
"""

from ._version import __version__

__author__ = "Cisco Systems, Inc."


def __getattr__(name: str):
    """Lazy-load public API symbols on first access."""
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "configure_logging": (".config.config", "configure_logging"),
        "CryoprisonConstants": (".config.constants", "CryoprisonConstants"),
        "Check": (".core.checks", "Check"),
        "CheckBuilder": (".core.checks", "CheckBuilder"),
        "CheckPack": (".core.check_packs", "CheckPack"),
        "CheckPackLoader": (".core.check_packs", "CheckPackLoader"),
        "Inspector": (".core.inspectors.base", "Inspector"),
        "BaseInspector": (".core.inspectors.base", "BaseInspector"),
        "FileNotPresentInspector": (".core.inspectors.filesystem", "FileNotPresentInspector"),
        "DirectoryNotPresentInspector": (".core.inspectors.filesystem", "DirectoryNotPresentInspector"),
        "CryoprisonError": (".core.exceptions", "CryoprisonError"),
        "InvalidCheckError": (".core.exceptions", "InvalidCheckError"),
        "CheckPackError": (".core.exceptions", "CheckPackError"),
        "InspectorNotInitializedError": (".core.exceptions", "InspectorNotInitializedError"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "Check",
    "CheckBuilder",
    "CheckPack",
    "CheckPackLoader",
    "Inspector",
    "BaseInspector",
    "FileNotPresentInspector",
    "DirectoryNotPresentInspector",
    "CryoprisonError",
    "InvalidCheckError",
    "CheckPackError",
    "InspectorNotInitializedError",
    "Config",
    "configure_logging",
    "CryoprisonConstants",
]
