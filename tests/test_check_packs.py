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
Tests for YAML check packs.
"""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from cryoprison.config.config import Config
from cryoprison.config.constants import CryoprisonConstants
from cryoprison.core.check_packs import CheckPack, CheckPackLoader, CheckStep, RootsStep
from cryoprison.core.checks import Check, CheckBuilder
from cryoprison.core.exceptions import CheckPackError


class TestLoadPack:
    def test_steps_in_document_order(self, write_pack):
        path = write_pack(
            "sample",
            """
            name: sample
            description: demo
            steps:
              - check: EARLY
                value: f
              - roots: ["/r/"]
              - check: LATE
                values: [f, g]
            """,
        )
        pack = CheckPackLoader().load_pack(path)

        assert pack.name == "sample"
        assert pack.description == "demo"
        assert pack.path == path
        assert pack.steps == [
            CheckStep("EARLY", ("f",)),
            RootsStep(("/r/",)),
            CheckStep("LATE", ("f", "g")),
        ]

    def test_build_preserves_time_of_call_roots(self, write_pack):
        path = write_pack(
            "sample",
            """
            steps:
              - check: EARLY
                value: f
              - roots: /r/
              - check: LATE
                value: f
            """,
        )
        builder = CheckPackLoader().load_pack(path).build()
        assert builder.checks == (Check("EARLY", "f"), Check("LATE", "f"), Check("LATE", "/r/f"))

    def test_name_defaults_to_file_stem(self, write_pack):
        path = write_pack("unnamed", "steps: []\n")
        assert CheckPackLoader().load_pack(path).name == "unnamed"

    def test_empty_file_is_empty_pack(self, write_pack):
        pack = CheckPackLoader().load_pack(write_pack("empty", ""))
        assert pack.steps == []
        assert len(pack.build()) == 0

    def test_build_onto_existing_builder(self, write_pack):
        path = write_pack("p", "steps:\n  - check: SU\n    value: su\n")
        seeded = CheckBuilder().add_roots("/sbin/")
        assert CheckPackLoader().load_pack(path).build(seeded) is seeded
        assert [c.value for c in seeded.checks] == ["su", "/sbin/su"]

    def test_check_ids_unique_in_order(self):
        pack = CheckPack(
            name="p",
            steps=[CheckStep("B", ("1",)), RootsStep(("/r/",)), CheckStep("A", ("2",)), CheckStep("B", ("3",))],
        )
        assert pack.check_ids == ["B", "A"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CheckPackError, match="not found"):
            CheckPackLoader().load_pack(tmp_path / "nope.yaml")

    @pytest.mark.parametrize(
        "body,message",
        [
            ("- just a list\n", "must be a mapping"),
            ("steps: {a: 1}\n", "'steps' must be a list"),
            ("steps:\n  - 42\n", "expected a mapping"),
            ("steps:\n  - bogus: 1\n", "unknown step kind"),
            ("steps:\n  - check: SU\n", "has no 'values'"),
            ("steps:\n  - check: ''\n    value: x\n", "non-empty string"),
            ("steps:\n  - check: SU\n    values: [1, 2]\n", "list of strings"),
            ("steps:\n  - roots: [null]\n", "list of strings"),
            ("steps: [unclosed\n", "Invalid YAML"),
        ],
    )
    def test_malformed_packs(self, write_pack, body, message):
        path = write_pack("bad", body)
        with pytest.raises(CheckPackError, match=message):
            CheckPackLoader().load_pack(path)

    def test_undecodable_pack(self, tmp_path):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"name: \xff\xfe bad\n")
        with pytest.raises(CheckPackError, match="Cannot read"):
            CheckPackLoader().load_pack(path)

    def test_unreadable_pack(self, write_pack):
        path = write_pack("locked", "steps: []\n")
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(CheckPackError, match="denied"):
                CheckPackLoader().load_pack(path)


class TestDiscoverPacks:
    def test_built_in_packs(self):
        packs = {p.name: p for p in CheckPackLoader().discover_packs()}
        assert {"android", "ios"} <= set(packs)
        assert "SU" in packs["android"].check_ids
        assert "CYDIA" in packs["ios"].check_ids

    def test_built_in_android_pack_expands_roots(self):
        pack = CheckPackLoader().load_pack(CryoprisonConstants.get_packs_path() / "android.yaml")
        builder = pack.build()
        su_values = [c.value for c in builder.checks if c.check_id == "SU"]
        assert "/system/xbin/su" in su_values
        assert len(su_values) == len(builder.root_paths)

    def test_extra_dirs_after_built_in(self, tmp_path, write_pack):
        built_in = tmp_path / "built_in"
        extra = tmp_path / "extra"
        write_pack("first", "steps: []\n", built_in)
        write_pack("second", "steps: []\n", extra)

        packs = CheckPackLoader().discover_packs(built_in_dir=built_in, extra_dirs=[extra])
        assert [p.name for p in packs] == ["first", "second"]

    def test_broken_pack_skipped_with_warning(self, tmp_path, write_pack, caplog):
        write_pack("good", "steps: []\n", tmp_path)
        write_pack("bad", "steps:\n  - bogus: 1\n", tmp_path)
        (tmp_path / "binary.yaml").write_bytes(b"name: \xff\xfe bad\n")

        with caplog.at_level(logging.WARNING, logger="cryoprison"):
            packs = CheckPackLoader().discover_packs(built_in_dir=tmp_path)

        assert [p.name for p in packs] == ["good"]
        assert "bad.yaml" in caplog.text
        assert "binary.yaml" in caplog.text

    def test_missing_extra_dir_warns(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="cryoprison"):
            packs = CheckPackLoader().discover_packs(built_in_dir=tmp_path, extra_dirs=[tmp_path / "missing"])
        assert packs == []
        assert "not a directory" in caplog.text

    def test_extra_dirs_from_config_env(self, tmp_path, write_pack):
        built_in = tmp_path / "built_in"
        extra = tmp_path / "extra"
        built_in.mkdir()
        write_pack("site", "steps:\n  - check: SU\n    value: su\n", extra)

        with patch.dict("os.environ", {"CRYOPRISON_PACK_DIRS": os.pathsep.join([str(extra), ""])}):
            config = Config.from_env()

        packs = CheckPackLoader().discover_from_config(config, built_in_dir=built_in)
        assert [p.name for p in packs] == ["site"]
        assert packs[0].check_ids == ["SU"]

    def test_android_pack_keeps_relative_probes(self):
        pack = CheckPackLoader().load_pack(CryoprisonConstants.get_packs_path() / "android.yaml")
        values = [c.value for c in pack.build().checks if c.check_id == "SU"]
        assert values[0] == "su"
        assert "working directory" in pack.description
