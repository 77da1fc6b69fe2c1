# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json

import pytest

from disable_posts.core.serialization.converters import dump_dict, load_dict


@pytest.fixture
def sample_dict():
    return {"disable_posts": {"status_code": 302, "redirect_url": "/news/", "enabled": True}}


class TestLoadDict:
    def test_yaml(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("status_code: 410\nenabled: false\n")
        assert load_dict(path) == {"status_code": 410, "enabled": False}

    def test_json(self, tmp_path, sample_dict):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(sample_dict))
        assert load_dict(path) == sample_dict

    def test_toml(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text('[disable_posts]\nstatus_code = 307\nredirect_url = "/news/"\n')
        assert load_dict(path) == {"disable_posts": {"status_code": 307, "redirect_url": "/news/"}}

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "settings.ini"
        path.write_text("")
        with pytest.raises(ValueError, match="Unsupported file extension: .ini"):
            load_dict(path)


@pytest.mark.parametrize("name", ["out.yaml", "out.json", "out.toml"])
def test_dump_dict_round_trip(tmp_path, sample_dict, name):
    path = tmp_path / name
    dump_dict(sample_dict, path)
    assert load_dict(path) == sample_dict


def test_dump_dict_unsupported(tmp_path, sample_dict):
    with pytest.raises(ValueError):
        dump_dict(sample_dict, tmp_path / "out.txt")
