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
from pathlib import Path
from typing import Any, Dict

import toml
import yaml

SUPPORTED_EXTENSIONS = (".yaml", ".yml", ".json", ".toml")


def yaml_to_dict(yaml_str: str) -> Dict[str, Any]:
    """Convert YAML string to Python dictionary."""
    return yaml.safe_load(yaml_str)


def dict_to_yaml(data: Dict[str, Any]) -> str:
    """Convert Python dictionary to YAML string."""
    return yaml.dump(data, default_flow_style=False)


def toml_to_dict(toml_str: str) -> Dict[str, Any]:
    """Convert TOML string to Python dictionary."""
    return toml.loads(toml_str)


def dict_to_toml(data: Dict[str, Any]) -> str:
    """Convert Python dictionary to TOML string."""
    return toml.dumps(data)


def load_dict(input_path: str | Path) -> Dict[str, Any]:
    """Load a settings file and return its raw dictionary data.

    Args:
        input_path: Path to the settings file (str or Path).

    Returns:
        dict: The raw dictionary data from the file.

    Raises:
        ValueError: If the file extension is not supported.
    """
    path = Path(input_path)
    extension = path.suffix.lower()

    if extension in (".yaml", ".yml"):
        with open(path, "r") as f:
            return yaml.safe_load(f)
    elif extension == ".json":
        with open(path, "r") as f:
            return json.load(f)
    elif extension == ".toml":
        with open(path, "r") as f:
            return toml_to_dict(f.read())
    else:
        raise ValueError(
            f"Unsupported file extension: {extension}. Supported extensions are: .yaml, .yml, .json, .toml"
        )


def dump_dict(data: Dict[str, Any], output_path: str | Path) -> None:
    """Write a dictionary to a settings file, format picked from the extension.

    Raises:
        ValueError: If the file extension is not supported.
    """
    path = Path(output_path)
    extension = path.suffix.lower()

    if extension in (".yaml", ".yml"):
        path.write_text(dict_to_yaml(data))
    elif extension == ".json":
        path.write_text(json.dumps(data, indent=2))
    elif extension == ".toml":
        path.write_text(dict_to_toml(data))
    else:
        raise ValueError(
            f"Unsupported file extension: {extension}. Supported extensions are: .yaml, .yml, .json, .toml"
        )
