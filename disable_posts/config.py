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

from __future__ import annotations

import copy
import dataclasses
import typing
from typing import Any, Generic, Type, TypeVar

import fiddle as fdl
import fiddle._src.experimental.dataclasses as fdl_dc
from fiddle._src import config, daglish, daglish_extensions
from fiddle._src.casting import register_supported_cast
from typing_extensions import Self

import disable_posts.exceptions as dp_exceptions

_T = TypeVar("_T")

RECURSIVE_TYPES = (typing.Union, typing.Optional)


def get_underlying_types(type_hint: typing.Any) -> typing.Set[typing.Type]:
    if isinstance(type_hint, typing._GenericAlias):  # type: ignore
        origin = type_hint.__origin__
        if origin in RECURSIVE_TYPES:
            types = set()
            for arg in type_hint.__args__:
                types.update(get_underlying_types(arg))
            return types
    return {type_hint}


def from_dict(raw_data: dict | list | str | float | int | bool, cls: Type[_T]) -> _T:
    """
    Build ``cls`` from plain data loaded out of a settings file.

    Keys missing from ``raw_data`` keep the dataclass defaults; unknown keys
    raise a ``ValueError`` so typos in settings files do not pass silently.

    Examples:
        >>> from_dict({"status_code": 410}, DisablePostsSettings)
        DisablePostsSettings(enabled=True, status_code=410, redirect_url='')
    """
    if isinstance(raw_data, dict):
        underlying_types = get_underlying_types(cls)
        underlying_types = [tp for tp in underlying_types if tp is not type(None)]
        assert (
            len(underlying_types) == 1
        ), f"Unable to load {cls}. Nested union types are not currently supported."
        cls = underlying_types[0]  # type: ignore

    if dataclasses.is_dataclass(cls):
        if not isinstance(raw_data, dict):
            raise ValueError(f"Expected a mapping to build {cls.__name__}, got {raw_data!r}")

        known = {f.name: f for f in dataclasses.fields(cls) if f.init}
        unknown = set(raw_data) - set(known)
        if unknown:
            raise ValueError(f"Unknown keys for {cls.__name__}: {', '.join(sorted(unknown))}")

        fields_dict = {
            name: from_dict(raw_data[name], f.type)  # type: ignore
            for name, f in known.items()
            if name in raw_data
        }
        return cls(**fields_dict)  # type: ignore
    elif isinstance(raw_data, list):
        return [from_dict(item, cls.__args__[0]) for item in raw_data]  # type: ignore
    else:
        return raw_data  # type: ignore


def set_value(cfg: config.Buildable, key: str, value: Any) -> None:
    """Set an attribute's value.

    Args:
      cfg: A `fdl.Buildable` whose attribute is to be overridden.
      key: Dotted path of the attribute, e.g. ``status_code``.
      value: The new value.
    """
    *parents, last = _parse_path(key)

    walk = typing.cast(Any, cfg)
    try:
        for parent in parents:
            walk = parent.follow(walk)
    except Exception as e:
        raise dp_exceptions.SetValueError(f'Invalid path "{key}".') from e

    try:
        if isinstance(last, daglish.Attr):
            setattr(walk, last.name, value)
        elif isinstance(last, daglish.Key):
            walk[last.key] = value
        else:
            raise dp_exceptions.SetValueError(f"Unexpected path element {last}.")
    except dp_exceptions.SetValueError:
        raise
    except Exception as e:
        raise dp_exceptions.SetValueError(f'Could not set "{key}" to "{value}".') from e


class Config(Generic[_T], fdl.Config[_T]):
    """
    Wrapper around fdl.Config with disable_posts specific functionality.
    See `fdl.Config <https://fiddle.readthedocs.io/en/latest/api_reference/core.html#config>`_ for more.
    """

    def clone(self):
        """Returns a deep clone of the object."""
        return copy.deepcopy(self)


register_supported_cast(fdl.Config, Config)
register_supported_cast(Config, Config)


class ConfigurableMixin:
    """
    A mixin class that lets dataclasses round-trip through fiddle.

    For classes that are not dataclasses, the `to_config` method needs to be
    overridden to provide custom conversion logic to Config instances.
    """

    def to_config(self) -> Config[Self]:
        """
        Convert the current object to a Config instance.

        Raises:
            NotImplementedError: If the object type cannot be converted to Config.
        """
        if dataclasses.is_dataclass(self):
            try:
                return fdl.cast(
                    Config, fdl_dc.convert_dataclasses_to_configs(self, allow_post_init=True)
                )
            except Exception as e:
                raise NotImplementedError(
                    f"Cannot convert type {type(self)} to Config",
                    f"Please implement a method `to_config` on {type(self)}.",
                ) from e
        else:
            raise NotImplementedError(
                f"Cannot convert type {type(self)} to Config. "
                f"Please override the `to_config` method for {type(self)}."
            )


def _parse_path(path: str) -> daglish.Path:
    """Parses a path into a list of either attributes or index lookups."""
    if not path.startswith("[") and not path.startswith("."):
        path = f".{path}"  # Add a leading `.` to make parsing work properly.

    return daglish_extensions.parse_path(path)
