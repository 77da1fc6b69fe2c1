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

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

import fiddle as fdl
import yaml

from disable_posts.config import ConfigurableMixin, from_dict, set_value
from disable_posts.core.hooks import HookRegistry
from disable_posts.core.host import Site
from disable_posts.core.serialization.converters import load_dict

logger = logging.getLogger(__name__)

ENABLED_FILTER = "disable-posts/enabled"
STATUS_CODE_FILTER = "disable-posts/status-code"
REDIRECT_URL_FILTER = "disable-posts/redirect-url"


@dataclass(kw_only=True)
class DisablePostsSettings(ConfigurableMixin):
    """
    Configuration passed to every policy function.

    Examples:

    .. code-block:: python

        # Answer with 410 Gone instead of 404.
        settings = DisablePostsSettings(status_code=410)

        # Redirect to a landing page.
        settings = DisablePostsSettings(status_code=302, redirect_url="/news/")
    """

    #: When false no handler is registered at all.
    enabled: bool = True
    #: 404/410 answer with an error page, 3xx redirect. Anything else means 301.
    status_code: int = 404
    #: Redirect target. Empty means the site's home URL.
    redirect_url: str = ""


def coerce_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Could not read %r as a status code, using 0", value)
        return 0


def resolve_settings(
    hooks: HookRegistry, settings: DisablePostsSettings, site: Site
) -> DisablePostsSettings:
    """
    Runs the override points once and returns the settings for one request.

    ``settings`` supplies the defaults each filter starts from; the returned
    object is a fresh copy, ``settings`` itself is never modified.
    """
    status_code = coerce_int(hooks.apply_filters(STATUS_CODE_FILTER, settings.status_code))
    redirect_url = hooks.apply_filters(REDIRECT_URL_FILTER, settings.redirect_url or site.home_url)
    return dataclasses.replace(
        settings,
        enabled=is_enabled(hooks, settings),
        status_code=status_code,
        redirect_url="" if redirect_url is None else str(redirect_url),
    )


def is_enabled(hooks: HookRegistry, settings: DisablePostsSettings) -> bool:
    return bool(hooks.apply_filters(ENABLED_FILTER, settings.enabled))


def load_settings(path: str | Path, section: Optional[str] = None) -> DisablePostsSettings:
    """
    Loads settings from a YAML, JSON or TOML file.

    Args:
        path: Path to the settings file.
        section: Optional top-level key holding the settings, e.g. ``disable_posts``.
    """
    data = load_dict(path) or {}
    if section:
        if section not in data:
            raise KeyError(f"Section '{section}' not found in {path}")
        data = data[section] or {}
    return from_dict(data, DisablePostsSettings)


def apply_overrides(
    settings: DisablePostsSettings, overrides: Iterable[str]
) -> DisablePostsSettings:
    """
    Applies ``key=value`` overrides through the settings' fiddle config.

    Values are parsed as YAML scalars so ``status_code=410`` sets an int and
    ``enabled=false`` a bool.
    """
    cfg = settings.to_config()
    for override in overrides:
        key, sep, raw = override.partition("=")
        if not sep:
            raise ValueError(f"Override '{override}' must look like key=value")
        value = yaml.safe_load(raw) if raw else ""
        set_value(cfg, key.strip(), value)
    return fdl.build(cfg)
