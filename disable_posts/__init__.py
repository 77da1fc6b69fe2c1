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

"""Switches off the post content type on every surface of a content-management
host: public pages, listings, admin screens, REST and XML-RPC APIs, editor
blocks and widgets."""

from disable_posts.config import Config, ConfigurableMixin
from disable_posts.core.hooks import PRIORITY_DEFAULT, PRIORITY_FIRST, PRIORITY_LAST, HookRegistry
from disable_posts.core.host import Host, Query, Request, Response, Site
from disable_posts.exceptions import RequestTerminated, SetValueError
from disable_posts.package_info import __package_name__, __version__
from disable_posts.plugin import REGISTRATIONS, DisablePostsPlugin, handlers
from disable_posts.policy.outcome import DisableDecision
from disable_posts.settings import (
    DisablePostsSettings,
    apply_overrides,
    load_settings,
    resolve_settings,
)

__all__ = [
    "apply_overrides",
    "Config",
    "ConfigurableMixin",
    "DisableDecision",
    "DisablePostsPlugin",
    "DisablePostsSettings",
    "handlers",
    "HookRegistry",
    "Host",
    "load_settings",
    "PRIORITY_DEFAULT",
    "PRIORITY_FIRST",
    "PRIORITY_LAST",
    "Query",
    "REGISTRATIONS",
    "Request",
    "RequestTerminated",
    "resolve_settings",
    "Response",
    "SetValueError",
    "Site",
    "__version__",
    "__package_name__",
]
