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

import functools
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import catalogue

from disable_posts.core.hooks import PRIORITY_DEFAULT, PRIORITY_FIRST, PRIORITY_LAST, HookRegistry
from disable_posts.core.host import (
    ADMIN_BAR_BUILD,
    ADMIN_INIT,
    ADMIN_MENU_BUILD,
    PLATFORM_INIT,
    QUERY_PREPARATION,
    RESPONSE_RESOLUTION,
    REST_ROUTE_TABLE,
    RPC_METHOD_TABLE,
    WIDGETS_INIT,
    AdminBar,
    AdminContext,
    AdminMenu,
    Query,
    Registry,
    RequestContext,
    Site,
)
from disable_posts.exceptions import RequestTerminated
from disable_posts.policy import admin, api, blocks, outcome, query
from disable_posts.policy.constants import POST_TYPE
from disable_posts.settings import DisablePostsSettings, is_enabled, resolve_settings

logger = logging.getLogger(__name__)

#: Environment flag the host sets when it runs from its command line.
CLI_ENV_FLAG = "CMS_CLI"

ACTION = "action"
FILTER = "filter"

handlers = catalogue.create("disable_posts", "handlers", entry_points=False)


@dataclass(frozen=True)
class Registration:
    event: str
    priority: int
    handler: str
    kind: str = ACTION


REGISTRATIONS: Tuple[Registration, ...] = (
    Registration(RESPONSE_RESOLUTION, PRIORITY_FIRST, "disable_or_redirect_post"),
    Registration(QUERY_PREPARATION, PRIORITY_LAST, "exclude_posts_from_queries"),
    Registration(ADMIN_INIT, PRIORITY_FIRST, "redirect_admin_post_screens"),
    Registration(ADMIN_INIT, PRIORITY_LAST, "remove_dashboard_meta_boxes"),
    Registration(ADMIN_BAR_BUILD, PRIORITY_LAST, "remove_admin_bar_node"),
    Registration(ADMIN_MENU_BUILD, PRIORITY_LAST, "remove_admin_menu_pages"),
    Registration(REST_ROUTE_TABLE, PRIORITY_DEFAULT, "remove_rest_endpoints", FILTER),
    Registration(RPC_METHOD_TABLE, PRIORITY_LAST, "remove_xmlrpc_methods", FILTER),
    Registration(PLATFORM_INIT, PRIORITY_LAST, "unregister_blocks"),
    Registration(WIDGETS_INIT, PRIORITY_LAST, "unregister_widgets"),
)


def running_in_cli() -> bool:
    return os.environ.get(CLI_ENV_FLAG, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(kw_only=True)
class DisablePostsPlugin:
    """
    Binds the post policies to a host's hook registry.

    Examples:

    .. code-block:: python

        host = Host(site=Site(home_url="https://example.com/"))
        plugin = DisablePostsPlugin(settings=DisablePostsSettings(status_code=410))
        plugin.setup(host.hooks)

    """

    settings: DisablePostsSettings = field(default_factory=DisablePostsSettings)
    _hooks: Optional[HookRegistry] = field(init=False, default=None, repr=False)
    _registered: List[Tuple[Registration, Callable]] = field(
        init=False, default_factory=list, repr=False
    )

    @property
    def active(self) -> bool:
        return bool(self._registered)

    def setup(self, hooks: HookRegistry) -> bool:
        """
        Registers every handler in :data:`REGISTRATIONS` on ``hooks``.

        Returns ``False`` without registering anything when the host runs
        from its command line or the ``disable-posts/enabled`` filter says no.
        Calling it again with the same registry is a no-op; a different
        registry first has the handlers removed from the previous one.
        """
        if self.active:
            if hooks is self._hooks:
                return True
            self.teardown()

        if running_in_cli():
            logger.info("Host is running from its command line, not registering handlers")
            return False

        if not is_enabled(hooks, self.settings):
            logger.info("Disabling posts is switched off, not registering handlers")
            return False

        self._hooks = hooks
        for registration in REGISTRATIONS:
            fn = functools.partial(handlers.get(registration.handler), self)
            add = hooks.add_filter if registration.kind == FILTER else hooks.add_action
            add(registration.event, fn, registration.priority)
            self._registered.append((registration, fn))

        logger.debug("Registered %d handlers", len(self._registered))
        return True

    def teardown(self) -> None:
        if self._hooks is None:
            return

        hooks = self._hooks
        for registration, fn in self._registered:
            remove = hooks.remove_filter if registration.kind == FILTER else hooks.remove_action
            remove(registration.event, fn, registration.priority)

        self._registered.clear()
        self._hooks = None

    def resolve(self, site: Site) -> DisablePostsSettings:
        if self._hooks is None:
            raise RuntimeError("Call setup() before resolving settings.")
        return resolve_settings(self._hooks, self.settings, site)


@handlers.register("disable_or_redirect_post")
def disable_or_redirect_post(plugin: DisablePostsPlugin, ctx: RequestContext) -> None:
    request = ctx.request
    if not request.is_singular(POST_TYPE) or not outcome.is_presentation_request(request):
        return

    decision = outcome.decide(request, plugin.resolve(ctx.site), ctx.site)
    if decision is None:
        return

    if not decision.is_redirect:
        ctx.query.set_404()

    logger.debug("Post request %s answered with %s", request.path, decision.status_code)
    raise RequestTerminated(outcome.render(decision, request, ctx.site))


@handlers.register("exclude_posts_from_queries")
def exclude_posts_from_queries(plugin: DisablePostsPlugin, q: Query, ctx: RequestContext) -> None:
    query.filter_listing_query(q, ctx.request, ctx.response)


@handlers.register("redirect_admin_post_screens")
def redirect_admin_post_screens(plugin: DisablePostsPlugin, ctx: AdminContext) -> None:
    response = admin.admin_redirect(ctx.screen, ctx.site)
    if response is not None:
        logger.debug("Admin screen %s redirected to %s", ctx.screen.pagenow, response.location)
        raise RequestTerminated(response)


@handlers.register("remove_dashboard_meta_boxes")
def remove_dashboard_meta_boxes(plugin: DisablePostsPlugin, ctx: AdminContext) -> None:
    admin.remove_quick_draft(ctx.dashboard)


@handlers.register("remove_admin_bar_node")
def remove_admin_bar_node(plugin: DisablePostsPlugin, admin_bar: AdminBar) -> None:
    admin.remove_new_post_node(admin_bar)


@handlers.register("remove_admin_menu_pages")
def remove_admin_menu_pages(plugin: DisablePostsPlugin, admin_menu: AdminMenu) -> None:
    admin.remove_post_menu_pages(admin_menu)


@handlers.register("remove_rest_endpoints")
def remove_rest_endpoints(plugin: DisablePostsPlugin, endpoints: Dict[str, Any]) -> Dict[str, Any]:
    return api.remove_rest_endpoints(endpoints)


@handlers.register("remove_xmlrpc_methods")
def remove_xmlrpc_methods(plugin: DisablePostsPlugin, methods: Dict[str, Any]) -> Dict[str, Any]:
    return api.remove_xmlrpc_methods(methods)


@handlers.register("unregister_blocks")
def unregister_blocks(plugin: DisablePostsPlugin, registry: Registry) -> None:
    removed = blocks.unregister_post_blocks(registry)
    logger.debug("Unregistered blocks: %s", removed)


@handlers.register("unregister_widgets")
def unregister_widgets(plugin: DisablePostsPlugin, registry: Registry) -> None:
    removed = blocks.unregister_post_widgets(registry)
    logger.debug("Unregistered widgets: %s", removed)
