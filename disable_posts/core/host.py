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

"""
Value types and registries of the content-management host, plus the
:class:`Host` adapter that fires lifecycle events on a :class:`HookRegistry`.

Only the surface the handlers consume is modelled here: routing, templating
and the admin UI stay with the real host.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
from urllib.parse import urlsplit

from disable_posts.core.hooks import HookRegistry
from disable_posts.exceptions import RequestTerminated

logger = logging.getLogger(__name__)

# Lifecycle events fired by the host.
RESPONSE_RESOLUTION = "response_resolution"
QUERY_PREPARATION = "query_preparation"
ADMIN_INIT = "admin_init"
ADMIN_BAR_BUILD = "admin_bar_build"
ADMIN_MENU_BUILD = "admin_menu_build"
REST_ROUTE_TABLE = "rest_route_table"
RPC_METHOD_TABLE = "rpc_method_table"
PLATFORM_INIT = "platform_init"
WIDGETS_INIT = "widgets_init"

NOCACHE_HEADERS: Dict[str, str] = {
    "Expires": "Wed, 11 Jan 1984 05:00:00 GMT",
    "Cache-Control": "no-cache, must-revalidate, max-age=0, no-store, private",
}

INLINE_NOT_FOUND = (
    "<!DOCTYPE html><html><head><title>Not Found</title></head>"
    "<body><h1>404 Not Found</h1></body></html>"
)

# Whitespace and control characters, raw or percent-encoded line breaks.
_UNSAFE_REDIRECT_CHARS = re.compile(r"[\x00-\x20\x7f]|%0[ad]", re.IGNORECASE)


def sanitize_redirect(location: str) -> str:
    """
    Strips characters that must never reach a ``Location`` header.

    Backslashes become slashes since browsers read ``/\\host`` as ``//host``.
    """
    location = location.replace("\\", "/")
    cleaned = _UNSAFE_REDIRECT_CHARS.sub("", location)
    # Removing one escape may join the halves of another, e.g. ``%0%0aa``.
    while cleaned != location:
        location = cleaned
        cleaned = _UNSAFE_REDIRECT_CHARS.sub("", location)
    return cleaned


@dataclass(kw_only=True)
class Request:
    path: str = "/"
    is_admin: bool = False
    doing_ajax: bool = False
    doing_cron: bool = False
    is_rest: bool = False
    #: Content type of the single item this request resolved to, if any.
    singular_post_type: Optional[str] = None

    def is_singular(self, post_type: str) -> bool:
        return self.singular_post_type == post_type


@dataclass(kw_only=True)
class Response:
    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def location(self) -> Optional[str]:
        return self.headers.get("Location")

    def nocache(self) -> None:
        self.headers.update(NOCACHE_HEADERS)
        self.headers.pop("Last-Modified", None)


@dataclass(kw_only=True)
class Query:
    """The host's main content query for one request."""

    vars: Dict[str, Any] = field(default_factory=dict)
    is_main_query: bool = True
    is_search: bool = False
    is_archive: bool = False
    is_home: bool = False
    is_feed: bool = False
    is_category: bool = False
    is_tag: bool = False
    is_tax: bool = False
    taxonomy: Optional[str] = None
    is_404: bool = False

    def get(self, key: str, default: Any = None) -> Any:
        return self.vars.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.vars[key] = value

    def set_404(self) -> None:
        self.is_404 = True


@dataclass(kw_only=True)
class AdminScreen:
    #: Admin script being served, e.g. ``post.php`` or ``edit.php``.
    pagenow: str = "index.php"
    #: Content type requested through the screen's ``post_type`` argument.
    typenow: str = ""
    #: Content type of the item being edited, if any.
    post_type: Optional[str] = None
    doing_ajax: bool = False


class Registry:
    """Keyed registry where unregistering an absent key is a no-op."""

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        self._items: Dict[str, Any] = dict(items or {})

    def register(self, key: str, value: Any = None) -> None:
        self._items[key] = value

    def unregister(self, key: str) -> bool:
        if key not in self._items:
            return False
        del self._items[key]
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def keys(self) -> List[str]:
        return list(self._items)


@dataclass(kw_only=True)
class AdminBar:
    showing: bool = True
    nodes: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def add_node(self, node_id: str, **props: Any) -> None:
        self.nodes[node_id] = props

    def remove_node(self, node_id: str) -> None:
        self.nodes.pop(node_id, None)


@dataclass(kw_only=True)
class AdminMenu:
    pages: List[str] = field(default_factory=list)

    def add_page(self, slug: str) -> None:
        if slug not in self.pages:
            self.pages.append(slug)

    def remove_page(self, slug: str) -> None:
        if slug in self.pages:
            self.pages.remove(slug)


@dataclass(kw_only=True)
class Dashboard:
    meta_boxes: Dict[Tuple[str, str], Dict[str, str]] = field(default_factory=dict)

    def add_meta_box(self, box_id: str, title: str, screen: str, context: str) -> None:
        self.meta_boxes.setdefault((screen, context), {})[box_id] = title

    def remove_meta_box(self, box_id: str, screen: str, context: str) -> None:
        self.meta_boxes.get((screen, context), {}).pop(box_id, None)

    def has_meta_box(self, box_id: str, screen: str, context: str) -> bool:
        return box_id in self.meta_boxes.get((screen, context), {})


@dataclass(kw_only=True)
class Site:
    home_url: str = "http://localhost/"
    admin_url: str = "http://localhost/admin/"
    #: Extra hosts redirects may point at besides the site's own.
    allowed_redirect_hosts: List[str] = field(default_factory=list)
    not_found_template: Optional[Callable[[Request], str]] = None

    def allowed_hosts(self) -> set[str]:
        hosts = {urlsplit(self.home_url).hostname, urlsplit(self.admin_url).hostname}
        hosts.update(host.lower() for host in self.allowed_redirect_hosts)
        return {host for host in hosts if host}

    def validate_redirect(self, location: str, fallback: Optional[str] = None) -> str:
        """
        Returns the sanitized ``location`` if it stays on an allowed host,
        else ``fallback``.

        Relative locations are allowed, protocol-relative ones (``//host``)
        are checked like absolute URLs. The fallback defaults to the admin
        URL, matching the host's safe-redirect behaviour.
        """
        fallback = fallback or self.admin_url
        location = sanitize_redirect(location)
        if not location:
            return fallback

        parts = urlsplit(location)
        if parts.scheme not in ("", "http", "https"):
            return fallback
        if not parts.netloc:
            if parts.scheme or location.startswith("//"):
                return fallback
            return location
        if (parts.hostname or "").lower() not in self.allowed_hosts():
            logger.debug("Redirect to %s rejected, falling back to %s", location, fallback)
            return fallback
        return location

    def render_not_found(self, request: Request) -> str:
        if self.not_found_template is not None:
            return self.not_found_template(request)
        return INLINE_NOT_FOUND


@dataclass(kw_only=True)
class RequestContext:
    """Everything a front-end handler sees for one request."""

    request: Request
    response: Response
    query: Query
    site: Site


@dataclass(kw_only=True)
class AdminContext:
    screen: AdminScreen
    site: Site
    dashboard: Dashboard


@dataclass(kw_only=True)
class Host:
    """
    In-memory host adapter.

    It owns the hook registry and every registry the handlers mutate, and
    fires lifecycle events in the order the real host does.
    """

    site: Site = field(default_factory=Site)
    hooks: HookRegistry = field(default_factory=HookRegistry)
    blocks: Registry = field(default_factory=Registry)
    widgets: Registry = field(default_factory=Registry)
    admin_bar: AdminBar = field(default_factory=AdminBar)
    admin_menu: AdminMenu = field(default_factory=AdminMenu)
    dashboard: Dashboard = field(default_factory=Dashboard)
    rest_endpoints: Dict[str, Any] = field(default_factory=dict)
    xmlrpc_methods: Dict[str, Any] = field(default_factory=dict)
    content_renderer: Optional[Callable[[Request], str]] = None

    def boot(self) -> None:
        self.hooks.do_action(PLATFORM_INIT, self.blocks)
        self.hooks.do_action(WIDGETS_INIT, self.widgets)

    def handle_request(self, request: Request, query: Optional[Query] = None) -> Response:
        ctx = RequestContext(
            request=request,
            response=Response(),
            query=query if query is not None else Query(),
            site=self.site,
        )
        try:
            self.hooks.do_action(QUERY_PREPARATION, ctx.query, ctx)
            self.hooks.do_action(RESPONSE_RESOLUTION, ctx)
        except RequestTerminated as e:
            logger.debug("Request for %s terminated with %s", request.path, e.response.status)
            return e.response

        response = ctx.response
        if ctx.query.is_404:
            if response.status == 200:
                response.status = 404
            response.body = self.site.render_not_found(request)
        elif self.content_renderer is not None:
            response.body = self.content_renderer(request)
        return response

    def handle_admin_request(self, screen: AdminScreen) -> Response:
        ctx = AdminContext(screen=screen, site=self.site, dashboard=self.dashboard)
        try:
            self.hooks.do_action(ADMIN_INIT, ctx)
        except RequestTerminated as e:
            return e.response

        self.hooks.do_action(ADMIN_MENU_BUILD, self.admin_menu)
        self.hooks.do_action(ADMIN_BAR_BUILD, self.admin_bar)
        return Response()

    def rest_routes(self) -> Dict[str, Any]:
        return self.hooks.apply_filters(REST_ROUTE_TABLE, dict(self.rest_endpoints))

    def rpc_methods(self) -> Dict[str, Any]:
        return self.hooks.apply_filters(RPC_METHOD_TABLE, dict(self.xmlrpc_methods))
