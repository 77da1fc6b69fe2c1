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

import pytest

from disable_posts.core.host import AdminBar, AdminMenu, Dashboard, Host, Registry, Site
from disable_posts.plugin import CLI_ENV_FLAG, DisablePostsPlugin
from disable_posts.policy.api import REST_ENDPOINTS, XMLRPC_METHODS
from disable_posts.policy.blocks import POST_BLOCKS, POST_WIDGETS
from disable_posts.settings import DisablePostsSettings


@pytest.fixture(autouse=True)
def clear_cli_flag(monkeypatch):
    """Tests run outside of the host's command line unless they say otherwise."""
    monkeypatch.delenv(CLI_ENV_FLAG, raising=False)
    yield


@pytest.fixture
def site() -> Site:
    return Site(
        home_url="https://example.com/",
        admin_url="https://example.com/wp-admin/",
    )


@pytest.fixture
def host(site) -> Host:
    """A host with the post surfaces populated next to a few unrelated ones."""
    blocks = Registry({name: {} for name in POST_BLOCKS})
    blocks.register("core/paragraph", {})
    widgets = Registry({name: {} for name in POST_WIDGETS})
    widgets.register("WP_Widget_Search", {})

    dashboard = Dashboard()
    dashboard.add_meta_box("dashboard_quick_press", "Quick Draft", "dashboard", "normal")
    dashboard.add_meta_box("dashboard_activity", "Activity", "dashboard", "normal")

    admin_bar = AdminBar()
    admin_bar.add_node("new-post", title="Post")
    admin_bar.add_node("new-page", title="Page")

    admin_menu = AdminMenu(
        pages=[
            "index.php",
            "edit.php",
            "edit-tags.php?taxonomy=category",
            "edit-tags.php?taxonomy=post_tag",
            "edit.php?post_type=page",
        ]
    )

    rest_endpoints = {route: ["handler"] for route in REST_ENDPOINTS}
    rest_endpoints["/wp/v2/pages"] = ["handler"]
    xmlrpc_methods = {method: f"this:{method}" for method in XMLRPC_METHODS}
    xmlrpc_methods["wp.getPages"] = "this:wp.getPages"

    return Host(
        site=site,
        blocks=blocks,
        widgets=widgets,
        dashboard=dashboard,
        admin_bar=admin_bar,
        admin_menu=admin_menu,
        rest_endpoints=rest_endpoints,
        xmlrpc_methods=xmlrpc_methods,
        content_renderer=lambda request: f"<article>{request.path}</article>",
    )


@pytest.fixture
def settings() -> DisablePostsSettings:
    return DisablePostsSettings()


@pytest.fixture
def plugin(host, settings) -> DisablePostsPlugin:
    plugin = DisablePostsPlugin(settings=settings)
    assert plugin.setup(host.hooks)
    yield plugin
    plugin.teardown()
