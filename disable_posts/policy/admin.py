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

from typing import Optional

from disable_posts.core.host import AdminBar, AdminMenu, AdminScreen, Dashboard, Response, Site
from disable_posts.policy.constants import POST_TYPE

ADMIN_REDIRECT_CODE = 301

#: ``typenow`` values the generic list and new screens use for posts.
POST_SCREEN_TYPES = ("", POST_TYPE)

QUICK_DRAFT_META_BOX = ("dashboard_quick_press", "dashboard", "normal")

NEW_POST_NODE = "new-post"

POST_MENU_PAGES = (
    "edit.php",
    "edit-tags.php?taxonomy=category",
    "edit-tags.php?taxonomy=post_tag",
)


def is_post_screen(screen: AdminScreen) -> bool:
    if screen.pagenow == "post.php":
        return screen.post_type == POST_TYPE
    if screen.pagenow in ("edit.php", "post-new.php"):
        return screen.typenow in POST_SCREEN_TYPES
    return False


def admin_redirect(screen: AdminScreen, site: Site) -> Optional[Response]:
    """Returns a redirect to the admin home for post screens, else ``None``."""
    if screen.doing_ajax or not is_post_screen(screen):
        return None

    location = site.validate_redirect(site.admin_url)
    return Response(status=ADMIN_REDIRECT_CODE, headers={"Location": location})


def remove_quick_draft(dashboard: Dashboard) -> None:
    dashboard.remove_meta_box(*QUICK_DRAFT_META_BOX)


def remove_new_post_node(admin_bar: AdminBar) -> None:
    if admin_bar.showing:
        admin_bar.remove_node(NEW_POST_NODE)


def remove_post_menu_pages(admin_menu: AdminMenu) -> None:
    for slug in POST_MENU_PAGES:
        admin_menu.remove_page(slug)
