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

import logging
from typing import Any, List

from disable_posts.core.host import Query, Request, Response
from disable_posts.policy.constants import POST_TAXONOMIES, POST_TYPE

logger = logging.getLogger(__name__)


def normalize_post_types(value: Any) -> List[str]:
    if not value:
        return [POST_TYPE]
    if isinstance(value, str):
        return [value]
    return list(value)


def is_listing(query: Query) -> bool:
    return query.is_search or query.is_archive or query.is_home or query.is_feed


def is_post_taxonomy_page(query: Query) -> bool:
    if query.is_category or query.is_tag:
        return True
    return query.is_tax and query.taxonomy in POST_TAXONOMIES


def filter_listing_query(query: Query, request: Request, response: Response) -> None:
    """
    Drops posts from the main listing query and 404s post taxonomy pages.

    When posts were the only requested type the filter is left as it was;
    an empty ``post_type`` would widen the query instead of narrowing it.
    """
    if request.is_admin or not query.is_main_query:
        return

    if is_listing(query):
        post_types = [pt for pt in normalize_post_types(query.get("post_type")) if pt != POST_TYPE]
        if post_types:
            query.set("post_type", post_types)
        else:
            logger.debug("Only posts requested on %s, leaving post_type untouched", request.path)

    if is_post_taxonomy_page(query):
        logger.debug("Taxonomy page %s answered with 404", request.path)
        query.set_404()
        response.status = 404
        response.nocache()
