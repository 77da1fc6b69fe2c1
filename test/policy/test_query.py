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

from disable_posts.core.host import Query, Request, Response
from disable_posts.policy.query import filter_listing_query, normalize_post_types


@pytest.fixture
def request_() -> Request:
    return Request(path="/?s=hello")


class TestNormalizePostTypes:
    @pytest.mark.parametrize("value", [None, "", []])
    def test_unset_means_posts(self, value):
        assert normalize_post_types(value) == ["post"]

    def test_bare_string(self):
        assert normalize_post_types("page") == ["page"]

    def test_list(self):
        assert normalize_post_types(("post", "page")) == ["post", "page"]


class TestFilterListingQuery:
    @pytest.mark.parametrize("kind", ["is_search", "is_archive", "is_home", "is_feed"])
    def test_removes_posts_from_listings(self, request_, kind):
        query = Query(vars={"post_type": ["post", "page", "product"]}, **{kind: True})
        response = Response()
        filter_listing_query(query, request_, response)
        assert query.get("post_type") == ["page", "product"]
        assert response.status == 200
        assert not query.is_404

    def test_keeps_filter_when_only_posts_requested(self, request_):
        query = Query(vars={"post_type": "post"}, is_search=True)
        filter_listing_query(query, request_, Response())
        assert query.get("post_type") == "post"

    def test_keeps_unset_filter(self, request_):
        query = Query(is_home=True)
        filter_listing_query(query, request_, Response())
        assert "post_type" not in query.vars

    def test_bare_string_without_posts(self, request_):
        query = Query(vars={"post_type": "page"}, is_search=True)
        filter_listing_query(query, request_, Response())
        assert query.get("post_type") == ["page"]

    def test_skips_admin_requests(self):
        query = Query(vars={"post_type": ["post", "page"]}, is_search=True, is_category=True)
        response = Response()
        filter_listing_query(query, Request(path="/wp-admin/", is_admin=True), response)
        assert query.get("post_type") == ["post", "page"]
        assert not query.is_404
        assert response.status == 200

    def test_skips_secondary_queries(self, request_):
        query = Query(vars={"post_type": ["post", "page"]}, is_search=True, is_main_query=False)
        filter_listing_query(query, request_, Response())
        assert query.get("post_type") == ["post", "page"]

    def test_leaves_singular_queries_alone(self, request_):
        query = Query(vars={"post_type": ["post"]})
        filter_listing_query(query, request_, Response())
        assert query.get("post_type") == ["post"]

    @pytest.mark.parametrize(
        "flags",
        [
            {"is_category": True},
            {"is_tag": True},
            {"is_tax": True, "taxonomy": "category"},
            {"is_tax": True, "taxonomy": "post_tag"},
            {"is_category": True, "is_archive": True, "vars": {"paged": 3, "post_type": "page"}},
        ],
    )
    def test_post_taxonomy_pages_are_not_found(self, flags):
        query = Query(**flags)
        response = Response()
        filter_listing_query(query, Request(path="/category/news/"), response)
        assert query.is_404
        assert response.status == 404
        assert "no-store" in response.headers["Cache-Control"]

    def test_other_taxonomies_are_kept(self):
        query = Query(is_tax=True, is_archive=True, taxonomy="product_cat")
        response = Response()
        filter_listing_query(query, Request(path="/product-category/shoes/"), response)
        assert not query.is_404
        assert response.status == 200
