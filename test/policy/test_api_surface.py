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

from disable_posts.policy.api import (
    REST_ENDPOINTS,
    XMLRPC_METHODS,
    remove_rest_endpoints,
    remove_xmlrpc_methods,
    without_keys,
)


class TestRestEndpoints:
    def test_fixed_routes(self):
        assert len(REST_ENDPOINTS) == 6
        assert "/wp/v2/posts/(?P<id>[\\d]+)" in REST_ENDPOINTS

    def test_untouched_without_targets(self):
        endpoints = {"/wp/v2/pages": ["get"], "/wp/v2/users": ["get"]}
        result = remove_rest_endpoints(endpoints)
        assert result == {"/wp/v2/pages": ["get"], "/wp/v2/users": ["get"]}

    def test_removes_exactly_the_targets(self):
        endpoints = {route: ["get"] for route in REST_ENDPOINTS}
        endpoints["/wp/v2/pages"] = ["get"]
        result = remove_rest_endpoints(endpoints)
        assert result == {"/wp/v2/pages": ["get"]}
        # The input mapping is not modified.
        assert len(endpoints) == 7


class TestXmlrpcMethods:
    def test_namespaces(self):
        namespaces = {method.split(".")[0] for method in XMLRPC_METHODS}
        assert namespaces == {"wp", "blogger", "metaWeblog", "mt"}
        assert len(set(XMLRPC_METHODS)) == len(XMLRPC_METHODS)

    def test_method_list(self):
        assert len(XMLRPC_METHODS) == 26
        for method in (
            "wp.getPosts",
            "wp.suggestCategories",
            "blogger.getRecentPosts",
            "metaWeblog.newPost",
            "metaWeblog.getCategories",
            "mt.publishPost",
        ):
            assert method in XMLRPC_METHODS

    def test_untouched_without_targets(self):
        methods = {"wp.getPages": "a", "system.listMethods": "b"}
        assert remove_xmlrpc_methods(methods) == methods

    def test_removes_exactly_the_targets(self):
        methods = {method: method for method in XMLRPC_METHODS}
        methods["wp.getPages"] = "wp.getPages"
        assert remove_xmlrpc_methods(methods) == {"wp.getPages": "wp.getPages"}


def test_without_keys_ignores_missing():
    assert without_keys({"a": 1, "b": 2}, ["b", "c"]) == {"a": 1}
