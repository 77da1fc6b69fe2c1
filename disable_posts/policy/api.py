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

from typing import Any, Dict, Iterable, Mapping, TypeVar

_V = TypeVar("_V")

REST_ENDPOINTS = (
    "/wp/v2/posts",
    r"/wp/v2/posts/(?P<id>[\d]+)",
    "/wp/v2/categories",
    r"/wp/v2/categories/(?P<id>[\d]+)",
    "/wp/v2/tags",
    r"/wp/v2/tags/(?P<id>[\d]+)",
)

XMLRPC_METHODS = (
    # WordPress API.
    "wp.deletePost",
    "wp.editPost",
    "wp.getPosts",
    "wp.getPost",
    "wp.newPost",
    "wp.getTags",
    "wp.getCategories",
    "wp.newCategory",
    "wp.deleteCategory",
    "wp.suggestCategories",
    # Blogger API.
    "blogger.deletePost",
    "blogger.editPost",
    "blogger.getPost",
    "blogger.getRecentPosts",
    "blogger.newPost",
    # MetaWeblog API (with MT extensions to structs).
    "metaWeblog.deletePost",
    "metaWeblog.editPost",
    "metaWeblog.getPost",
    "metaWeblog.getRecentPosts",
    "metaWeblog.newPost",
    "metaWeblog.getCategories",
    # MovableType API.
    "mt.getCategoryList",
    "mt.getRecentPostTitles",
    "mt.getPostCategories",
    "mt.setPostCategories",
    "mt.publishPost",
)


def without_keys(mapping: Mapping[str, _V], keys: Iterable[str]) -> Dict[str, _V]:
    """Returns a copy of ``mapping`` minus ``keys``; absent keys are ignored."""
    drop = frozenset(keys)
    return {key: value for key, value in mapping.items() if key not in drop}


def remove_rest_endpoints(endpoints: Mapping[str, Any]) -> Dict[str, Any]:
    return without_keys(endpoints, REST_ENDPOINTS)


def remove_xmlrpc_methods(methods: Mapping[str, Any]) -> Dict[str, Any]:
    return without_keys(methods, XMLRPC_METHODS)
