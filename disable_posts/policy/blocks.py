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

from disable_posts.core.host import Registry

POST_BLOCKS = (
    "core/latest-posts",
    "core/post-title",
    "core/post-content",
    "core/post-excerpt",
    "core/post-featured-image",
    "core/post-date",
    "core/post-author",
    "core/post-terms",
)

POST_WIDGETS = (
    "WP_Widget_Recent_Posts",
    "WP_Widget_Categories",
    "WP_Widget_Tag_Cloud",
)


def unregister_post_blocks(blocks: Registry) -> list[str]:
    """Unregisters the post blocks and returns the ones that were present."""
    return [name for name in POST_BLOCKS if blocks.unregister(name)]


def unregister_post_widgets(widgets: Registry) -> list[str]:
    return [name for name in POST_WIDGETS if widgets.unregister(name)]
