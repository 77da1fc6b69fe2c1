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
What a request for a single post gets instead of the post.

Supported status codes:

- 301 / 302 / 307 / 308: redirect to the configured URL
- 404 / 410: no redirect, the site's not-found page with that status

Any other value is treated as 301.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from disable_posts.core.host import Request, Response, Site
from disable_posts.policy.constants import POST_TYPE
from disable_posts.settings import DisablePostsSettings

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = (404, 410)
DEFAULT_REDIRECT_CODE = 301


@dataclass(frozen=True)
class DisableDecision:
    status_code: int
    redirect_url: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_url is not None


def is_presentation_request(request: Request) -> bool:
    """Admin, ajax, cron and REST requests are not end-user page views."""
    return not (request.is_admin or request.doing_ajax or request.doing_cron or request.is_rest)


def decide(
    request: Request, settings: DisablePostsSettings, site: Site
) -> Optional[DisableDecision]:
    """
    Returns the outcome for ``request``, or ``None`` to leave it to the host.

    ``settings`` must already be resolved for this request (see
    :func:`disable_posts.settings.resolve_settings`).
    """
    if not request.is_singular(POST_TYPE):
        return None

    if not is_presentation_request(request):
        return None

    status_code = settings.status_code
    if status_code in NOT_FOUND_CODES:
        return DisableDecision(status_code=status_code)

    if status_code < 300 or status_code > 399:
        logger.warning(
            "Status code %s is not a redirect code, using %s", status_code, DEFAULT_REDIRECT_CODE
        )
        status_code = DEFAULT_REDIRECT_CODE

    redirect_url = settings.redirect_url or site.home_url
    return DisableDecision(
        status_code=status_code, redirect_url=site.validate_redirect(redirect_url)
    )


def render(decision: DisableDecision, request: Request, site: Site) -> Response:
    if decision.is_redirect:
        return Response(status=decision.status_code, headers={"Location": decision.redirect_url})

    response = Response(status=decision.status_code)
    response.nocache()
    response.body = site.render_not_found(request)
    return response
