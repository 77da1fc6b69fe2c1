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
from packaging.version import Version

__version__ = "0.1.0"

MAJOR = Version(__version__).major
MINOR = Version(__version__).minor
PATCH = Version(__version__).micro
if pre := Version(__version__).pre:
    PRE_RELEASE = "".join(map(str, pre))
else:
    PRE_RELEASE = ""

DEV = Version(__version__).dev

__package_name__ = "disable_posts"
__contact_names__ = "Wvnderlab Agency"
__contact_emails__ = "moin@wvnderlab.com"
__repository_url__ = "https://github.com/wvnderlab-agency/disable-posts"
__download_url__ = "https://github.com/wvnderlab-agency/disable-posts/releases"
__description__ = "Disable the post content type across every surface of a content-management host: rendering, listings, admin, REST, XML-RPC, blocks and widgets."
__license__ = "Apache2"
__keywords__ = "cms, posts, feature flag, hooks, rest, xmlrpc, blocks, widgets"
