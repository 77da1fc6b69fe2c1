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

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disable_posts.core.host import Response


class SetValueError(ValueError):
    """Error raised when setting a value on a config fails."""

    pass


class RequestTerminated(Exception):
    """
    Raised by a handler to stop processing the current request.

    The host adapter catches it and sends ``response`` as-is; no later
    handler and no normal rendering runs for that request.
    """

    def __init__(self, response: "Response"):
        super().__init__(f"Request terminated with status {response.status}")
        self.response = response
