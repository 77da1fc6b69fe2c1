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

import itertools
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

PRIORITY_FIRST = -sys.maxsize - 1
PRIORITY_DEFAULT = 10
PRIORITY_LAST = sys.maxsize


@dataclass(frozen=True, order=True)
class _Callback:
    priority: int
    order: int
    fn: Callable = field(compare=False)


class HookRegistry:
    """
    Named actions and filters with explicit numeric priorities.

    Callbacks on the same hook run by ascending priority; callbacks sharing a
    priority run in the order they were added. Actions return nothing,
    filters thread a value through every callback and return the result.

    Examples:
        >>> hooks = HookRegistry()
        >>> hooks.add_filter("title", str.upper)
        >>> hooks.apply_filters("title", "hello")
        'HELLO'
    """

    def __init__(self):
        self._callbacks: Dict[str, List[_Callback]] = {}
        self._counter = itertools.count()

    def add_action(self, name: str, fn: Callable, priority: int = PRIORITY_DEFAULT) -> None:
        self._add(name, fn, priority)

    def add_filter(self, name: str, fn: Callable, priority: int = PRIORITY_DEFAULT) -> None:
        self._add(name, fn, priority)

    def remove_action(self, name: str, fn: Callable, priority: int = PRIORITY_DEFAULT) -> bool:
        return self._remove(name, fn, priority)

    def remove_filter(self, name: str, fn: Callable, priority: int = PRIORITY_DEFAULT) -> bool:
        return self._remove(name, fn, priority)

    def has(self, name: str, fn: Callable | None = None) -> bool:
        callbacks = self._callbacks.get(name, [])
        if fn is None:
            return bool(callbacks)
        return any(cb.fn == fn for cb in callbacks)

    def callbacks(self, name: str) -> list[tuple[int, Callable]]:
        """Returns ``(priority, callback)`` pairs for ``name`` in dispatch order."""
        return [(cb.priority, cb.fn) for cb in sorted(self._callbacks.get(name, []))]

    def do_action(self, name: str, *args: Any) -> None:
        for _, fn in self.callbacks(name):
            fn(*args)

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for _, fn in self.callbacks(name):
            value = fn(value, *args)
        return value

    def _add(self, name: str, fn: Callable, priority: int) -> None:
        self._callbacks.setdefault(name, []).append(
            _Callback(priority=priority, order=next(self._counter), fn=fn)
        )
        logger.debug("Added %s to %s at priority %s", getattr(fn, "__name__", fn), name, priority)

    def _remove(self, name: str, fn: Callable, priority: int) -> bool:
        callbacks = self._callbacks.get(name, [])
        for cb in callbacks:
            if cb.fn == fn and cb.priority == priority:
                callbacks.remove(cb)
                return True
        return False
