#
# Copyright (c) 2024, Neptune Labs Sp. z o.o.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
__all__ = ["Queue", "DEFAULT_COMPACTION_THRESHOLD"]

import os
from itertools import islice
from typing import (
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from linear_containers.common.warnings import warn_once
from linear_containers.core.components.abstract import (
    Element,
    LinearContainer,
    MaybeElement,
    add_all,
    take,
)
from linear_containers.envs import QUEUE_COMPACTION_THRESHOLD_ENV_NAME
from linear_containers.internal.utils.logger import get_logger

T = TypeVar("T")

_logger = get_logger()

DEFAULT_COMPACTION_THRESHOLD = 1024


def get_compaction_threshold_from_env() -> int:
    env_threshold = os.getenv(QUEUE_COMPACTION_THRESHOLD_ENV_NAME)

    if env_threshold is None:
        return DEFAULT_COMPACTION_THRESHOLD

    try:
        threshold = int(env_threshold)
        if threshold <= 0:
            raise ValueError

        return threshold
    except (ValueError, TypeError):
        warn_once(
            f"Provided invalid value of '{QUEUE_COMPACTION_THRESHOLD_ENV_NAME}': '{env_threshold}'. "
            f"Using the default of {DEFAULT_COMPACTION_THRESHOLD}.",
            stacklevel=3,
        )
        return DEFAULT_COMPACTION_THRESHOLD


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class Queue(LinearContainer[T]):
    """FIFO container. The front is the earliest item enqueued and not yet dequeued.

    Items live in a list with a moving head index, so ``dequeue`` never shifts the
    remaining items. The consumed prefix is dropped once it holds at least
    ``compaction_threshold`` slots and at least half of the list, which keeps every
    operation amortized O(1).

    Args:
        items: optional items to enqueue, in iteration order.
        compaction_threshold: minimum consumed prefix before compaction. Defaults to
            the ``LINEAR_CONTAINERS_QUEUE_COMPACTION_THRESHOLD`` environment variable,
            or 1024 when it is unset or invalid.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, *, compaction_threshold: Optional[int] = None) -> None:
        if compaction_threshold is None:
            compaction_threshold = get_compaction_threshold_from_env()
        elif not _is_positive_int(compaction_threshold):
            raise ValueError("compaction_threshold must be a positive integer, got: {!r}".format(compaction_threshold))

        self._compaction_threshold: int = compaction_threshold
        self._items: List[Optional[T]] = []
        self._head: int = 0

        if items is not None:
            self.enqueue_all(items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def enqueue_all(self, items: Iterable[T]) -> None:
        add_all(self.enqueue, items)

    def dequeue(self) -> MaybeElement[T]:
        if self.is_empty():
            _logger.debug("dequeue() called on an empty queue")
            return None

        item = self._items[self._head]
        # drop the reference so the consumed prefix doesn't keep items alive
        self._items[self._head] = None
        self._head += 1

        if self._head == len(self._items):
            self._items.clear()
            self._head = 0
        elif self._head >= self._compaction_threshold and 2 * self._head >= len(self._items):
            self._compact()

        return Element(item)

    def dequeue_batch(self, size: int) -> List[T]:
        return take(self.dequeue, size)

    def peek(self) -> MaybeElement[T]:
        if self.is_empty():
            _logger.debug("peek() called on an empty queue")
            return None
        return Element(self._items[self._head])

    def size(self) -> int:
        return len(self._items) - self._head

    def clear(self) -> None:
        self._items.clear()
        self._head = 0

    def _compact(self) -> None:
        _logger.debug("Compacting queue: dropping %d consumed slots, %d items left", self._head, self.size())
        del self._items[: self._head]
        self._head = 0

    def __iter__(self) -> Iterator[T]:
        return islice(self._items, self._head, None)

    def _insertion_order(self) -> List[T]:
        return self._items[self._head :]
