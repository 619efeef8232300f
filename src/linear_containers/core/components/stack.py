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
__all__ = ["Stack"]

from typing import (
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from linear_containers.core.components.abstract import (
    Element,
    LinearContainer,
    MaybeElement,
    add_all,
    take,
)
from linear_containers.internal.utils.logger import get_logger

T = TypeVar("T")

_logger = get_logger()


class Stack(LinearContainer[T]):
    """LIFO container. The top is the last item pushed and not yet popped."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        if items is not None:
            self.extend(items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        add_all(self.push, items)

    def pop(self) -> MaybeElement[T]:
        if not self._items:
            _logger.debug("pop() called on an empty stack")
            return None
        return Element(self._items.pop())

    def pop_batch(self, size: int) -> List[T]:
        return take(self.pop, size)

    def peek(self) -> MaybeElement[T]:
        if not self._items:
            _logger.debug("peek() called on an empty stack")
            return None
        return Element(self._items[-1])

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def _insertion_order(self) -> List[T]:
        return list(self._items)
