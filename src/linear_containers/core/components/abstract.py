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
from __future__ import annotations

__all__ = ["Element", "MaybeElement", "LinearContainer"]

from abc import (
    ABC,
    abstractmethod,
)
from dataclasses import dataclass
from typing import (
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from typing_extensions import TypeAlias

from linear_containers.exceptions import InvalidBatchSize

T = TypeVar("T")


@dataclass(frozen=True)
class Element(Generic[T]):
    """A value read from a container.

    Reads return ``Optional[Element[T]]``: ``None`` means the container was empty,
    so a stored ``None`` comes back as ``Element(None)``.
    """

    value: T


MaybeElement: TypeAlias = Optional[Element[T]]


class LinearContainer(ABC, Generic[T]):
    """Base for containers that hand out their elements one end at a time.

    Subclasses keep their items in ``_items`` and define which end ``peek`` sees.
    Reading from an empty container is not an error: ``peek`` returns ``None``.
    """

    __hash__ = None

    @abstractmethod
    def peek(self) -> MaybeElement[T]:
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        ...

    @abstractmethod
    def _insertion_order(self) -> List[T]:
        ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._insertion_order() == other._insertion_order()

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self._insertion_order())


def validate_batch_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidBatchSize(size)


def take(pop_one, size: int) -> List[T]:
    validate_batch_size(size)

    ret = []
    for _ in range(0, size):
        element = pop_one()
        if element is None:
            break
        ret.append(element.value)
    return ret


def add_all(add_one, items: Iterable[T]) -> None:
    for item in items:
        add_one(item)
