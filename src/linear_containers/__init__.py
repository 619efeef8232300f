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
"""Generic LIFO and FIFO containers.

Classes:
    Stack
    Queue
    Element

Stack
-----
>>> from linear_containers import Stack
>>> stack = Stack[int]()
>>> stack.push(1)
>>> stack.push(2)
>>> stack.push(3)
>>> stack.size()
3
>>> stack.peek()
Element(value=3)
>>> while (element := stack.pop()) is not None:
...     print(element.value)
3
2
1
>>> stack.is_empty()
True

Queue
-----
>>> from linear_containers import Queue
>>> queue = Queue[str](["Primero", "Segundo"])
>>> queue.enqueue("Tercero")
>>> queue.peek().value
'Primero'
>>> queue.dequeue_batch(3)
['Primero', 'Segundo', 'Tercero']
>>> queue.dequeue() is None
True

Reading from an empty container is not an error: ``pop``, ``dequeue`` and ``peek``
return ``None``, and a found value comes wrapped in ``Element`` so that a stored
``None`` can still be told apart from an empty container.
"""
__all__ = [
    "Element",
    "Queue",
    "Stack",
]

from linear_containers.core.components.abstract import Element
from linear_containers.core.components.queue import Queue
from linear_containers.core.components.stack import Stack
