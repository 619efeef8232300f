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
__all__ = [
    "LinearContainersException",
    "InvalidBatchSize",
]

from typing import Any


class LinearContainersException(Exception):
    def __eq__(self, other):
        if type(other) is type(self):
            return str(self) == str(other)
        else:
            return False

    def __hash__(self):
        return hash((type(self), str(self)))


class InvalidBatchSize(LinearContainersException):
    def __init__(self, size: Any):
        self.size = size
        super().__init__("Batch size must be a non-negative integer, got: {!r}".format(size))
