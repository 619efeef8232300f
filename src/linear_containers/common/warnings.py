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
    "warn_once",
    "LinearContainersWarning",
]

import warnings


class LinearContainersWarning(Warning):
    pass


MAX_WARNED_ONCE_CAPACITY = 1_000
warned_once = set()


def warn_once(message: str, stacklevel: int = 1) -> None:
    """Emits a LinearContainersWarning the first time ``message`` is seen.

    The caller's warning filters apply as usual, so under ``simplefilter("error")``
    the warning is raised. A raised message is not remembered and will be raised again.
    """
    if len(warned_once) >= MAX_WARNED_ONCE_CAPACITY:
        return

    message_hash = hash(message)
    if message_hash in warned_once:
        return

    warnings.warn(message, category=LinearContainersWarning, stacklevel=stacklevel + 1)
    warned_once.add(message_hash)
