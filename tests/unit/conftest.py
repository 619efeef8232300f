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
import logging

import pytest

from linear_containers.common import warnings as containers_warnings
from linear_containers.internal.utils.logger import LINEAR_CONTAINERS_LOGGER_NAME


@pytest.fixture(autouse=True)
def set_logging_level():
    logging.getLogger(LINEAR_CONTAINERS_LOGGER_NAME).setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def reset_warned_once():
    containers_warnings.warned_once.clear()
    yield
    containers_warnings.warned_once.clear()

