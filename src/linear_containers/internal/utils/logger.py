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
__all__ = ["get_logger", "LINEAR_CONTAINERS_LOGGER_NAME"]

import logging
import sys

LINEAR_CONTAINERS_LOGGER_NAME = "linear_containers"
LOG_FORMAT = "[%(name)s] [%(levelname)s] %(message)s"


class PaddedLevelFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(LOG_FORMAT)

    def formatMessage(self, record):
        return super().formatMessage(_with_padded_level(record))


def _with_padded_level(record: logging.LogRecord) -> logging.LogRecord:
    padded = logging.makeLogRecord(record.__dict__)
    padded.levelname = record.levelname.lower().ljust(len("warning"))
    return padded


class StdoutHandler(logging.StreamHandler):
    """Writes to the current ``sys.stdout`` on every emit, so redirected or captured stdout gets the logs."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stdout


def get_logger() -> logging.Logger:
    return logging.getLogger(LINEAR_CONTAINERS_LOGGER_NAME)


def _set_up_logging():
    logger = logging.getLogger(LINEAR_CONTAINERS_LOGGER_NAME)
    logger.propagate = False

    handler = StdoutHandler()
    handler.setFormatter(PaddedLevelFormatter())
    logger.addHandler(handler)

    logger.setLevel(logging.INFO)


_set_up_logging()
