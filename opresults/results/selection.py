# Copyright DataStax, Inc.
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

from __future__ import annotations

from typing import Iterable, Sequence

from opresults.replies import Reply
from opresults.results.update import BaseUpdateResult, LegacyUpdateResult, UpdateResult
from opresults.settings.defaults import WRITE_COMMAND_MIN_WIRE_VERSION
from opresults.utils.str_enum import StrEnum


class ReplyShape(StrEnum):
    """
    The shapes a server can give to the replies of write operations.
    """

    WRITE_COMMAND = "write_command"
    LEGACY = "legacy"


def reply_shape_for_wire_version(max_wire_version: int) -> ReplyShape:
    """
    Determine the shape of write replies from the max wire version
    advertised by the server.
    """
    if max_wire_version >= WRITE_COMMAND_MIN_WIRE_VERSION:
        return ReplyShape.WRITE_COMMAND
    return ReplyShape.LEGACY


def update_result_class(shape: str | ReplyShape) -> type[BaseUpdateResult]:
    """The update result variant handling replies of the given shape."""
    if ReplyShape.coerce(shape) == ReplyShape.WRITE_COMMAND:
        return UpdateResult
    return LegacyUpdateResult


def make_update_result(
    replies: Reply | Iterable[Reply],
    *,
    shape: str | ReplyShape,
    indexes: Sequence[int] | None = None,
) -> BaseUpdateResult:
    """
    Build the update result suited to the shape of the replies.

    Args:
        replies: a reply, or an iterable of replies in submission order.
        shape: the shape of the replies, a ReplyShape or its string value.
            See `reply_shape_for_wire_version`.
        indexes: the index map of the operation, if already known.

    Returns:
        an UpdateResult or a LegacyUpdateResult.
    """
    result_class = update_result_class(shape)
    return result_class(replies, indexes=indexes)
