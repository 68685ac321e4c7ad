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

import logging
from functools import reduce
from typing import Any, Callable, Iterable, Iterator, TypeVar

from opresults.constants import ERROR, N, OK, DocumentType
from opresults.exceptions import OperationFailureException, UnexpectedReplyException
from opresults.replies import Reply, normalize_replies
from opresults.settings.defaults import OK_VALUE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OperationResult:
    """
    The result of a logical operation, built out of the replies received for
    each of the physical batches the operation was split into.

    Every accessor is computed on demand by folding over the replies: the
    replies are never modified, and accessors can be called any number of times.

    Args:
        replies: a reply, or an iterable of replies in submission order.
    """

    _replies: list[Reply]

    def __init__(self, replies: Reply | Iterable[Reply]) -> None:
        self._replies = normalize_replies(replies)
        logger.debug(
            f"{self.__class__.__name__} built from {len(self._replies)} replies"
        )

    def _piecewise_repr(self, pieces: list[str | None]) -> str:
        return f"{self.__class__.__name__}({', '.join(pc for pc in pieces if pc)})"

    def __repr__(self) -> str:
        return self._piecewise_repr(
            [
                f"acknowledged={self.acknowledged}",
                f"replies=[{len(self._replies)} replies]",
            ]
        )

    def __iter__(self) -> Iterator[DocumentType]:
        return iter(self.documents)

    def _first_documents(self) -> list[DocumentType]:
        return [reply.first_document for reply in self._replies]

    def _fold_replies(
        self,
        step: Callable[[T, Reply], T],
        initial: T,
        *,
        unacknowledged: Any = 0,
    ) -> Any:
        """
        Left-fold `step` over the replies, starting from `initial`.

        This is where the rule "unacknowledged operations report nothing" lives:
        if the operation was not acknowledged, `unacknowledged` is returned and
        no reply is looked at.
        """
        if not self.acknowledged:
            return unacknowledged
        return reduce(step, self._replies, initial)

    @property
    def replies(self) -> list[Reply]:
        return self._replies

    @property
    def acknowledged(self) -> bool:
        """False if any of the batches was sent without asking for confirmation."""
        return all(reply.acknowledged for reply in self._replies)

    @property
    def reply(self) -> Reply:
        """The first reply of the operation."""
        if not self._replies:
            raise UnexpectedReplyException(
                f"{self.__class__.__name__} has no replies.",
                raw_response=None,
            )
        return self._replies[0]

    @property
    def documents(self) -> list[DocumentType]:
        """All documents carried by the replies, in order."""
        return [document for reply in self._replies for document in reply.documents]

    @property
    def cursor_id(self) -> int:
        """The cursor id reported in the envelope of the first reply (0 if none)."""
        if not self._replies:
            return 0
        return self._replies[0].cursor_id

    @property
    def written_count(self) -> int:
        """The sum of the "n" fields of all replies (0 if unacknowledged)."""
        return self._fold_replies(
            lambda n, reply: n + (reply.first_document.get(N) or 0),
            0,
        )

    @property
    def n(self) -> int:
        return self.written_count

    @property
    def returned_count(self) -> int:
        return len(self.documents)

    @property
    def successful(self) -> bool:
        """
        True if no reply reports a failure, i.e. each has "ok" equal to 1
        and no error message. Unacknowledged results are always successful.
        """
        if not self.acknowledged:
            return True
        return all(
            document.get(OK) == OK_VALUE and document.get(ERROR) is None
            for document in self._first_documents()
        )

    def validate(self) -> OperationResult:
        """
        Check that the operation succeeded.

        Returns:
            this very result, if successful.

        Raises:
            OperationFailureException: if any of the replies reports a failure.
        """
        if self.successful:
            return self
        exc = OperationFailureException.from_result(self)
        logger.warning(f"{self.__class__.__name__} about to raise from: {exc.text}")
        raise exc
