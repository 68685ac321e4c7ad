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
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

import deprecation
from typing_extensions import Self

from opresults.constants import (
    ERROR,
    ERROR_CODE,
    ID,
    INDEX,
    MODIFIED,
    N,
    UPDATED_EXISTING,
    UPSERTED,
    WRITE_ERRORS,
    DocumentType,
    IndexMapType,
)
from opresults.exceptions import (
    BulkWriteException,
    IndexesNotSetException,
    UnexpectedReplyException,
)
from opresults.replies import Reply
from opresults.results.base import OperationResult

logger = logging.getLogger(__name__)

ACCESSOR_DEPRECATION_NOTICE = "Use the '{new_name}' property instead."


class BaseUpdateResult(OperationResult, ABC):
    """
    The part shared by the results of update operations, irrespective of the
    shape of the server replies.

    A logical update can be split into several batches, each yielding its own
    reply. Indexes found in a reply refer to the items of its own batch: the
    index map, giving for each batch-local index the position of the item in
    the original operation, is needed to report them to the caller. It can be
    passed to the constructor or attached later with `set_indexes`, in any case
    before calling `aggregate_write_errors` or `upserted_ids`.

    Args:
        replies: a reply, or an iterable of replies in submission order.
        indexes: the index map, if already known.
    """

    _indexes: IndexMapType | None

    def __init__(
        self,
        replies: Reply | Iterable[Reply],
        indexes: Sequence[int] | None = None,
    ) -> None:
        super().__init__(replies)
        self._indexes = list(indexes) if indexes is not None else None

    def __repr__(self) -> str:
        return self._piecewise_repr(
            [
                f"acknowledged={self.acknowledged}",
                f"matched_count={self.matched_count}",
                f"modified_count={self.modified_count}",
                f"upserted_count={self.upserted_count}",
                f"replies=[{len(self._replies)} replies]",
            ]
        )

    @property
    def indexes(self) -> IndexMapType | None:
        return self._indexes

    def set_indexes(self, indexes: Sequence[int]) -> Self:
        """
        Attach the index map of the operation to this result.

        Args:
            indexes: for each item of this result's batches, its position in
                the original operation.

        Returns:
            this very result, to allow chaining.
        """
        self._indexes = list(indexes)
        return self

    def _check_indexes(self) -> IndexMapType:
        if self._indexes is None:
            raise IndexesNotSetException(
                "Indexes have not been set on this "
                f"{self.__class__.__name__}: call set_indexes() first."
            )
        return self._indexes

    def _original_index(self, batch_index: Any) -> int:
        indexes = self._check_indexes()
        if (
            isinstance(batch_index, bool)
            or not isinstance(batch_index, int)
            or not 0 <= batch_index < len(indexes)
        ):
            raise UnexpectedReplyException(
                f"Index {batch_index!r} found in a reply does not refer to any "
                f"of the {len(indexes)} items of the operation.",
                raw_response=None,
            )
        return indexes[batch_index]

    @property
    @abstractmethod
    def matched_count(self) -> int:
        """The number of documents matched by the update (0 if unacknowledged)."""
        ...

    @property
    @abstractmethod
    def modified_count(self) -> int | None:
        """
        The number of documents actually modified by the update, or None
        if the server cannot report it.
        """
        ...

    @property
    @abstractmethod
    def upserted_count(self) -> int:
        """The number of documents inserted by upserts (0 if unacknowledged)."""
        ...

    @property
    @abstractmethod
    def upserted_ids(self) -> dict[int, Any]:
        """A map from item index in the original operation to upserted ID."""
        ...

    @abstractmethod
    def aggregate_write_errors(self) -> list[DocumentType]:
        """
        Collect the write errors reported by all replies, in reply order.

        Each entry is a copy of the error reported by the server, except for its
        "index" field which refers to the item in the original operation.
        Unacknowledged results have no write errors.

        Raises:
            IndexesNotSetException: if the result is acknowledged and no index
                map has been attached to it.
            UnexpectedReplyException: if an error refers to an item not
                covered by the index map.
        """
        ...

    def raise_for_write_errors(self) -> Self:
        """
        Raise a BulkWriteException if any of the replies reports write errors,
        else return this very result.
        """
        write_errors = self.aggregate_write_errors()
        if write_errors:
            logger.warning(
                f"{self.__class__.__name__} about to raise from "
                f"{len(write_errors)} write errors"
            )
            raise BulkWriteException.from_write_errors(write_errors)
        return self

    @property
    @deprecation.deprecated(  # type: ignore[misc]
        deprecated_in="1.0.0",
        removed_in="2.0.0",
        details=ACCESSOR_DEPRECATION_NOTICE.format(new_name="matched_count"),
    )
    def n_matched(self) -> int:
        return self.matched_count

    @property
    @deprecation.deprecated(  # type: ignore[misc]
        deprecated_in="1.0.0",
        removed_in="2.0.0",
        details=ACCESSOR_DEPRECATION_NOTICE.format(new_name="modified_count"),
    )
    def n_modified(self) -> int | None:
        return self.modified_count

    @property
    @deprecation.deprecated(  # type: ignore[misc]
        deprecated_in="1.0.0",
        removed_in="2.0.0",
        details=ACCESSOR_DEPRECATION_NOTICE.format(new_name="upserted_count"),
    )
    def n_upserted(self) -> int:
        return self.upserted_count


class UpdateResult(BaseUpdateResult):
    """
    The result of an update operation whose replies have the "write command"
    shape, i.e. report the matched ("n") and modified ("nModified") counts
    per batch, plus an "upserted" array listing the documents inserted.

    Example:
        >>> result = UpdateResult(
        ...     [
        ...         Reply(documents=[{"ok": 1, "n": 2, "nModified": 2}]),
        ...         Reply(documents=[{"ok": 1, "n": 1, "nModified": 0}]),
        ...     ],
        ...     indexes=[0, 1, 2],
        ... )
        >>> result.matched_count, result.modified_count
        (3, 2)
    """

    @staticmethod
    def _is_upsert(reply: Reply) -> bool:
        return bool(reply.first_document.get(UPSERTED))

    @property
    def matched_count(self) -> int:
        def _add_matched(n: int, reply: Reply) -> int:
            # a batch that upserted matched nothing
            if self._is_upsert(reply):
                return n
            return n + (reply.first_document.get(N) or 0)

        return self._fold_replies(_add_matched, 0)

    @property
    def modified_count(self) -> int:
        return self._fold_replies(
            lambda n, reply: n + (reply.first_document.get(MODIFIED) or 0),
            0,
        )

    @property
    def upserted_count(self) -> int:
        return self._fold_replies(
            lambda n, reply: n + (1 if self._is_upsert(reply) else 0),
            0,
        )

    @property
    def upserted_ids(self) -> dict[int, Any]:
        if not self.acknowledged:
            return {}
        self._check_indexes()
        return {
            self._original_index(upserted.get(INDEX)): upserted.get(ID)
            for document in self._first_documents()
            for upserted in document.get(UPSERTED) or []
        }

    def aggregate_write_errors(self) -> list[DocumentType]:
        def _add_errors(
            all_write_errors: list[DocumentType], reply: Reply
        ) -> list[DocumentType]:
            write_errors = reply.first_document.get(WRITE_ERRORS) or []
            return all_write_errors + [
                {**write_error, INDEX: self._original_index(write_error.get(INDEX))}
                for write_error in write_errors
            ]

        if not self.acknowledged:
            return []
        self._check_indexes()
        return self._fold_replies(_add_errors, [])


class LegacyUpdateResult(BaseUpdateResult):
    """
    The result of an update operation sent to servers that do not support
    write commands. Each batch carries a single update, whose reply reports
    the number of affected documents in "n" and whether an existing document
    was updated in "updatedExisting": when that flag is false, or missing, the
    "n" documents were upserted rather than matched.

    These replies cannot tell how many documents were actually modified,
    hence `modified_count` is always None.
    """

    @staticmethod
    def _is_upsert(reply: Reply) -> bool:
        return not reply.first_document.get(UPDATED_EXISTING)

    @staticmethod
    def _has_write_error(document: DocumentType) -> bool:
        # a message without a code (or the reverse) is not a write error
        return document.get(ERROR) is not None and document.get(ERROR_CODE) is not None

    @property
    def matched_count(self) -> int:
        return self._fold_replies(
            lambda n, reply: (
                n if self._is_upsert(reply) else n + (reply.first_document.get(N) or 0)
            ),
            0,
        )

    @property
    def modified_count(self) -> None:
        return None

    @property
    def upserted_count(self) -> int:
        return self._fold_replies(
            lambda n, reply: (
                n + (reply.first_document.get(N) or 0) if self._is_upsert(reply) else n
            ),
            0,
        )

    @property
    def upserted_ids(self) -> dict[int, Any]:
        if not self.acknowledged:
            return {}
        self._check_indexes()
        return {
            self._original_index(reply_index): reply.first_document[UPSERTED]
            for reply_index, reply in enumerate(self._replies)
            if self._is_upsert(reply)
            and reply.first_document.get(UPSERTED) is not None
        }

    def aggregate_write_errors(self) -> list[DocumentType]:
        if not self.acknowledged:
            return []
        self._check_indexes()
        return [
            {
                ERROR: document[ERROR],
                INDEX: self._original_index(reply_index),
                ERROR_CODE: document[ERROR_CODE],
            }
            for reply_index, document in enumerate(self._first_documents())
            if self._has_write_error(document)
        ]
