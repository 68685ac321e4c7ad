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
import threading
from typing import Iterable

from opresults.constants import (
    CURSOR,
    CURSOR_ID,
    FIRST_BATCH,
    NAMESPACE,
    RESULT,
    DocumentType,
)
from opresults.exceptions import UnexpectedReplyException
from opresults.replies import Reply
from opresults.results.base import OperationResult

logger = logging.getLogger(__name__)


class AggregateResult(OperationResult):
    """
    The result of an aggregation pipeline.

    Depending on the server and on the options of the aggregation, the first
    document of the reply either carries the whole output inline, in its
    "result" field, or a "cursor" sub-document with the cursor id and the first
    batch of the output.

    The cursor sub-document is looked up at most once per result, even when
    several threads read the result concurrently.

    Args:
        replies: the reply to the aggregate command.
    """

    def __init__(self, replies: Reply | Iterable[Reply]) -> None:
        super().__init__(replies)
        self._cursor_document_lock = threading.Lock()
        self._cursor_document_looked_up = False
        self._cursor_document: DocumentType | None = None

    def _get_cursor_document(self) -> DocumentType | None:
        if not self._cursor_document_looked_up:
            with self._cursor_document_lock:
                if not self._cursor_document_looked_up:
                    first_document = self.reply.first_document
                    cursor_document = first_document.get(CURSOR)
                    if cursor_document is not None and not isinstance(
                        cursor_document, dict
                    ):
                        logger.warning(
                            f"Aggregation reply has a malformed cursor: {cursor_document!r}"
                        )
                        raise UnexpectedReplyException(
                            "The cursor field of the aggregation reply is not a document.",
                            raw_response=first_document,
                        )
                    if cursor_document is None:
                        logger.debug("no cursor document in aggregation reply")
                    else:
                        logger.debug(
                            "cursor document found in aggregation reply "
                            f"(id={cursor_document.get(CURSOR_ID)})"
                        )
                    self._cursor_document = cursor_document
                    self._cursor_document_looked_up = True
        return self._cursor_document

    @property
    def cursor_id(self) -> int:
        """
        The id of the cursor opened by the aggregation, 0 if there is none.

        The envelope of aggregation replies always reports a zero cursor id:
        the actual one is taken from the cursor sub-document, when present.
        """
        cursor_document = self._get_cursor_document()
        if cursor_document is None:
            return super().cursor_id
        cursor_id = cursor_document.get(CURSOR_ID)
        if cursor_id is None:
            logger.warning("Aggregation reply has a cursor without id")
            raise UnexpectedReplyException(
                "The cursor of the aggregation reply has no id.",
                raw_response=self.reply.first_document,
            )
        return cursor_id

    @property
    def documents(self) -> list[DocumentType]:
        """
        The documents produced by the aggregation: the inline result if any,
        otherwise the first batch of the cursor.

        Raises:
            UnexpectedReplyException: if the reply has neither.
        """
        first_document = self.reply.first_document
        inline_result = first_document.get(RESULT)
        if inline_result is not None:
            return inline_result
        cursor_document = self._get_cursor_document()
        if cursor_document is None or cursor_document.get(FIRST_BATCH) is None:
            logger.warning(
                "Aggregation reply has neither an inline result nor a first batch: "
                f"{first_document}"
            )
            raise UnexpectedReplyException(
                "The aggregation reply has neither a "
                f"'{RESULT}' nor a '{CURSOR}.{FIRST_BATCH}' field.",
                raw_response=first_document,
            )
        return cursor_document[FIRST_BATCH]

    @property
    def namespace(self) -> str | None:
        """The namespace of the cursor ("db.collection"), if reported."""
        cursor_document = self._get_cursor_document()
        if cursor_document is None:
            return None
        return cursor_document.get(NAMESPACE)
