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

from dataclasses import dataclass, field
from typing import Any, Iterable

from opresults.constants import DocumentType
from opresults.exceptions import UnexpectedReplyException


@dataclass
class Reply:
    """
    One decoded server response, received for one physical round trip
    of a logical operation.

    Attributes:
        documents: the decoded top-level documents carried by the reply,
            in wire order. Normally there is exactly one.
        cursor_id: the cursor id found in the reply envelope. Aggregation
            replies always report zero here, see `AggregateResult.cursor_id`.
        acknowledged: False if the server was not asked to confirm the
            operation, in which case the documents carry no information.
    """

    documents: list[DocumentType] = field(default_factory=list)
    cursor_id: int = 0
    acknowledged: bool = True

    @property
    def first_document(self) -> DocumentType:
        if not self.documents:
            raise UnexpectedReplyException(
                "The server reply carries no documents.",
                raw_response=None,
            )
        return self.documents[0]

    def __repr__(self) -> str:
        pieces = [
            f"documents=[{len(self.documents)} documents]",
            f"cursor_id={self.cursor_id}" if self.cursor_id else None,
            "acknowledged=False" if not self.acknowledged else None,
        ]
        return f"{self.__class__.__name__}({', '.join(pc for pc in pieces if pc)})"

    @staticmethod
    def unacknowledged() -> Reply:
        """A reply standing for a write the server was not asked to confirm."""
        return Reply(documents=[], acknowledged=False)


def normalize_replies(replies: Reply | Iterable[Reply]) -> list[Reply]:
    """
    Coerce a single reply or an iterable of replies into a list,
    preserving the submission order of the batches.
    """

    if isinstance(replies, Reply):
        return [replies]
    normalized: list[Any] = list(replies)
    for reply in normalized:
        if not isinstance(reply, Reply):
            raise TypeError(
                f"Cannot use an object of type {type(reply).__name__} as a reply."
            )
    return normalized
