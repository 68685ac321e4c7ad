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

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from opresults.constants import ERROR, OK
from opresults.exceptions.error_descriptors import WriteErrorDescriptor
from opresults.settings.defaults import MAX_ERRORS_IN_SUMMARY, OK_VALUE

if TYPE_CHECKING:
    from opresults.results.base import OperationResult


def _summarize_descriptors(error_descriptors: list[WriteErrorDescriptor]) -> str:
    summaries = [e_d.summary() for e_d in error_descriptors]
    if not summaries:
        return ""
    if len(summaries) == 1:
        return summaries[0]
    _j_summaries = "; ".join(
        f"[{summ_i + 1}] {summ_s}"
        for summ_i, summ_s in enumerate(summaries[:MAX_ERRORS_IN_SUMMARY])
    )
    if len(summaries) > MAX_ERRORS_IN_SUMMARY:
        _j_summaries += " ... (more errors)"
    return f"[{len(summaries)} errors collected] {_j_summaries}"


class OperationResultException(Exception):
    """
    Any exception occurred while interpreting the replies of an operation,
    such as:
      - a reply does not have the shape expected for its operation,
      - the server reported the operation as failed,
    but not, for instance,
      - a network error while exchanging messages with the server.
    """

    pass


@dataclass
class UnexpectedReplyException(OperationResultException):
    """
    A server reply is malformed in that it does not have the expected
    field(s), or they are of the wrong type.

    Attributes:
        text: a text message about the exception.
        raw_response: the offending reply document, if one is available.
    """

    text: str
    raw_response: dict[str, Any] | None

    def __init__(
        self,
        text: str,
        raw_response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(text)
        self.text = text
        self.raw_response = raw_response


@dataclass
class IndexesNotSetException(OperationResultException):
    """
    Batch-local indexes found in the replies cannot be remapped to the items
    of the original operation because the result was never given an index map
    (neither at construction nor through `set_indexes`).

    Attributes:
        text: a text message about the exception.
    """

    text: str

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


@dataclass
class OperationFailureException(OperationResultException):
    """
    The server replied, but reported the operation (or one of its batches)
    as failed, either through an "ok" field different from 1 or by carrying
    an error message.

    Attributes:
        text: a text message about the exception.
        raw_responses: the first document of every reply of the operation.
        error_descriptors: a list of WriteErrorDescriptor, one for each
            failed reply.
    """

    text: str
    raw_responses: list[dict[str, Any]]
    error_descriptors: list[WriteErrorDescriptor]

    def __init__(
        self,
        text: str,
        *,
        raw_responses: list[dict[str, Any]],
        error_descriptors: list[WriteErrorDescriptor],
    ) -> None:
        super().__init__(text)
        self.text = text
        self.raw_responses = raw_responses
        self.error_descriptors = error_descriptors

    @staticmethod
    def from_result(result: OperationResult) -> OperationFailureException:
        """Parse the replies of a result into this exception."""

        raw_responses = [reply.first_document for reply in result.replies]
        error_descriptors = [
            WriteErrorDescriptor(raw_response)
            for raw_response in raw_responses
            if raw_response.get(ERROR) is not None
            or raw_response.get(OK) != OK_VALUE
        ]
        text = _summarize_descriptors(error_descriptors) or "Operation failed."

        return OperationFailureException(
            text,
            raw_responses=raw_responses,
            error_descriptors=error_descriptors,
        )


@dataclass
class BulkWriteException(OperationResultException):
    """
    The server reported per-item errors for a write operation that may have
    been split in several batches. The operation as a whole can still have
    partially succeeded.

    Attributes:
        text: a text message about the exception.
        write_errors: the write-error entries, with their "index" field
            referring to the items of the original operation.
        error_descriptors: a list of WriteErrorDescriptor, one for each
            entry in `write_errors`.
    """

    text: str
    write_errors: list[dict[str, Any]]
    error_descriptors: list[WriteErrorDescriptor]

    def __init__(
        self,
        text: str,
        *,
        write_errors: list[dict[str, Any]],
        error_descriptors: list[WriteErrorDescriptor],
    ) -> None:
        super().__init__(text)
        self.text = text
        self.write_errors = write_errors
        self.error_descriptors = error_descriptors

    @staticmethod
    def from_write_errors(write_errors: list[dict[str, Any]]) -> BulkWriteException:
        """Build this exception out of a list of (remapped) write errors."""

        error_descriptors = [
            WriteErrorDescriptor(write_error) for write_error in write_errors
        ]
        return BulkWriteException(
            _summarize_descriptors(error_descriptors),
            write_errors=write_errors,
            error_descriptors=error_descriptors,
        )


@dataclass
class InvalidSortValueException(OperationResultException, ValueError):
    """
    A value supplied as a sort direction cannot be converted to one of
    the admitted directions.

    Attributes:
        text: a text message about the exception.
        value: the offending value.
    """

    text: str
    value: Any

    def __init__(self, text: str, *, value: Any) -> None:
        super().__init__(text)
        self.text = text
        self.value = value
