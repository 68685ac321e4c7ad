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

from typing import Any, Dict, List

DocumentType = Dict[str, Any]
IndexMapType = List[int]
SortType = Dict[str, Any]

# Common reply fields
OK = "ok"
N = "n"
ERROR = "errmsg"
ERROR_CODE = "code"

# Update replies
MODIFIED = "nModified"
UPSERTED = "upserted"
UPDATED_EXISTING = "updatedExisting"
WRITE_ERRORS = "writeErrors"
INDEX = "index"
ID = "_id"

# Aggregation replies
CURSOR = "cursor"
CURSOR_ID = "id"
FIRST_BATCH = "firstBatch"
RESULT = "result"
NAMESPACE = "ns"


class ReplyField:
    """
    Field names found in the documents returned by the server, for use
    by callers who need to inspect raw replies, e.g.
    `raw_document[ReplyField.WRITE_ERRORS]`.
    """

    def __init__(self) -> None:
        raise NotImplementedError

    OK = OK
    N = N
    ERROR = ERROR
    ERROR_CODE = ERROR_CODE
    MODIFIED = MODIFIED
    UPSERTED = UPSERTED
    UPDATED_EXISTING = UPDATED_EXISTING
    WRITE_ERRORS = WRITE_ERRORS
    INDEX = INDEX
    ID = ID
    CURSOR = CURSOR
    CURSOR_ID = CURSOR_ID
    FIRST_BATCH = FIRST_BATCH
    RESULT = RESULT
    NAMESPACE = NAMESPACE


class SortMode:
    """
    Admitted values for sort directions, e.g.
    `normalize_sort({"field": SortMode.ASCENDING})`.
    """

    def __init__(self) -> None:
        raise NotImplementedError

    ASCENDING = 1
    DESCENDING = -1


__all__ = [
    "DocumentType",
    "IndexMapType",
    "ReplyField",
    "SortMode",
    "SortType",
]
