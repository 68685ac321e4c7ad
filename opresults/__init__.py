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

import importlib.metadata
import os

import toml


def get_version() -> str:
    try:
        return importlib.metadata.version(__package__)

    # Not installed (e.g. while setup.py runs): read the version from pyproject.toml
    except importlib.metadata.PackageNotFoundError:
        dir_path = os.path.dirname(os.path.realpath(__file__))
        pyproject_path = os.path.join(dir_path, "..", "pyproject.toml")

        try:
            with open(pyproject_path, encoding="utf-8") as pyproject:
                pyproject_data = toml.loads(pyproject.read())
                return str(pyproject_data["tool"]["opresults"]["version"])

        except (FileNotFoundError, KeyError):
            return "unknown"


__version__: str = get_version()


from opresults.constants import ReplyField, SortMode  # noqa: E402
from opresults.exceptions import (  # noqa: E402
    BulkWriteException,
    IndexesNotSetException,
    InvalidSortValueException,
    OperationFailureException,
    OperationResultException,
    UnexpectedReplyException,
    WriteErrorDescriptor,
)
from opresults.replies import Reply  # noqa: E402
from opresults.results import (  # noqa: E402
    AggregateResult,
    BaseUpdateResult,
    LegacyUpdateResult,
    OperationResult,
    ReplyShape,
    UpdateResult,
    UpdateSummary,
    make_update_result,
    reduce_update_summaries,
    reply_shape_for_wire_version,
    summarize,
    update_result_class,
)
from opresults.utils.conversions import normalize_sort, sort_value  # noqa: E402

__all__ = [
    "AggregateResult",
    "BaseUpdateResult",
    "BulkWriteException",
    "IndexesNotSetException",
    "InvalidSortValueException",
    "LegacyUpdateResult",
    "OperationFailureException",
    "OperationResult",
    "OperationResultException",
    "Reply",
    "ReplyField",
    "ReplyShape",
    "SortMode",
    "UnexpectedReplyException",
    "UpdateResult",
    "UpdateSummary",
    "WriteErrorDescriptor",
    "__version__",
    "make_update_result",
    "normalize_sort",
    "reduce_update_summaries",
    "reply_shape_for_wire_version",
    "sort_value",
    "summarize",
    "update_result_class",
]
