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

from opresults.results.aggregate import AggregateResult
from opresults.results.base import OperationResult
from opresults.results.selection import (
    ReplyShape,
    make_update_result,
    reply_shape_for_wire_version,
    update_result_class,
)
from opresults.results.summary import (
    UpdateSummary,
    reduce_update_summaries,
    summarize,
)
from opresults.results.update import (
    BaseUpdateResult,
    LegacyUpdateResult,
    UpdateResult,
)

__all__ = [
    "AggregateResult",
    "BaseUpdateResult",
    "LegacyUpdateResult",
    "OperationResult",
    "ReplyShape",
    "UpdateResult",
    "UpdateSummary",
    "make_update_result",
    "reduce_update_summaries",
    "reply_shape_for_wire_version",
    "summarize",
    "update_result_class",
]
