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
from functools import reduce
from typing import Any, Iterable

from opresults.constants import DocumentType
from opresults.results.update import BaseUpdateResult
from opresults.settings.defaults import REPR_MAX_ITEMS


def _truncated_str(items: list[Any] | dict[int, Any]) -> str:
    if len(items) > REPR_MAX_ITEMS:
        _items = list(items.items()) if isinstance(items, dict) else items
        return (
            f"[{', '.join(str(_item) for _item in _items[:REPR_MAX_ITEMS])} "
            f"... ({len(items)} total)]"
        )
    return str(items)


@dataclass
class UpdateSummary:
    """
    A detached, plain-data summary of an update result, suitable for
    combining the outcome of several logical update operations.

    Attributes:
        matched_count: number of matched documents.
        modified_count: number of modified documents, or None if unknown
            (as is the case for legacy replies).
        upserted_count: number of upserted documents.
        upserted_ids: a map from item index in the operation to upserted ID.
        write_errors: the write errors, with remapped indexes.
        acknowledged: whether the operation(s) were acknowledged.
    """

    matched_count: int
    modified_count: int | None
    upserted_count: int
    upserted_ids: dict[int, Any] = field(default_factory=dict)
    write_errors: list[DocumentType] = field(default_factory=list)
    acknowledged: bool = True

    def __repr__(self) -> str:
        pieces = [
            f"matched_count={self.matched_count}",
            f"modified_count={self.modified_count}",
            f"upserted_count={self.upserted_count}",
            f"upserted_ids={_truncated_str(self.upserted_ids)}"
            if self.upserted_ids
            else None,
            f"write_errors={_truncated_str(self.write_errors)}"
            if self.write_errors
            else None,
            "acknowledged=False" if not self.acknowledged else None,
        ]
        return f"{self.__class__.__name__}({', '.join(pc for pc in pieces if pc)})"

    @staticmethod
    def zero() -> UpdateSummary:
        return UpdateSummary(
            matched_count=0,
            modified_count=0,
            upserted_count=0,
        )


def summarize(result: BaseUpdateResult) -> UpdateSummary:
    """
    Build the summary of an update result, of either reply shape.

    The result must have its index map set if it is acknowledged.
    """
    return UpdateSummary(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_count=result.upserted_count,
        upserted_ids=result.upserted_ids,
        write_errors=result.aggregate_write_errors(),
        acknowledged=result.acknowledged,
    )


def reduce_update_summaries(summaries: Iterable[UpdateSummary]) -> UpdateSummary:
    """
    Reduce a list of update summaries into a single one.

    Args:
        summaries: an iterable of UpdateSummary instances.

    Returns:
        A new UpdateSummary object which summarizes the whole input. The
        modified count is None as soon as any of the inputs has it unknown.
    """

    def _sum_summaries(s1: UpdateSummary, s2: UpdateSummary) -> UpdateSummary:
        if s1.modified_count is None or s2.modified_count is None:
            modified_count = None
        else:
            modified_count = s1.modified_count + s2.modified_count
        return UpdateSummary(
            matched_count=s1.matched_count + s2.matched_count,
            modified_count=modified_count,
            upserted_count=s1.upserted_count + s2.upserted_count,
            upserted_ids={**s1.upserted_ids, **s2.upserted_ids},
            write_errors=s1.write_errors + s2.write_errors,
            acknowledged=s1.acknowledged and s2.acknowledged,
        )

    return reduce(_sum_summaries, summaries, UpdateSummary.zero())
