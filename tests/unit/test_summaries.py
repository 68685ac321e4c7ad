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

import pytest

from opresults import (
    LegacyUpdateResult,
    Reply,
    UpdateResult,
    UpdateSummary,
    reduce_update_summaries,
    summarize,
)


class TestUpdateSummaries:
    @pytest.mark.describe("test of summarizing a write-command update result")
    def test_summarize_updateresult(self, write_command_replies: list[Reply]) -> None:
        summary = summarize(UpdateResult(write_command_replies, indexes=[10, 11, 12]))
        assert summary.matched_count == 7
        assert summary.modified_count == 5
        assert summary.upserted_count == 1
        assert summary.upserted_ids == {10: "u-1"}
        assert [we["index"] for we in summary.write_errors] == [11, 12, 10]
        assert summary.acknowledged

    @pytest.mark.describe("test of summarizing a legacy update result")
    def test_summarize_legacyupdateresult(self, legacy_replies: list[Reply]) -> None:
        summary = summarize(LegacyUpdateResult(legacy_replies, indexes=list(range(6))))
        assert summary == UpdateSummary(
            matched_count=3,
            modified_count=None,
            upserted_count=3,
            upserted_ids={1: "id-1"},
            write_errors=[{"errmsg": "E11000 duplicate key", "index": 3, "code": 11000}],
            acknowledged=True,
        )

    @pytest.mark.describe("test of reduction of update summaries")
    def test_reduce_update_summaries(self) -> None:
        s1 = UpdateSummary(
            matched_count=1,
            modified_count=1,
            upserted_count=0,
            write_errors=[{"index": 0, "code": 1, "errmsg": "a"}],
        )
        s2 = UpdateSummary(
            matched_count=10,
            modified_count=5,
            upserted_count=2,
            upserted_ids={3: "x", 4: "y"},
        )
        s3 = UpdateSummary(
            matched_count=100,
            modified_count=50,
            upserted_count=0,
            write_errors=[{"index": 9, "code": 2, "errmsg": "b"}],
            acknowledged=False,
        )

        reduced = reduce_update_summaries([s1, s2, s3])
        assert reduced == UpdateSummary(
            matched_count=111,
            modified_count=56,
            upserted_count=2,
            upserted_ids={3: "x", 4: "y"},
            write_errors=[
                {"index": 0, "code": 1, "errmsg": "a"},
                {"index": 9, "code": 2, "errmsg": "b"},
            ],
            acknowledged=False,
        )

        s_legacy = UpdateSummary(matched_count=1, modified_count=None, upserted_count=1)
        reduced_n = reduce_update_summaries([s1, s_legacy, s2])
        assert reduced_n.modified_count is None
        assert reduced_n.matched_count == 12

        assert reduce_update_summaries([]) == UpdateSummary.zero()

    @pytest.mark.describe("test of UpdateSummary repr")
    def test_updatesummary_repr(self) -> None:
        summary = UpdateSummary(
            matched_count=0,
            modified_count=None,
            upserted_count=7,
            upserted_ids={i: f"id{i}" for i in range(7)},
        )
        the_repr = repr(summary)
        assert "modified_count=None" in the_repr
        assert "(7 total)" in the_repr
        assert "write_errors" not in the_repr
        assert repr(UpdateSummary.zero()) == (
            "UpdateSummary(matched_count=0, modified_count=0, upserted_count=0)"
        )
