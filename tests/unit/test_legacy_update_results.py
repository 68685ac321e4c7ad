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
    IndexesNotSetException,
    LegacyUpdateResult,
    Reply,
    UnexpectedReplyException,
)

from ..conftest import make_reply

INDEXES = [100, 101, 102, 103, 104, 105]


class TestLegacyUpdateResult:
    @pytest.mark.describe("test of counts over legacy replies")
    def test_legacyupdateresult_counts(self, legacy_replies: list[Reply]) -> None:
        result = LegacyUpdateResult(legacy_replies)

        assert result.acknowledged
        assert result.matched_count == 3
        assert result.upserted_count == 3
        assert result.modified_count is None

    @pytest.mark.describe("test of updatedExisting driving matched and upserted counts")
    def test_legacyupdateresult_updated_existing(self) -> None:
        upserting = LegacyUpdateResult(
            make_reply({"ok": 1, "n": 3, "updatedExisting": False})
        )
        assert upserting.upserted_count == 3
        assert upserting.matched_count == 0

        matching = LegacyUpdateResult(
            make_reply({"ok": 1, "n": 3, "updatedExisting": True})
        )
        assert matching.upserted_count == 0
        assert matching.matched_count == 3

    @pytest.mark.describe("test of a missing updatedExisting flag meaning upsert")
    def test_legacyupdateresult_missing_flag(self) -> None:
        missing = LegacyUpdateResult(make_reply({"ok": 1, "n": 2}), indexes=[0])
        explicit = LegacyUpdateResult(
            make_reply({"ok": 1, "n": 2, "updatedExisting": False}), indexes=[0]
        )
        for result in (missing, explicit):
            assert result.upserted_count == 2
            assert result.matched_count == 0
            assert result.modified_count is None
            assert result.aggregate_write_errors() == []

    @pytest.mark.describe("test of the modified count being unknown, never zero")
    def test_legacyupdateresult_modified_unknown(self) -> None:
        result = LegacyUpdateResult(
            make_reply({"ok": 1, "n": 1, "updatedExisting": True, "nModified": 1})
        )
        assert result.modified_count is None
        assert result.modified_count != 0

    @pytest.mark.describe("test of unacknowledged legacy results")
    def test_legacyupdateresult_unacknowledged(self) -> None:
        result = LegacyUpdateResult([Reply.unacknowledged(), Reply.unacknowledged()])

        assert not result.acknowledged
        assert result.matched_count == 0
        assert result.upserted_count == 0
        assert result.modified_count is None
        assert result.aggregate_write_errors() == []
        assert result.upserted_ids == {}

    @pytest.mark.describe("test of legacy write errors requiring message and code")
    def test_legacyupdateresult_aggregate_write_errors(
        self, legacy_replies: list[Reply]
    ) -> None:
        result = LegacyUpdateResult(legacy_replies).set_indexes(INDEXES)

        assert result.aggregate_write_errors() == [
            {"errmsg": "E11000 duplicate key", "index": 103, "code": 11000},
        ]

    @pytest.mark.describe("test of legacy write errors with null fields")
    def test_legacyupdateresult_null_error_fields(self) -> None:
        result = LegacyUpdateResult(
            [
                make_reply({"ok": 1, "n": 0, "errmsg": None, "code": 11000}),
                make_reply({"ok": 1, "n": 0, "errmsg": "msg", "code": None}),
                make_reply({"ok": 1, "n": 0, "errmsg": "msg", "code": 0}),
            ],
            indexes=[7, 8, 9],
        )
        assert result.aggregate_write_errors() == [
            {"errmsg": "msg", "index": 9, "code": 0},
        ]

    @pytest.mark.describe("test of legacy write errors aggregation without indexes")
    def test_legacyupdateresult_indexes_not_set(
        self, legacy_replies: list[Reply]
    ) -> None:
        result = LegacyUpdateResult(legacy_replies)
        with pytest.raises(IndexesNotSetException):
            result.aggregate_write_errors()

    @pytest.mark.describe("test of legacy replies outnumbering the index map")
    def test_legacyupdateresult_short_index_map(
        self, legacy_replies: list[Reply]
    ) -> None:
        result = LegacyUpdateResult(legacy_replies, indexes=[0, 1])
        with pytest.raises(UnexpectedReplyException):
            result.aggregate_write_errors()

    @pytest.mark.describe("test of legacy upserted ids")
    def test_legacyupdateresult_upserted_ids(self, legacy_replies: list[Reply]) -> None:
        result = LegacyUpdateResult(legacy_replies, indexes=INDEXES)
        assert result.upserted_ids == {101: "id-1"}

    @pytest.mark.describe("test of the deprecated accessor aliases, legacy")
    def test_legacyupdateresult_deprecated_aliases(
        self, legacy_replies: list[Reply]
    ) -> None:
        result = LegacyUpdateResult(legacy_replies)
        with pytest.warns(DeprecationWarning):
            assert result.n_matched == 3
        with pytest.warns(DeprecationWarning):
            assert result.n_modified is None
        with pytest.warns(DeprecationWarning):
            assert result.n_upserted == 3

    @pytest.mark.describe("test of LegacyUpdateResult repr")
    def test_legacyupdateresult_repr(self, legacy_replies: list[Reply]) -> None:
        the_repr = repr(LegacyUpdateResult(legacy_replies))
        assert the_repr.startswith("LegacyUpdateResult(")
        assert "modified_count=None" in the_repr
