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

"""
Main conftest for shared fixtures.
"""

from __future__ import annotations

from typing import Any

import pytest

from opresults import Reply


def make_reply(document: dict[str, Any], **kwargs: Any) -> Reply:
    return Reply(documents=[document], **kwargs)


@pytest.fixture
def write_command_replies() -> list[Reply]:
    """
    Replies of an update split into four batches, as sent by servers
    supporting write commands.
    """
    return [
        make_reply({"ok": 1, "n": 2, "nModified": 1}),
        make_reply(
            {
                "ok": 1,
                "n": 1,
                "nModified": 0,
                "upserted": [{"index": 0, "_id": "u-1"}],
            }
        ),
        make_reply(
            {
                "ok": 1,
                "n": 5,
                "nModified": 4,
                "writeErrors": [
                    {"index": 1, "code": 11000, "errmsg": "E11000 duplicate key"},
                    {
                        "index": 2,
                        "code": 121,
                        "errmsg": "Document failed validation",
                        "errInfo": {"failingDocumentId": "d-2"},
                    },
                ],
            }
        ),
        make_reply(
            {
                "ok": 1,
                "n": 0,
                "writeErrors": [{"index": 0, "code": 2, "errmsg": "bad update"}],
            }
        ),
    ]


@pytest.fixture
def legacy_replies() -> list[Reply]:
    """
    Replies of six single updates, as sent by servers without write commands.
    """
    return [
        make_reply({"ok": 1, "n": 3, "updatedExisting": True}),
        make_reply({"ok": 1, "n": 1, "updatedExisting": False, "upserted": "id-1"}),
        make_reply({"ok": 1, "n": 2}),
        make_reply(
            {
                "ok": 1,
                "n": 0,
                "updatedExisting": True,
                "errmsg": "E11000 duplicate key",
                "code": 11000,
            }
        ),
        make_reply({"ok": 1, "n": 0, "updatedExisting": True, "errmsg": "no code"}),
        make_reply({"ok": 1, "n": 0, "updatedExisting": True, "code": 5}),
    ]
