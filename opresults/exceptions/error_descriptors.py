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
from typing import Any

from opresults.constants import ERROR, ERROR_CODE, INDEX


@dataclass
class WriteErrorDescriptor:
    """
    An object representing a single error reported by the server in a
    reply, typically with a numeric code, a text message and, for per-item
    write errors, the index of the offending item.

    Write errors surfaced by update results carry the index of the item
    in the original (unsplit) operation, i.e. after remapping.

    Attributes:
        index: the item index found in the error's "index" field, if any.
        code: the numeric code found in the error's "code" field.
        message: the text found in the error's "errmsg" field.
        attributes: a dict with any further key-value pairs of the error,
            such as "errInfo".
    """

    index: int | None
    code: int | None
    message: str | None
    attributes: dict[str, Any]

    _known_dict_fields = {
        INDEX,
        ERROR_CODE,
        ERROR,
    }

    def __init__(self, error_dict: dict[str, Any] | str) -> None:
        if isinstance(error_dict, str):
            self.message = error_dict
            self.index = None
            self.code = None
            self.attributes = {}
        else:
            self.index = error_dict.get(INDEX)
            self.code = error_dict.get(ERROR_CODE)
            self.message = error_dict.get(ERROR)
            self.attributes = {
                k: v for k, v in error_dict.items() if k not in self._known_dict_fields
            }

    def __repr__(self) -> str:
        pieces = [
            f"index={self.index}" if self.index is not None else None,
            f"code={self.code}" if self.code is not None else None,
            f"message={self.message.__repr__()}" if self.message else None,
            f"attributes={self.attributes.__repr__()}" if self.attributes else None,
        ]
        return f"{self.__class__.__name__}({', '.join(pc for pc in pieces if pc)})"

    def __str__(self) -> str:
        return self.summary()

    def summary(self) -> str:
        """
        Determine a string succinct description of this descriptor.

        The precise format of this summary is determined by which fields are set.
        """
        non_code_part: str | None
        if self.message:
            if self.index is not None:
                non_code_part = f"item {self.index}: {self.message}"
            else:
                non_code_part = self.message
        else:
            if self.index is not None:
                non_code_part = f"item {self.index}"
            else:
                non_code_part = None
        if self.code is not None:
            if non_code_part:
                return f"{non_code_part} ({self.code})"
            else:
                return f"{self.code}"
        else:
            if non_code_part:
                return non_code_part
            else:
                return ""
