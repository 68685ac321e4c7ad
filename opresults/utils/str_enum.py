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

from enum import Enum, EnumMeta
from typing import TypeVar

T = TypeVar("T", bound="StrEnum")


class StrEnumMeta(EnumMeta):
    def _match_member(cls, value: str) -> str | None:
        """Name of the member whose name or value equals `value` (ignoring case)."""
        u_value = value.upper()
        for name, member in cls._member_map_.items():
            if u_value in {name.upper(), str(member.value).upper()}:
                return name
        return None

    def __contains__(cls, value: object) -> bool:
        if isinstance(value, str):
            return cls._match_member(value) is not None
        return isinstance(value, cls)


class StrEnum(Enum, metaclass=StrEnumMeta):
    @classmethod
    def coerce(cls: type[T], value: str | T) -> T:
        """
        Accept either a member of the enum or a string matching (case-insensitively)
        the name or the value of one of its members.

        Raises ValueError for strings matching no member and for any other type.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member_name = cls._match_member(value)
            if member_name is not None:
                return cls[member_name]
        raise ValueError(
            f"Invalid value '{value}' for {cls.__name__}. "
            f"Allowed values are: {[e.value for e in cls]}"
        )
