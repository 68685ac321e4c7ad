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
Conversions of user-supplied sort specifications into the normalized form
sent to the server: an ordered mapping from field names to 1 (ascending)
or -1 (descending).
"""

from __future__ import annotations

from typing import Any, Iterable

from opresults.constants import SortMode, SortType
from opresults.exceptions import InvalidSortValueException

ASCENDING_CONVERSION = {"ascending", "asc", "1"}
DESCENDING_CONVERSION = {"descending", "desc", "-1"}


def sort_value(value: Any) -> int | dict[str, Any]:
    """
    Convert a sort direction into the value understood by the server.

    Admitted directions (case-insensitive) are "ascending", "asc", 1
    and "descending", "desc", -1. A dictionary (e.g. a `{"$meta": ...}`
    sort) is returned unchanged.

    Args:
        value: the direction to convert.

    Returns:
        SortMode.ASCENDING, SortMode.DESCENDING or the input dictionary.
    """

    if isinstance(value, dict):
        return value
    # bool is an int, but True/False are not sort directions
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        val = str(value).strip().lower()
        if val in ASCENDING_CONVERSION:
            return SortMode.ASCENDING
        if val in DESCENDING_CONVERSION:
            return SortMode.DESCENDING
    raise InvalidSortValueException(
        f"{value!r} was supplied as a sort direction when acceptable values are: "
        "SortMode.ASCENDING, 'ascending', 'asc', 1, SortMode.DESCENDING, "
        "'descending', 'desc', -1.",
        value=value,
    )


def _is_direction(value: Any) -> bool:
    if isinstance(value, dict):
        return False
    try:
        sort_value(value)
    except InvalidSortValueException:
        return False
    return True


def _sort_from_pairs(value: list[Any]) -> SortType:
    order_by: SortType = {}
    for param in value:
        if isinstance(param, str):
            order_by[param] = SortMode.ASCENDING
        elif isinstance(param, (list, tuple)) and len(param) == 2:
            field, direction = param
            if direction is not None:
                order_by[field] = sort_value(direction)
        else:
            raise InvalidSortValueException(
                f"Cannot interpret {param!r} as a field or a (field, direction) pair.",
                value=param,
            )
    return order_by


def normalize_sort(value: SortType | Iterable[Any] | str | None) -> SortType:
    """
    Normalize any of the admitted sort specifications into an ordered dict.

    Admitted forms:
        - None or an empty string: no sort, i.e. `{}`;
        - a field name: `"a"` -> `{"a": 1}`;
        - a dict: `{"a": "desc", "b": 1}` -> `{"a": -1, "b": 1}`;
        - a list of pairs and/or field names:
          `[("a", "asc"), "b"]` -> `{"a": 1, "b": 1}`;
        - a single flat pair: `["a", "desc"]` -> `{"a": -1}`.

    Raises:
        InvalidSortValueException: if a direction cannot be converted.
    """

    if value is None:
        return {}
    if isinstance(value, str):
        return {value: SortMode.ASCENDING} if value else {}
    if isinstance(value, dict):
        return {str(key): sort_value(direction) for key, direction in value.items()}
    items = list(value)
    if len(items) == 2 and isinstance(items[0], str) and _is_direction(items[1]):
        return {items[0]: sort_value(items[1])}
    return _sort_from_pairs(items)
