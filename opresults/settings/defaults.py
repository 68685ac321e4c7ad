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

# Lowest max-wire-version at which servers accept write commands
# ("insert", "update", "delete") and answer with the write-command reply shape.
# Older servers use the legacy shape (getLastError-style replies).
WRITE_COMMAND_MIN_WIRE_VERSION = 2

# Settings for the string representation of errors and results
MAX_ERRORS_IN_SUMMARY = 8
REPR_MAX_ITEMS = 5

# The only value of the "ok" field denoting a successful command
OK_VALUE = 1
