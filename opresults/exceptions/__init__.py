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

from opresults.exceptions.error_descriptors import WriteErrorDescriptor
from opresults.exceptions.reply_exceptions import (
    BulkWriteException,
    IndexesNotSetException,
    InvalidSortValueException,
    OperationFailureException,
    OperationResultException,
    UnexpectedReplyException,
)

__all__ = [
    "BulkWriteException",
    "IndexesNotSetException",
    "InvalidSortValueException",
    "OperationFailureException",
    "OperationResultException",
    "UnexpectedReplyException",
    "WriteErrorDescriptor",
]
