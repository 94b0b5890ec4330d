# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Custom exceptions for the OKP validator."""

from typing import Optional


class OkpValidatorError(Exception):
    """Base exception for OKP validator errors."""
    pass


class LoadError(OkpValidatorError):
    """Exception raised when a document cannot be turned into a tree.

    The exception message is the user-facing verdict message for the document.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class NotFoundError(LoadError):
    """Exception raised when a document source does not exist."""
    pass


class ReadError(LoadError):
    """Exception raised when a document source exists but cannot be read."""
    pass


class ParseError(LoadError):
    """Exception raised for malformed JSON or YAML syntax."""
    pass


class EmptyDocumentError(LoadError):
    """Exception raised when a document parses to nothing."""
    pass


class MissingCapabilityError(LoadError):
    """Exception raised when a document needs a parser that is not installed."""

    def __init__(self, message: str, source: Optional[str] = None, capability: Optional[str] = None):
        super().__init__(message, source)
        self.capability = capability


class SchemaLoadError(OkpValidatorError):
    """Exception raised when the OKP schema cannot be loaded. Fatal for a run."""
    pass


class SchemaNotFoundError(SchemaLoadError):
    """Exception raised when no schema resource resolves."""
    pass
