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

"""JSON Schema matching backed by the jsonschema library."""

import logging
from typing import Any, Iterator

from jsonschema import validators
from jsonschema.exceptions import SchemaError

from .capabilities import CompiledSchema, SchemaMatcher
from .exceptions import SchemaLoadError
from .models import Violation

logger = logging.getLogger(__name__)


class JsonSchemaCompiled(CompiledSchema):
    """A jsonschema validator instance wrapped as a compiled schema."""

    def __init__(self, validator):
        self._validator = validator

    def iter_violations(self, document: Any) -> Iterator[Violation]:
        # iter_errors walks the schema keywords (and "properties") in declaration order
        for error in self._validator.iter_errors(document):
            yield Violation(path=tuple(error.absolute_path), message=error.message)


class JsonSchemaMatcher(SchemaMatcher):
    """Schema matcher using the draft declared by the schema's ``$schema``."""

    LIBRARY = "jsonschema"

    def check_schema(self, schema: dict) -> None:
        validator_cls = validators.validator_for(schema)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            path = "/".join(str(p) for p in exc.absolute_path) or "(root)"
            raise SchemaLoadError(f"Invalid OKP schema at {path}: {exc.message}") from exc

    def compile(self, schema: dict) -> CompiledSchema:
        self.check_schema(schema)
        validator_cls = validators.validator_for(schema)
        logger.debug(f"Compiling schema with {validator_cls.__name__}")
        return JsonSchemaCompiled(validator_cls(schema))
