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

"""Per-document pipeline: source -> document -> verdict."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .capabilities import Capabilities, detect_capabilities
from .exceptions import LoadError
from .loader import DocumentLoader
from .models import MODE_LOAD, Verdict
from .report import RunResult
from .schema_loader import SchemaResolver, load_schema
from .schema_validator import SchemaValidator

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """Validates OKP documents one at a time against a single schema.

    Construction resolves and loads the schema, so a missing or broken schema
    raises ``SchemaLoadError`` before any document is looked at.
    """

    def __init__(
        self,
        schema_resolver: SchemaResolver,
        capabilities: Optional[Capabilities] = None,
        all_violations: bool = False,
    ):
        if capabilities is None:
            capabilities = detect_capabilities()

        schema_path = schema_resolver()
        logger.info(f"Using schema: {schema_path}")
        self.schema = load_schema(schema_path)

        self.loader = DocumentLoader(yaml_parser=capabilities.yaml_parser)
        self.validator = SchemaValidator(
            self.schema,
            matcher=capabilities.matcher,
            all_violations=all_violations,
        )
        if capabilities.matcher is None:
            logger.info("No schema matcher available; running the basic presence check for okp and agents")

    def check(self, source: Union[str, Path]) -> Verdict:
        """Produce the verdict for one source. Never raises for document problems."""
        try:
            document = self.loader.load(source)
        except LoadError as exc:
            logger.debug(f"{source}: {type(exc).__name__}")
            return Verdict.failed(str(exc), mode=MODE_LOAD)
        except Exception as exc:
            logger.exception(f"Unexpected error while loading {source}")
            return Verdict.failed(f"Cannot read file: {exc}", mode=MODE_LOAD)

        try:
            return self.validator.validate(document)
        except Exception as exc:
            logger.exception(f"Unexpected error while validating {source}")
            return Verdict.failed(f"Unexpected error during validation: {exc}", mode=self.validator.mode)

    def run(self, sources: Iterable[Union[str, Path]], result: Optional[RunResult] = None) -> RunResult:
        """Validate every source in order; earlier failures never stop later ones."""
        if result is None:
            result = RunResult()
        for source in sources:
            result.add(str(source), self.check(source))
        return result
