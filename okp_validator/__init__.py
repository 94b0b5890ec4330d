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

"""Validator for Open Kitchen Protocol (OKP) configuration files."""

from pathlib import Path
from typing import List, Optional, Union

from .capabilities import Capabilities
from .models import Verdict, Violation
from .pipeline import ValidationPipeline
from .report import RunResult, aggregate, format_status_line
from .schema_loader import make_resolver

__version__ = "0.1.0"

__all__ = [
    'validate_files',
    'ValidationPipeline',
    'RunResult',
    'Verdict',
    'Violation',
    'aggregate',
    'format_status_line',
]


def validate_files(
    file_paths: List[Union[str, Path]],
    schema_path: Optional[Union[str, Path]] = None,
    capabilities: Optional[Capabilities] = None,
    all_violations: bool = False,
) -> RunResult:
    """Validate a list of OKP files.

    Args:
        file_paths: List of file paths to validate
        schema_path: Explicit schema location; None uses schema discovery
        capabilities: Parsing/matching capabilities; None detects installed libraries
        all_violations: Keep every violation on failing verdicts

    Returns:
        RunResult with one entry per file, in input order

    Raises:
        SchemaLoadError: If the schema cannot be found or loaded
    """
    pipeline = ValidationPipeline(
        make_resolver(schema_path),
        capabilities=capabilities,
        all_violations=all_violations,
    )
    return pipeline.run(file_paths)
