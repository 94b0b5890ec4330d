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

"""JSON Schema loader for OKP validation."""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .exceptions import SchemaLoadError, SchemaNotFoundError

logger = logging.getLogger(__name__)


SCHEMA_FILE_NAME = "okp.schema.json"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}

SchemaResolver = Callable[[], Path]


def default_schema_candidates() -> List[Path]:
    """Schema locations tried in order when no explicit path is given.

    The schema bundled next to this module comes first, then
    ``schemas/okp.schema.json`` relative to the current working directory.
    """
    package_dir = Path(__file__).resolve().parent
    return [
        package_dir / "schemas" / SCHEMA_FILE_NAME,
        Path.cwd() / "schemas" / SCHEMA_FILE_NAME,
    ]


def resolve_schema_path(
    explicit: Optional[Union[str, Path]] = None,
    candidates: Optional[List[Path]] = None,
) -> Path:
    """Locate the OKP schema file.

    Args:
        explicit: A user-supplied schema path; when given it is the only candidate
        candidates: Override the default search locations

    Returns:
        Path to an existing schema file

    Raises:
        SchemaNotFoundError: If no candidate exists
    """
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise SchemaNotFoundError(f"Cannot find {SCHEMA_FILE_NAME} at {path}")
        return path

    if candidates is None:
        candidates = default_schema_candidates()

    for candidate in candidates:
        logger.debug(f"Looking for schema at {candidate}")
        if candidate.is_file():
            return candidate

    raise SchemaNotFoundError(f"Cannot find {SCHEMA_FILE_NAME}")


def make_resolver(explicit: Optional[Union[str, Path]] = None) -> SchemaResolver:
    """Bind schema discovery settings into a zero-argument resolver."""
    return lambda: resolve_schema_path(explicit)


def load_schema(schema_path: Union[str, Path]) -> dict:
    """Load the OKP schema from ``schema_path``.

    Raises:
        SchemaLoadError: If the file cannot be read, is invalid JSON or is not an object
    """
    path = Path(schema_path)
    cache_key = str(path.resolve())
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    try:
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except FileNotFoundError as e:
        raise SchemaNotFoundError(f"Cannot find {SCHEMA_FILE_NAME} at {path}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in schema file {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"Schema file {path} must contain a JSON object")

    logger.debug(f"Loaded schema from {path}")
    _SCHEMA_CACHE[cache_key] = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
