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

"""Configuration management for the OKP validator."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import DEFAULT_LOG_FORMAT, configure_logging, parse_log_level


def _env_flag(name: str) -> bool:
    return os.getenv(name, 'false').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class ValidatorConfig:
    """Configuration class for a validation run."""
    log_level: str = "WARNING"
    schema_path: Optional[str] = None
    all_errors: bool = False
    basic: bool = False

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('OKP_VALIDATOR_LOG_LEVEL', 'WARNING'),
            schema_path=os.getenv('OKP_VALIDATOR_SCHEMA') or None,
            all_errors=_env_flag('OKP_VALIDATOR_ALL_ERRORS'),
            basic=_env_flag('OKP_VALIDATOR_BASIC'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_log_level(self.log_level)
        configure_logging(level=level, formatter=logging.Formatter(DEFAULT_LOG_FORMAT))
        return logging.getLogger('okp_validator')
