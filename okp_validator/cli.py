#!/usr/bin/env python3
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

"""CLI entry point for validating Open Kitchen Protocol files."""

import argparse
import sys
from typing import List, Optional

from .capabilities import detect_capabilities
from .config import ValidatorConfig
from .exceptions import SchemaLoadError
from .pipeline import ValidationPipeline
from .report import render_github_actions, render_human, render_json
from .schema_loader import make_resolver
from .template import DEFAULT_PROJECT_PREFIX, render_starter


EXIT_OK = 0
EXIT_INVALID = 1
EXIT_FATAL = 2

EPILOG = """\
Examples:
  okp-validate open-kitchen.yaml
  okp-validate examples/*.yaml
  okp-validate --init > my-kitchen.yaml
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='okp-validate',
        description='OKP Validator - Validate Open Kitchen Protocol configuration files.',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'files',
        nargs='*',
        help='OKP files to validate (.json, .yaml or .yml)',
    )
    parser.add_argument(
        '--init',
        action='store_true',
        help='Print a starter configuration and exit',
    )
    parser.add_argument(
        '--project-prefix',
        default=DEFAULT_PROJECT_PREFIX,
        help=f'Task project prefix used by --init (default: {DEFAULT_PROJECT_PREFIX})',
    )
    parser.add_argument(
        '--schema',
        default=None,
        help='Path to okp.schema.json (default: bundled schema, then ./schemas/okp.schema.json)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--all-errors',
        action='store_true',
        default=None,
        help='List every schema violation instead of only the first one',
    )
    parser.add_argument(
        '--basic',
        action='store_true',
        default=None,
        help="Only check that the 'okp' and 'agents' fields are present",
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level written to stderr (default: WARNING)',
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        parser.print_help()
        return EXIT_OK

    args = parser.parse_args(argv)

    if args.init:
        sys.stdout.write(render_starter(project_prefix=args.project_prefix))
        return EXIT_OK

    if not args.files:
        parser.print_help()
        return EXIT_OK

    config = ValidatorConfig.from_env()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.schema is not None:
        config.schema_path = args.schema
    if args.all_errors is not None:
        config.all_errors = args.all_errors
    if args.basic is not None:
        config.basic = args.basic
    config.set_logging()

    try:
        pipeline = ValidationPipeline(
            make_resolver(config.schema_path),
            capabilities=detect_capabilities(basic=config.basic),
            all_violations=config.all_errors,
        )
    except SchemaLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL

    result = pipeline.run(args.files)

    if args.format == 'json':
        print(render_json(result))
    elif args.format == 'github-actions':
        for line in render_github_actions(result):
            print(line)
    else:  # human-readable
        for line in render_human(result, details=config.all_errors):
            print(line)

    return EXIT_OK if result.valid else EXIT_INVALID


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the validator CLI."""
    sys.exit(run(argv))


if __name__ == '__main__':
    main()
