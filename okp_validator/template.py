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

"""Starter OKP document rendering for ``--init``."""

from __future__ import annotations

import json
import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined


STARTER_TEMPLATE = "starter.okp.yaml.jinja2"
DEFAULT_PROJECT_PREFIX = "MY-PROJECT"
OKP_VERSION = "1.0"

STARTER_AGENTS = [
    {
        "id": "planner",
        "provider": "anthropic",
        "model": "claude-sonnet-4-20250514",
        "role": "planning",
        "capabilities": ["task_decomposition", "architecture_design"],
    },
    {
        "id": "coder",
        "provider": "openai",
        "model": "gpt-4",
        "role": "implementation",
        "capabilities": ["code_generation", "debugging"],
    },
    {
        "id": "reviewer",
        "provider": "anthropic",
        "model": "claude-sonnet-4-20250514",
        "role": "review",
        "capabilities": ["code_review", "security_audit"],
    },
]

STARTER_WORKFLOW = [
    {"id": "plan", "agent": "planner", "action": "decompose", "outputs": ["plan", "subtasks"]},
    {"id": "implement", "agent": "coder", "depends_on": ["plan"], "action": "execute", "outputs": ["code", "tests"]},
    {"id": "review", "agent": "reviewer", "depends_on": ["implement"], "action": "review", "outputs": ["feedback"]},
]


def _get_template_directory() -> str:
    # Base dir is .../okp_validator
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def tojson_filter(value):
    """Jinja2 filter rendering a scalar as a JSON (and so YAML) literal."""

    return json.dumps(value)


class TemplateRenderer:
    """Jinja2 rendering for bundled templates."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = [_get_template_directory()]
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
            undefined=StrictUndefined,
        )
        self.env.filters["tojson"] = tojson_filter

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs)


def render_starter(project_prefix: str = DEFAULT_PROJECT_PREFIX, renderer: TemplateRenderer | None = None) -> str:
    """Render the starter configuration printed by ``--init``."""
    renderer = renderer or TemplateRenderer()
    return renderer.render_template(
        STARTER_TEMPLATE,
        okp_version=OKP_VERSION,
        agents=STARTER_AGENTS,
        workflow=STARTER_WORKFLOW,
        project_prefix=project_prefix,
    )
