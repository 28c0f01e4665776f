# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/utils/template_renderer.py
from __future__ import annotations

from pathlib import Path

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined


class TemplateRenderer:
    def __init__(self, templates_dir: Path):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, context: dict) -> str:
        tmpl = self.env.get_template(template_name)
        return tmpl.render(**context)

    def render_manifest(self, template_name: str, context: dict) -> dict:
        """Render a YAML template and parse it into a manifest dict."""
        manifest = yaml.safe_load(self.render(template_name, context))
        if not isinstance(manifest, dict):
            raise ValueError(f"{template_name} did not render to a mapping")
        return manifest
