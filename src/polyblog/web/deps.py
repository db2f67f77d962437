"""Shared dependencies for web routes."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from polyblog.core.config import load_config
from polyblog.core.models import AppConfig

_TEMPLATES_DIR = Path(__file__).parent.parent / "templates" / "web"

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    autoescape=True,
)


def get_config() -> AppConfig:
    return load_config()


def render(template_name: str, **ctx) -> str:
    tpl = _env.get_template(template_name)
    return tpl.render(**ctx)
