"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from polyblog.core.models import AppConfig, ContentConfig, SiteConfig


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    site_data = yaml_data.get("site", {}) or {}
    site = SiteConfig(
        name=os.getenv("POLYBLOG_SITE_NAME", site_data.get("name", "polyblog")),
        base_url=os.getenv("POLYBLOG_BASE_URL", site_data.get("base_url", "http://localhost:8000")),
        author=os.getenv("POLYBLOG_AUTHOR", site_data.get("author", "")),
    )

    # An unknown locale here is a deployment mistake, so let pydantic reject it
    content_data = yaml_data.get("content", {}) or {}
    content = ContentConfig(
        default_locale=os.getenv("POLYBLOG_DEFAULT_LOCALE", content_data.get("default_locale", "en")),
        words_per_minute=int(content_data.get("words_per_minute", 200)),
    )

    return AppConfig(site=site, content=content)
