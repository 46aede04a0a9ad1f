"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdpreview.core.models import RenderOptions


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "mdpreview"
    sanitize:      bool = Field(default=True,  description="Escape HTML-significant characters")
    breaks:        bool = Field(default=False, description="Render soft line breaks as <br>")
    header_ids:    bool = Field(default=True,  description="Emit id attributes on headings")
    header_prefix: str  = Field(default="",    description="Prefix for generated heading ids")
    gfm:           bool = Field(default=True,  description="Reserved; has no effect")
    output_dir:    str  = Field(default="dist", description="Directory for rendered HTML files")
    standalone:    bool = Field(default=False, description="Wrap output in a full HTML page")

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            sanitize=self.sanitize,
            breaks=self.breaks,
            header_ids=self.header_ids,
            header_prefix=self.header_prefix,
            gfm=self.gfm,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPREVIEW_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPREVIEW_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
