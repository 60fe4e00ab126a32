"""Configuration loading for the folio portfolio engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class AnimationConfig(BaseModel):
    type_delay_ms: int = 80
    hold_ms: int = 2000
    delete_delay_ms: int = 40
    cycle_pause_ms: int = 500


class InteractionConfig(BaseModel):
    back_to_top_threshold: float = 500
    scroll_indicator_threshold: float = 50
    modal_focus_delay_ms: int = 100
    fade_in_ms: int = 500
    read_more_delay_ms: int = 500
    resize_debounce_ms: int = 150
    fragment_scroll_delay_ms: int = 100
    reveal_threshold: float = 0.1
    nav_thresholds: list[float] = Field(default_factory=lambda: [
        0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0,
    ])


class LayoutConfig(BaseModel):
    viewport_width: int = 1280
    viewport_height: int = 800
    line_height_px: int = 24
    char_width_px: int = 8
    description_width_ratio: float = 0.45  # share of the viewport a project description gets
    collapsed_lines: int = 4


class ContactConfig(BaseModel):
    mail_subject: str = "Inquiry from Portfolio"


class Config(BaseModel):
    content_path: str = "portfolio.json"
    store_path: str = "data/preferences.db"
    output_path: str = "site/index.html"
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    interaction: InteractionConfig = Field(default_factory=InteractionConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)

    @property
    def resolved_store_path(self) -> Path:
        """Resolve store_path relative to project root."""
        return _resolve(self.store_path)

    @property
    def resolved_content_path(self) -> Path:
        return _resolve(self.content_path)

    @property
    def resolved_output_path(self) -> Path:
        return _resolve(self.output_path)


def _resolve(path: str) -> Path:
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return _project_root() / p


def _project_root() -> Path:
    """Return the folio project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
