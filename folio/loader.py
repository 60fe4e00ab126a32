"""Bootstrap: load the content graph, initialize the core, handle load failures."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from folio.app import Portfolio, initialize_portfolio
from folio.config import Config
from folio.dom import Node
from folio.models import ContentGraph
from folio.page import Page
from folio.store import PreferenceStore

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Error: Could not load portfolio data. Please try again later."


def load_content(path: Path) -> ContentGraph:
    """Read a JSON or YAML content file into a ContentGraph.

    Raises FileNotFoundError if missing, ValueError if it does not parse or validate.
    """
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    else:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Content root in {path} must be an object")
    # pydantic's ValidationError is a ValueError
    return ContentGraph.model_validate(raw)


def render_error_page(page: Page) -> None:
    """Replace all content with the full-page load error."""
    page.body.clear()
    page.body.append(Node("h1", cls="load-error", text=LOAD_ERROR_MESSAGE))


def scroll_to_fragment(page: Page, delay_ms: int = 100) -> None:
    """Once painted, bring the section named by the page fragment into view."""
    if not page.fragment:
        return

    def _scroll() -> None:
        target = page.document.get_by_id(page.fragment)
        if target is None:
            logger.debug("Fragment #%s has no target", page.fragment)
            return
        page.scroll_into_view(target)

    page.scheduler.call_later(delay_ms, _scroll)


def bootstrap(
    page: Page,
    store: PreferenceStore,
    config: Config,
    content_path: Path | None = None,
) -> Portfolio | None:
    """Load content and start the core once. Returns None if content failed to load."""
    path = content_path or config.resolved_content_path
    try:
        content = load_content(path)
    except (OSError, ValueError, ValidationError) as e:
        logger.error("Could not load portfolio data from %s: %s", path, e)
        render_error_page(page)
        return None

    portfolio = initialize_portfolio(content, page, store, config)
    scroll_to_fragment(page, config.interaction.fragment_scroll_delay_ms)
    return portfolio
