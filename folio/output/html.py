"""Serialize a page to a self-contained static HTML document."""

import logging
from pathlib import Path

from folio.dom import Node
from folio.page import Page

logger = logging.getLogger(__name__)

VOID_TAGS = frozenset({"img", "meta", "link", "br", "hr", "input", "source"})


def _esc(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _attrs(node: Node) -> str:
    parts: list[str] = []
    if node.id:
        parts.append(f'id="{_esc(node.id)}"')
    if node.classes:
        parts.append(f'class="{_esc(" ".join(node.classes))}"')
    for name, value in node.attrs.items():
        if value is None or value is False:
            continue
        if node.tag == "textarea" and name == "value":
            continue
        if value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{_esc(str(value))}"')
    if node.hidden:
        parts.append('style="display: none"')
    return (" " + " ".join(parts)) if parts else ""


def render_node(node: Node) -> str:
    open_tag = f"<{node.tag}{_attrs(node)}>"
    if node.tag in VOID_TAGS:
        return open_tag
    inner = _esc(node.text)
    if node.tag == "textarea":
        inner = _esc(str(node.get("value") or ""))
    inner += "".join(render_node(c) for c in node.children)
    return f"{open_tag}{inner}</{node.tag}>"


def render_document(page: Page, stylesheet: str | None = "styles.css") -> str:
    """The full document: doctype, head (title, meta, stylesheet), body."""
    head = [
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{_esc(page.title)}</title>",
    ]
    head.extend(render_node(meta) for meta in page.head.select("meta"))
    if stylesheet:
        head.append(f'<link rel="stylesheet" href="{_esc(stylesheet)}">')
    lang = page.document.get("lang", "en")
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{_esc(lang)}">\n'
        f"<head>\n{chr(10).join(head)}\n</head>\n"
        f"{render_node(page.body)}\n"
        "</html>\n"
    )


def write_document(page: Page, output_path: Path, stylesheet: str | None = "styles.css") -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_document(page, stylesheet), encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return output_path
