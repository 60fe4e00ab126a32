"""CLI entry point for the folio portfolio engine."""

import argparse
import logging
import sys
from pathlib import Path

from folio.config import load_config
from folio.interactions.theme import THEME_KEY
from folio.loader import bootstrap, load_content
from folio.models import Theme, UntypedSection
from folio.output.html import write_document
from folio.page import Page
from folio.store import PreferenceStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Portfolio view engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    # build command
    build_parser = sub.add_parser("build", help="Render the content graph to a static HTML page")
    build_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    build_parser.add_argument(
        "content_path",
        nargs="?",
        help="JSON or YAML content file. Defaults to content_path from config.",
    )
    build_parser.add_argument("-o", "--output", type=str, default=None, help="Output HTML path")
    build_parser.add_argument(
        "--prefers", choices=[t.value for t in Theme], default="light",
        help="Ambient color scheme used when no theme is stored",
    )

    # check command
    check_parser = sub.add_parser("check", help="Validate a content file and list its sections")
    check_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    check_parser.add_argument("content_path", help="JSON or YAML content file")

    # theme command
    theme_parser = sub.add_parser("theme", help="Show or set the stored theme preference")
    theme_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    theme_parser.add_argument("value", nargs="?", choices=[t.value for t in Theme])
    theme_parser.add_argument("--clear", action="store_true", help="Forget the stored preference")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(Path(args.config) if args.config else None)

    if args.command == "check":
        try:
            content = load_content(Path(args.content_path))
        except (OSError, ValueError) as e:
            print(f"Invalid content: {e}")
            return 1
        print(f"{content.personal_info.name}: {len(content.sections)} sections")
        for s in content.sections:
            marker = "  (no renderer, title only)" if isinstance(s, UntypedSection) else ""
            print(f"  #{s.id} [{s.type}] {s.title}{marker}")
        titles = content.rotating_titles
        if titles:
            print(f"\nRotating titles ({len(titles)}): {', '.join(titles)}")
        return 0

    if args.command not in ("build", "theme"):
        parser.print_help()
        return 0

    store = PreferenceStore(config)
    store.init_db()
    try:
        if args.command == "theme":
            if args.clear:
                store.delete(THEME_KEY)
            elif args.value:
                store.set(THEME_KEY, args.value)
            print(store.get(THEME_KEY) or "(not set)")
            return 0

        page = Page(config.layout, prefers_color_scheme=args.prefers)
        content_path = Path(args.content_path) if args.content_path else None
        portfolio = bootstrap(page, store, config, content_path)
        output = Path(args.output) if args.output else config.resolved_output_path
        write_document(page, output)
        if portfolio is None:
            print(f"Content failed to load; wrote error page to {output}")
            return 1
        portfolio.close()
        print(f"Output: {output}")
        return 0
    finally:
        store.close()


if __name__ == "__main__":
    sys.exit(main())
