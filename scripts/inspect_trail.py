"""Inspect a trail file: outline, neighbors and generated markup."""

from __future__ import annotations

import argparse
from pathlib import Path

from doctrail.loader import load_trail, trail_from_html
from doctrail.navigation import neighbors
from doctrail.outline import count_items, find_duplicate_links, format_trail_tree
from doctrail.project import TrailProject
from doctrail.publishing import render_document_navigation
from doctrail.schemas import Trail
from doctrail.utils.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a documentation trail.")
    parser.add_argument("--file", help="Trail JSON file")
    parser.add_argument("--html", help="Rendered page containing a trail listing")
    parser.add_argument("--document", help="Show neighbors and markup for this document")
    parser.add_argument("--index-name", default="index", help="Stem of the index document")
    parser.add_argument("--log-level", default=None, help="Logging level (default from env)")
    args = parser.parse_args()

    if not args.file and not args.html:
        parser.error("Provide --file or --html")

    configure_logging(args.log_level)
    trail = load(file_path=args.file, html_path=args.html)

    print(f"Items: {count_items(trail)}")
    duplicates = find_duplicate_links(trail)
    if duplicates:
        print(f"Duplicate links: {', '.join(duplicates)}")
    print("\nTrail:")
    print(format_trail_tree(trail))

    if args.document:
        show_document(trail, args.document, index_name=args.index_name)


def load(*, file_path: str | None, html_path: str | None) -> Trail:
    if file_path:
        return load_trail(file_path)

    path = Path(html_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return trail_from_html(path.read_text(encoding="utf-8"))


def show_document(trail: Trail, document: str, *, index_name: str) -> None:
    found = neighbors(trail, document)
    print(f"\nDocument: {document}")
    if found is None:
        print("(not part of the trail)")
    else:
        for label, item in (
            ("Up", found.up),
            ("Previous", found.previous),
            ("Next", found.next),
            ("Down", found.down),
        ):
            print(f"{label}: {item.text + ' (' + item.link + ')' if item else '-'}")

    project = TrailProject("inspect", index_name=index_name, trail=trail)
    markup = render_document_navigation(project, document)
    print("\nNav bar:")
    print(markup.nav_bar)
    print("\nListing:")
    print(markup.listing or "(none)")


if __name__ == "__main__":
    main()
