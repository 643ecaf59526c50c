"""Command-line front door for paperviewer.

Parses CLI options, loads the manifest and the favorites store, then prints
the requested folder listing, favorites, recent files or integrity report.
"""

from __future__ import annotations

import argparse
import locale
import sys
from pathlib import Path
from typing import TextIO

from . import config
from .browser import PaperBrowser
from .log_setup import configure_logging
from .store import PaperStore
from .tree_model import FileNode, IntegrityReport, format_entry
from .ui_theme import UITheme, theme_for
from .view import Session


def _year(value: str) -> int:
    """argparse type for four-digit year values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid year value: {value!r}") from exc
    if not 1000 <= parsed <= 9999:
        raise argparse.ArgumentTypeError("year must have four digits")
    return parsed


def _session(value: str) -> Session:
    """argparse type for session filter values."""
    try:
        return Session.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse an exam-paper manifest as a folder hierarchy."
    )
    parser.add_argument(
        "manifest",
        nargs="?",
        default=None,
        help="Path to the CSV manifest. Defaults to the last manifest used.",
    )
    parser.add_argument("--path", default="", help="Folder address to list, e.g. '2023/w'.")
    parser.add_argument("--search", default="", help="Case-insensitive name/path filter.")
    parser.add_argument(
        "--session",
        type=_session,
        default=Session.ALL,
        help="Session filter: all, m/march, s/summer, w/winter.",
    )
    parser.add_argument("--year-min", type=_year, default=None, help="Lowest paper year to show.")
    parser.add_argument("--year-max", type=_year, default=None, help="Highest paper year to show.")
    parser.add_argument("--check", action="store_true", help="Print the manifest integrity report.")
    parser.add_argument("--favorites", action="store_true", help="List favorite papers.")
    parser.add_argument("--recent", action="store_true", help="List recently opened papers.")
    parser.add_argument("--open", metavar="PATH", help="Print the URL for PATH and record it as recent.")
    parser.add_argument("--download", metavar="PATH", help="Print the download URL for PATH.")
    parser.add_argument("--favorite", metavar="PATH", help="Toggle PATH as a favorite.")
    parser.add_argument("--base-url", default=None, help="Delivery base URL (remembered for later runs).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    return parser


def _use_user_collation() -> None:
    """Sort names by the user's locale instead of the ``C`` default."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass


def _color_enabled(no_color: bool, out: TextIO) -> bool:
    if no_color or not config.load_theme_color():
        return False
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def _resolve_manifest_path(raw: str | None) -> Path:
    if raw is not None:
        return Path(raw)
    remembered = config.load_manifest_path()
    if remembered is None:
        raise SystemExit("No manifest given and none remembered from a previous run.")
    return remembered


def _require_file(browser: PaperBrowser, path: str) -> FileNode:
    node = browser.find(path)
    if not isinstance(node, FileNode):
        raise SystemExit(f"Not a file in manifest: {path}")
    return node


def render_listing(browser: PaperBrowser, theme: UITheme) -> str:
    """Render the current folder as heading, rows and a count/empty line."""
    heading = "/" + browser.address
    lines = [f"{theme.heading}{heading}{theme.reset}"]
    entries = browser.visible_entries()
    for node in entries:
        lines.append(
            format_entry(
                node,
                favorite=browser.is_favorite(node),
                search_query=browser.search_query,
                theme=theme,
            )
        )
    if entries:
        lines.append(f"{theme.dim}{len(entries)} item(s){theme.reset}")
    elif browser.search_query.strip() or browser.filter_state.has_active_filters:
        lines.append(f"{theme.dim}No files match.{theme.reset}")
    else:
        lines.append(f"{theme.dim}Empty folder.{theme.reset}")
    return "\n".join(lines) + "\n"


def render_integrity(report: IntegrityReport, malformed_lines: int) -> str:
    lines = [
        f"Files in tree: {report.files_in_tree}",
        f"Manifest files: {report.manifest_files}",
        f"Missing: {report.missing}",
        f"Malformed lines: {malformed_lines}",
    ]
    lines.extend(f"  missing: {path}" for path in report.missing_preview)
    return "\n".join(lines) + "\n"


def render_saved(browser: PaperBrowser, favorites: bool) -> str:
    """Render favorites or recent files with their action URLs."""
    entries = browser.store.favorites if favorites else browser.store.recent
    title = "Favorites" if favorites else "Recent Files"
    lines = [f"{title} ({len(entries)})"]
    for entry in entries:
        lines.append(f"  {entry.name}  {browser.url_for(entry.path)}")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None, out: TextIO | None = None) -> None:
    """Parse CLI arguments and run one paperviewer command.

    ``argv`` and ``out`` are primarily for tests; they default to
    ``sys.argv[1:]`` and ``sys.stdout``.
    """
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    configure_logging("DEBUG" if args.verbose else "WARNING")
    _use_user_collation()

    manifest_path = _resolve_manifest_path(args.manifest)
    if not manifest_path.is_file():
        raise SystemExit(f"Manifest not found: {manifest_path}")

    if args.base_url:
        config.save_base_url(args.base_url)
    base_url = args.base_url or config.load_base_url()

    browser = PaperBrowser.from_manifest_file(manifest_path, PaperStore(), base_url=base_url)
    config.save_manifest_path(manifest_path.resolve())
    theme = theme_for(not _color_enabled(args.no_color, out))

    if args.check:
        out.write(render_integrity(browser.integrity, browser.manifest.malformed_lines))
        return
    if args.favorite:
        target = browser.find(args.favorite)
        if target is None:
            raise SystemExit(f"Not found in manifest: {args.favorite}")
        added = browser.toggle_favorite(target)
        out.write(f"{'Added to' if added else 'Removed from'} favorites: {target.path}\n")
        return
    if args.open:
        out.write(browser.open_file(_require_file(browser, args.open)) + "\n")
        return
    if args.download:
        out.write(browser.download_url(_require_file(browser, args.download)) + "\n")
        return
    if args.favorites or args.recent:
        out.write(render_saved(browser, favorites=args.favorites))
        return

    browser.restore_address(args.path)
    browser.set_search(args.search)
    browser.set_session(args.session)
    browser.set_year_range(args.year_min, args.year_max)
    out.write(render_listing(browser, theme))


if __name__ == "__main__":
    main()
