"""Command-line front door for sitebuilder.

Restores the previous session, rescans the source directory, applies the
requested edits, optionally exports them, and checkpoints the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .content_model.layout import PORTFOLIO_DIR
from .content_model.reconcile import update_from_source
from .content_model.types import AppState, Website
from .errors import SiteBuilderError
from .export import export_site
from .operations import add_project, delete_project, set_site_title
from .runtime import get_state, store_session
from .skeleton import ensure_dir_defaults


def format_portfolio(website: Website) -> str:
    """Render one ``id<TAB>title<TAB>path`` line per project."""
    lines = []
    for project in website.portfolio:
        title = project.meta.title or project.path.name
        marker = " *" if project.dirty else ""
        lines.append(f"{project.id}\t{title}{marker}\t{project.path}\n")
    return "".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Synchronize a personal-site source directory with the saved session."
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Site source directory. Defaults to the one from the last session.",
    )
    parser.add_argument("--add", metavar="NAME", action="append", default=[], help="Add a portfolio project.")
    parser.add_argument(
        "--delete",
        metavar="NAME",
        action="append",
        default=[],
        help="Delete a portfolio project and its files.",
    )
    parser.add_argument("--title", default=None, help="Set the site title.")
    parser.add_argument("--save", action="store_true", help="Export in-memory edits to the source files.")
    parser.add_argument("--list", action="store_true", help="Print the reconciled portfolio.")
    parser.add_argument("--no-cache", action="store_true", help="Ignore and do not update the session cache.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one rescan/edit/save cycle."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = AppState() if args.no_cache else get_state()
    if args.source is not None:
        state.source = Path(args.source).expanduser().resolve()
    if state.source is None:
        raise SystemExit("No source directory given and none remembered from a previous session.")

    ensure_dir_defaults(state.source)
    update_from_source(state)

    if args.title is not None:
        set_site_title(state.website, args.title)

    try:
        for name in args.add:
            add_project(state, name)
        for name in args.delete:
            delete_project(state.website, state.source / PORTFOLIO_DIR / name)
        if args.save:
            export_site(state)
    except SiteBuilderError as exc:
        raise SystemExit(str(exc)) from exc
    finally:
        if not args.no_cache:
            store_session(state)

    if args.list:
        sys.stdout.write(format_portfolio(state.website))


if __name__ == "__main__":
    main()
