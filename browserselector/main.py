#!/usr/bin/env python3
"""Browser Selector main entry point.

Registered as the default web browser, it receives every link the desktop
opens and asks which installed browser should handle it.

Usage:
    browser-selector URL                 # terminal menu
    browser-selector --gui URL           # zenity dialog (falls back to menu)
    browser-selector --list [--json]     # show detected browsers
    browser-selector --install [--gui] [--set-default]
    browser-selector --check [--json]

This script:
    1. Loads the search configuration (search-paths.yaml)
    2. Scans the application directories for http-capable browsers
    3. Shows the menu or dialog
    4. Resolves the chosen browser's Exec= line
    5. Replaces itself with the browser, URL as last argument
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .catalog import BrowserCatalog, NoCandidatesError
from .launcher import build_argv, launch
from .output.desktop_entry import install
from .scanners.desktop_entries import Candidate
from .scanners.exec_command import EntryNotFoundError, NoLaunchTemplateError
from .ui import dialog, menu
from .ui.icons import get_browser_icon
from .utils.check_prerequisites import check_all_prerequisites, format_human_readable
from .utils.search_paths import SearchPathConfigError, load_search_config


def error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browser-selector",
        description="Select which installed browser opens a URL",
    )
    parser.add_argument("url", nargs="?", help="URL to open")
    parser.add_argument("--gui", action="store_true", help="Use a zenity dialog instead of the terminal menu")
    parser.add_argument("--list", action="store_true", help="List detected browsers and exit")
    parser.add_argument("--json", action="store_true", help="JSON output for --list and --check")
    parser.add_argument("--install", action="store_true", help="Install the desktop entry for this tool")
    parser.add_argument("--set-default", action="store_true", help="With --install, also make it the default browser")
    parser.add_argument("--check", action="store_true", help="Check optional tools and exit")
    parser.add_argument("--config", type=Path, help="Search configuration file (YAML)")
    parser.add_argument("--dry-run", action="store_true", help="Print the browser command instead of running it")
    return parser


def open_with(catalog: BrowserCatalog, candidate: Candidate, url: str, dry_run: bool) -> int:
    """Resolve the chosen browser and hand the URL to it.

    Returns:
        Exit code (only returns when dry_run is set or the launch failed)
    """
    command = catalog.resolve(candidate.path)

    print(menu.RULE)
    print(f"Opening '{url}' with {candidate.name}...")
    print(f"Command: {' '.join(command)}")
    print(menu.RULE, flush=True)

    if dry_run:
        print(json.dumps(build_argv(command, url)))
        return 0

    try:
        launch(command, url)
    except OSError as e:
        error(f"Could not start {candidate.name}: {e}")
        return 1
    return 0


def run_menu(catalog: BrowserCatalog, url: str, dry_run: bool = False) -> int:
    """Terminal flow: menu, resolve, launch."""
    try:
        candidates = catalog.require_candidates()
    except NoCandidatesError as e:
        error(str(e))
        return 1

    try:
        candidate = menu.choose(url, candidates)
    except menu.SelectionAborted as e:
        error(str(e))
        return 1

    try:
        return open_with(catalog, candidate, url, dry_run)
    except (EntryNotFoundError, NoLaunchTemplateError) as e:
        error(f"Could not determine how to launch {candidate.name} ({e})")
        return 1


def run_dialog(catalog: BrowserCatalog, url: str, dry_run: bool = False) -> int:
    """Graphical flow: dialog, resolve, notify, launch."""
    try:
        candidates = catalog.require_candidates()
    except NoCandidatesError:
        dialog.show_error(
            "No web browsers found on this system.\n\n"
            "Please install a web browser that supports HTTP URLs."
        )
        return 1

    candidate = dialog.choose(
        url,
        candidates,
        icon_for=lambda c: get_browser_icon(c.path, catalog.icon_for(c.path)),
        timeout=catalog.config.dialog_timeout,
    )
    if candidate is None:
        # Cancelled
        return 0

    try:
        command = catalog.resolve(candidate.path)
    except (EntryNotFoundError, NoLaunchTemplateError) as e:
        dialog.show_error(
            f"Error: Could not determine how to launch {candidate.name}\n\n"
            f"Desktop file: {candidate.path}\n{e}",
            width=450,
        )
        return 1

    if dry_run:
        print(json.dumps(build_argv(command, url)))
        return 0

    dialog.notify(f"Opening {url} with {candidate.name}")

    try:
        launch(command, url)
    except OSError as e:
        dialog.show_error(f"Could not start {candidate.name}: {e}", width=450)
        return 1
    return 0


def run_list(catalog: BrowserCatalog, as_json: bool) -> int:
    """Print every detected browser with its resolved command."""
    results = catalog.describe()

    if as_json:
        print(json.dumps(results, indent=2))
        return 0 if results["count"] else 1

    if not results["browsers"]:
        error("No web browsers found.")
        return 1

    for number, browser in enumerate(results["browsers"], start=1):
        print(f"{number}) {browser['name']}")
        print(f"   File: {browser['path']}")
        print(f"   Command: {browser['command'] or '[ERROR - Could not extract command]'}")
    print(f"\nTotal browsers found: {results['count']}", flush=True)
    return 0


def run_install(gui: bool, set_default: bool) -> int:
    """Install our desktop entry and report each step."""
    print("[INFO] Installing desktop file...", flush=True)
    results = install(gui=gui, set_default=set_default)

    if results["desktop_file"]:
        print(f"[OK] Desktop file installed to {results['desktop_file']}")
    for warning in results["warnings"]:
        print(f"[WARN] {warning}")
    if results["default_browser"]:
        print("[OK] Browser Selector set as default web browser")
    for message in results["errors"]:
        error(message)

    return 1 if results["status"] == "error" else 0


def run(argv: Optional[list[str]] = None) -> int:
    """Parse arguments and dispatch. Returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.check:
        results = check_all_prerequisites()
        if args.json:
            print(json.dumps(results, indent=2))
        else:
            print(format_human_readable(results))
        return 0 if results["status"] != "missing_required" else 1

    if args.install:
        return run_install(args.gui, args.set_default)

    try:
        config = load_search_config(args.config)
    except (OSError, SearchPathConfigError) as e:
        error(f"Cannot load search configuration: {e}")
        return 1

    catalog = BrowserCatalog(config)

    if args.list:
        return run_list(catalog, args.json)

    use_dialog = args.gui and dialog.zenity_available()
    if args.gui and not use_dialog:
        print("Error: zenity is not installed. Please install zenity for GUI mode.", file=sys.stderr)
        print("Falling back to terminal mode...", file=sys.stderr, flush=True)

    if not args.url:
        if use_dialog:
            dialog.show_error("No URL provided.\n\nUsage: browser-selector --gui URL", width=350)
        else:
            error("No URL provided.")
            print(f"Usage: {parser.prog} URL", file=sys.stderr)
        return 1

    if use_dialog:
        return run_dialog(catalog, args.url, args.dry_run)
    return run_menu(catalog, args.url, args.dry_run)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for Browser Selector."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
