"""Graphical browser selection using zenity.

Shows a radio list of browsers and returns the one the user picked.
Callers should check zenity_available() first and fall back to the
terminal menu when it returns False.

Zenity exit codes:
    0: OK pressed, selection on stdout
    1: Cancel pressed or window closed
    5: --timeout expired
"""

import html
import shutil
import subprocess
from typing import Callable, Optional

from ..scanners.desktop_entries import Candidate
from ..utils.constants import (
    NOTIFICATION_TIMEOUT,
    URL_DISPLAY_HEAD,
    URL_DISPLAY_MAX,
    URL_DISPLAY_TAIL,
)

TITLE = "Browser Selector"


def zenity_available() -> bool:
    """Check if zenity is on PATH."""
    return shutil.which("zenity") is not None


def shorten_url(url: str) -> str:
    """Shorten long URLs to head...tail for display.

    Examples:
        >>> shorten_url("https://example.com")
        'https://example.com'
    """
    if len(url) <= URL_DISPLAY_MAX:
        return url
    return f"{url[:URL_DISPLAY_HEAD]}...{url[-URL_DISPLAY_TAIL:]}"


def build_list_args(
    url: str,
    candidates: list[Candidate],
    icons: list[str],
    timeout: Optional[int] = None,
) -> list[str]:
    """Build the zenity --list command line.

    The first browser is preselected. The icon column is hidden; it only
    carries the icon name for themes that render it.
    """
    args = [
        "zenity", "--list", "--radiolist",
        f"--title={TITLE}",
        f"--text=Select a browser to open:\n\n<b>{html.escape(shorten_url(url))}</b>\n\nAvailable browsers:",
        "--column=Select",
        "--column=Browser Name",
        "--column=Icon",
        "--width=550",
        "--height=450",
        "--hide-column=3",
        "--ok-label=Open Browser",
        "--cancel-label=Cancel",
    ]
    if timeout:
        args.append(f"--timeout={timeout}")

    for index, (candidate, icon) in enumerate(zip(candidates, icons)):
        args.extend(["TRUE" if index == 0 else "FALSE", candidate.name, icon])

    return args


def match_selection(selected: str, candidates: list[Candidate]) -> Optional[Candidate]:
    """Map the name zenity printed back to a candidate.

    Several desktop files can share a name; the first one wins.
    """
    for candidate in candidates:
        if candidate.name == selected:
            return candidate
    return None


def choose(
    url: str,
    candidates: list[Candidate],
    icon_for: Callable[[Candidate], str],
    timeout: Optional[int] = None,
) -> Optional[Candidate]:
    """Show the dialog and return the chosen browser.

    Args:
        url: URL being opened
        candidates: Non-empty list of browsers
        icon_for: Returns the icon name for a candidate
        timeout: Seconds before the dialog closes by itself

    Returns:
        The selected candidate, or None if the user cancelled
    """
    icons = [icon_for(c) for c in candidates]
    result = subprocess.run(
        build_list_args(url, candidates, icons, timeout),
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return None

    selected = result.stdout.strip()
    if not selected:
        return None

    return match_selection(selected, candidates)


def show_error(text: str, width: int = 400) -> None:
    """Show a modal error box. The text is plain, not markup."""
    subprocess.run(
        ["zenity", "--error", f"--title={TITLE}", f"--text={html.escape(text)}", f"--width={width}"],
        capture_output=True,
    )


def notify(text: str) -> None:
    """Show a short desktop notification without waiting for it."""
    try:
        subprocess.Popen(
            ["zenity", "--notification", f"--text={html.escape(text)}", f"--timeout={NOTIFICATION_TIMEOUT}"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        pass
