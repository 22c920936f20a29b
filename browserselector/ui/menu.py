"""Terminal menu for choosing a browser.

Prints a numbered list and reads the choice from stdin, asking again
until the answer is a number in range.
"""

import sys
from typing import Callable, Optional, TextIO

from ..scanners.desktop_entries import Candidate

RULE = "-" * 42
BANNER = "=" * 42


class InvalidSelectionError(ValueError):
    """Raised when menu input is not a number in range."""
    pass


class SelectionAborted(Exception):
    """Raised when stdin closes before a valid choice was made."""
    pass


def parse_selection(text: str, count: int) -> int:
    """Convert a 1-based menu answer to a 0-based index.

    Args:
        text: What the user typed
        count: Number of menu entries

    Returns:
        Index into the candidate list

    Raises:
        InvalidSelectionError: If text isn't a number between 1 and count
    """
    answer = text.strip()
    if not answer.isascii() or not answer.isdigit():
        raise InvalidSelectionError("Please enter a valid number.")

    choice = int(answer)
    if choice < 1 or choice > count:
        raise InvalidSelectionError(f"Please enter a number between 1 and {count}.")

    return choice - 1


def format_menu(url: str, candidates: list[Candidate]) -> str:
    """Build the header and numbered browser list."""
    lines = [
        BANNER,
        "Browser Selector",
        BANNER,
        f"URL to open: {url}",
        "Select a browser:",
        RULE,
    ]
    for number, candidate in enumerate(candidates, start=1):
        lines.append(f"{number}) {candidate.name}")
    lines.append(RULE)
    return "\n".join(lines)


def choose(
    url: str,
    candidates: list[Candidate],
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> Candidate:
    """Show the menu and return the chosen browser.

    Args:
        url: URL being opened (shown in the header)
        candidates: Non-empty list of browsers
        read: Prompt function (input() if not given)
        out: Stream for the menu (stdout by default)

    Returns:
        The selected candidate

    Raises:
        SelectionAborted: If input ends (EOF or Ctrl-C)
    """
    read = read or input
    out = out or sys.stdout
    print(format_menu(url, candidates), file=out, flush=True)

    prompt = f"Enter your choice (1-{len(candidates)}): "
    while True:
        try:
            answer = read(prompt)
        except (EOFError, KeyboardInterrupt) as e:
            raise SelectionAborted("No browser selected.") from e

        try:
            index = parse_selection(answer, len(candidates))
        except InvalidSelectionError as e:
            print(f"Error: {e}", file=out, flush=True)
            continue

        return candidates[index]
