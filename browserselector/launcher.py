"""Start the chosen browser.

The selector does not supervise the browser: launch() replaces the
current process, the same way `exec` does in a shell script.
"""

import os
from typing import NoReturn


def build_argv(command: list[str], url: str) -> list[str]:
    """Append the URL, unmodified, as the last argument."""
    return [*command, url]


def launch(command: list[str], url: str) -> NoReturn:
    """Replace this process with the browser.

    Args:
        command: Resolved command, program first
        url: URL to open

    Raises:
        OSError: If the program can't be executed
    """
    argv = build_argv(command, url)
    os.execvp(argv[0], argv)
