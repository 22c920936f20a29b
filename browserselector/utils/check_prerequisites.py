"""Prerequisites checker for Browser Selector.

Verifies required and optional tools are available.

Usage:
    # Human-readable output
    browser-selector --check

    # JSON output (for scripts)
    browser-selector --check --json

    # As module
    from browserselector.utils.check_prerequisites import check_all_prerequisites
    results = check_all_prerequisites()
"""

import re
import shutil
import subprocess
from typing import Optional

from .constants import TIMEOUT_PREREQUISITE

# name -> (required, install hint)
TOOLS = {
    "pyyaml": (True, "pip install pyyaml"),
    "zenity": (False, "sudo apt install zenity  (dnf/zypper/pacman: zenity)"),
    "xdg-settings": (False, "sudo apt install xdg-utils"),
    "update-desktop-database": (False, "sudo apt install desktop-file-utils"),
}


def check_pyyaml() -> tuple[bool, Optional[str], Optional[str]]:
    """Check PyYAML availability and version.

    Returns:
        Tuple of (is_available, version, error_message)
    """
    try:
        import yaml
    except ImportError:
        return False, None, "PyYAML not installed"
    return True, getattr(yaml, "__version__", None), None


def check_command(
    command: list[str],
    version_pattern: Optional[str] = None,
) -> tuple[bool, Optional[str], Optional[str]]:
    """Check that a command exists and report its version.

    Args:
        command: Command to run, e.g. ["zenity", "--version"]
        version_pattern: Regex with one group extracting the version

    Returns:
        Tuple of (is_available, version, error_message)
    """
    program = command[0]
    if shutil.which(program) is None:
        return False, None, f"{program} not found"

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=TIMEOUT_PREREQUISITE,
        )
    except subprocess.TimeoutExpired:
        return False, None, f"Timeout checking {program}"
    except OSError as e:
        return False, None, f"Error: {e}"

    output = (result.stdout.strip() or result.stderr.strip()).split("\n")[0]
    version = None
    if version_pattern:
        match = re.search(version_pattern, output)
        version = match.group(1) if match else None

    return True, version, None


def check_zenity() -> tuple[bool, Optional[str], Optional[str]]:
    """Check zenity (needed for --gui)."""
    # Output format: "4.0.1"
    return check_command(["zenity", "--version"], r"(\d+\.\d+(?:\.\d+)?)")


def check_xdg_settings() -> tuple[bool, Optional[str], Optional[str]]:
    """Check xdg-settings (needed to become the default browser)."""
    # Output format: "xdg-settings 1.1.3"
    return check_command(["xdg-settings", "--version"], r"(\d+\.\d+(?:\.\d+)?)")


def check_update_desktop_database() -> tuple[bool, Optional[str], Optional[str]]:
    """Check update-desktop-database (refreshes the MIME cache)."""
    # No --version flag; presence is what matters
    available = shutil.which("update-desktop-database") is not None
    return available, None, None if available else "update-desktop-database not found"


def check_all_prerequisites() -> dict:
    """Run all prerequisite checks and return structured results.

    Returns:
        Dictionary with status, checks, and summary
    """
    probes = {
        "pyyaml": check_pyyaml,
        "zenity": check_zenity,
        "xdg-settings": check_xdg_settings,
        "update-desktop-database": check_update_desktop_database,
    }

    checks = {}
    for name, probe in probes.items():
        required, install_cmd = TOOLS[name]
        available, version, error = probe()
        checks[name] = {
            "available": available,
            "version": version,
            "error": error,
            "required": required,
            "install_cmd": install_cmd,
        }

    # Calculate summary
    total = len(checks)
    available_count = sum(1 for c in checks.values() if c["available"])
    missing_required = [name for name, c in checks.items() if c["required"] and not c["available"]]
    missing_optional = [name for name, c in checks.items() if not c["required"] and not c["available"]]

    # Determine overall status
    if missing_required:
        status = "missing_required"
    elif missing_optional:
        status = "missing_optional"
    else:
        status = "ready"

    return {
        "status": status,
        "checks": checks,
        "summary": {
            "total": total,
            "available": available_count,
            "missing_required": len(missing_required),
            "missing_optional": len(missing_optional),
        },
    }


def format_human_readable(results: dict) -> str:
    """Format results for human-readable output.

    Args:
        results: Results dictionary from check_all_prerequisites()

    Returns:
        Formatted string for terminal output
    """
    lines = ["Prerequisites Check", "=" * 19]

    for heading, required in (("Required", True), ("Optional", False)):
        lines.append(f"\n{heading}:")
        for name, check in results["checks"].items():
            if check["required"] != required:
                continue
            if check["available"]:
                version = f" {check['version']}" if check["version"] else ""
                lines.append(f"  [OK] {name}{version}")
            else:
                lines.append(f"  [--] {name} (install: {check['install_cmd']})")

    status = results["status"]
    if status == "ready":
        lines.append("\nStatus: Ready to proceed")
    elif status == "missing_optional":
        lines.append("\nStatus: Ready (zenity is needed for --gui, xdg-utils for --set-default)")
    else:
        lines.append("\nStatus: Missing required tools - install them before continuing")

    return "\n".join(lines)
