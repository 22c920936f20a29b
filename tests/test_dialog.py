"""Tests for the zenity dialog adapter and icon lookup.

subprocess and shutil.which are replaced; zenity is never started.
"""

import subprocess
from pathlib import Path

import pytest

from browserselector.scanners.desktop_entries import Candidate
from browserselector.ui import dialog, icons
from browserselector.ui.icons import DEFAULT_ICON, get_browser_icon, guess_icon

CANDIDATES = [
    Candidate("Chromium", Path("/apps/chromium.desktop")),
    Candidate("Firefox", Path("/usr/share/applications/firefox.desktop")),
    Candidate("Firefox", Path("/home/u/.local/share/applications/firefox.desktop")),
]


class FakeRun:
    """Records zenity invocations and returns a canned result."""

    def __init__(self, returncode=0, stdout=""):
        self.returncode = returncode
        self.stdout = stdout
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, "")


class TestShortenUrl:

    def test_short_url_unchanged(self):
        assert dialog.shorten_url("https://example.com") == "https://example.com"

    def test_long_url_shortened(self):
        url = "https://example.com/" + "a" * 80 + "/the-last-part"
        short = dialog.shorten_url(url)
        assert short == url[:40] + "..." + url[-15:]

    def test_exactly_sixty_chars_unchanged(self):
        url = "h" * 60
        assert dialog.shorten_url(url) == url


class TestBuildListArgs:

    def test_first_row_preselected(self):
        args = dialog.build_list_args("https://x", CANDIDATES, ["chromium", "firefox", "firefox"])
        rows = args[-9:]
        assert rows == [
            "TRUE", "Chromium", "chromium",
            "FALSE", "Firefox", "firefox",
            "FALSE", "Firefox", "firefox",
        ]

    def test_timeout_option(self):
        assert "--timeout=20" in dialog.build_list_args("https://x", CANDIDATES[:1], ["i"], timeout=20)
        assert not any(a.startswith("--timeout") for a in dialog.build_list_args("https://x", CANDIDATES[:1], ["i"]))

    def test_url_is_markup_escaped(self):
        args = dialog.build_list_args("https://x/?a=1&b=<2>", CANDIDATES[:1], ["i"])
        text = next(a for a in args if a.startswith("--text="))
        assert "a=1&amp;b=&lt;2&gt;" in text


class TestChoose:

    def test_selection_maps_to_first_candidate_with_name(self, monkeypatch):
        fake = FakeRun(stdout="Firefox\n")
        monkeypatch.setattr(dialog.subprocess, "run", fake)

        result = dialog.choose("https://x", CANDIDATES, icon_for=lambda c: "icon")

        assert result == CANDIDATES[1]
        assert fake.calls[0][:3] == ["zenity", "--list", "--radiolist"]

    @pytest.mark.parametrize("returncode,stdout", [(1, ""), (5, ""), (0, "")])
    def test_cancel_timeout_or_empty_returns_none(self, monkeypatch, returncode, stdout):
        monkeypatch.setattr(dialog.subprocess, "run", FakeRun(returncode, stdout))
        assert dialog.choose("https://x", CANDIDATES, icon_for=lambda c: "icon") is None

    def test_unknown_name_returns_none(self, monkeypatch):
        monkeypatch.setattr(dialog.subprocess, "run", FakeRun(0, "Netscape\n"))
        assert dialog.choose("https://x", CANDIDATES, icon_for=lambda c: "icon") is None

    def test_zenity_available(self, monkeypatch):
        monkeypatch.setattr(dialog.shutil, "which", lambda name: None)
        assert not dialog.zenity_available()
        monkeypatch.setattr(dialog.shutil, "which", lambda name: "/usr/bin/" + name)
        assert dialog.zenity_available()

    def test_show_error(self, monkeypatch):
        fake = FakeRun()
        monkeypatch.setattr(dialog.subprocess, "run", fake)

        dialog.show_error("No web browsers found.")

        assert fake.calls[0][:2] == ["zenity", "--error"]
        assert "--text=No web browsers found." in fake.calls[0]

    def test_error_text_is_markup_escaped(self, monkeypatch):
        fake = FakeRun()
        monkeypatch.setattr(dialog.subprocess, "run", fake)

        dialog.show_error("Could not start Tom & Jerry <beta>")

        assert "--text=Could not start Tom &amp; Jerry &lt;beta&gt;" in fake.calls[0]

    def test_notification_text_is_markup_escaped(self, monkeypatch):
        calls = []
        monkeypatch.setattr(dialog.subprocess, "Popen", lambda args, **kwargs: calls.append(args))

        dialog.notify("Opening https://x/?a=1&b=2 with Firefox")

        assert "--text=Opening https://x/?a=1&amp;b=2 with Firefox" in calls[0]

    def test_notify_ignores_missing_zenity(self, monkeypatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError("zenity")

        monkeypatch.setattr(dialog.subprocess, "Popen", missing)
        dialog.notify("Opening")


class TestIcons:

    @pytest.mark.parametrize("filename,expected", [
        ("firefox.desktop", "firefox"),
        ("org.mozilla.firefox.desktop", "firefox"),
        ("google-chrome.desktop", "google-chrome"),
        ("chromium-browser.desktop", "google-chrome"),
        ("microsoft-edge.desktop", "microsoft-edge"),
        ("brave-browser.desktop", "brave-browser"),
        ("org.gnome.Epiphany.desktop", DEFAULT_ICON),
        ("epiphany.desktop", "org.gnome.Epiphany"),
        ("app.zen_browser.zen.desktop", "zen-browser"),
        ("qutebrowser.desktop", DEFAULT_ICON),
    ])
    def test_guess_icon(self, filename, expected):
        assert guess_icon(Path("/apps") / filename) == expected

    def test_declared_icon_used_when_icon_cache_present(self, monkeypatch):
        monkeypatch.setattr(icons.shutil, "which", lambda name: "/usr/bin/" + name)
        assert get_browser_icon(Path("/apps/firefox.desktop"), "firefox-nightly") == "firefox-nightly"

    def test_falls_back_without_icon_cache(self, monkeypatch):
        monkeypatch.setattr(icons.shutil, "which", lambda name: None)
        assert get_browser_icon(Path("/apps/firefox.desktop"), "firefox-nightly") == "firefox"

    def test_falls_back_without_declared_icon(self, monkeypatch):
        monkeypatch.setattr(icons.shutil, "which", lambda name: "/usr/bin/" + name)
        assert get_browser_icon(Path("/apps/vivaldi-stable.desktop"), None) == "vivaldi"
