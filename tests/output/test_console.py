"""Tests for Rich Console factory and theme."""

from io import StringIO

import pytest

from elapsedctl.output.console import (
    ELAPSED_THEME,
    create_console,
    create_terminal_console,
    get_output,
    style_for_segment,
)
from elapsedctl.output.renderers import counter_panel


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("01 MONTHS / 00 DAYS / 00:00:00")
        assert "01 MONTHS / 00 DAYS / 00:00:00" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestStyleForSegment:
    def test_known_segments(self) -> None:
        assert style_for_segment("months") == "elapsed.segment.months"
        assert style_for_segment("days") == "elapsed.segment.days"
        assert style_for_segment("time") == "elapsed.segment.time"

    def test_unknown_segment(self) -> None:
        assert style_for_segment("weeks") == ""

    def test_styles_defined_in_theme(self) -> None:
        for seg in ("months", "days", "time"):
            assert style_for_segment(seg) in ELAPSED_THEME.styles


class TestCreateTerminalConsole:
    def test_carries_theme(self) -> None:
        console = create_terminal_console()
        for seg in ("months", "days", "time"):
            # Raises MissingStyle when the theme is absent.
            console.get_style(style_for_segment(seg))
        console.get_style("elapsed.label")

    def test_prints_counter_panel(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = create_terminal_console()
        console.print(
            counter_panel(
                {
                    "label": "ELAPSED",
                    "total_days": 1065,
                    "start": "2022-02-24T00:00:00",
                    "segments": {"months": "35", "days": "15", "time": "14:30:45"},
                }
            )
        )
        out = capsys.readouterr().out
        assert "35 MONTHS / 15 DAYS / 14:30:45" in out
        assert "ELAPSED" in out
