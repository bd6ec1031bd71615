"""Tests for the Rich renderers."""

from __future__ import annotations

from typing import Any

from rich.panel import Panel

from elapsedctl.output.console import create_console, get_output
from elapsedctl.output.renderers import counter_panel, render_quiet, render_result
from elapsedctl.services.result import ServiceError, ServiceResult


def _snapshot_data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "label": "ELAPSED",
        "display": "35 MONTHS / 15 DAYS / 14:30:45",
        "months": 35,
        "days": 15,
        "hours": 14,
        "minutes": 30,
        "seconds": 45,
        "total_days": 1065,
        "start": "2022-02-24T00:00:00",
        "now": "2025-01-23T14:30:45",
        "segments": {"months": "35", "days": "15", "time": "14:30:45"},
    }
    data.update(overrides)
    return data


class TestRenderSnapshot:
    def test_status_and_display(self) -> None:
        output = render_result(ServiceResult(ok=True, op="snapshot", data=_snapshot_data()))
        assert output.splitlines()[0].startswith("OK")
        assert "snapshot" in output
        assert "display: 35 MONTHS / 15 DAYS / 14:30:45" in output
        assert "total_days: 1065" in output

    def test_component_table(self) -> None:
        output = render_result(ServiceResult(ok=True, op="snapshot", data=_snapshot_data()))
        for header in ("MONTHS", "DAYS", "HOURS", "MINUTES", "SECONDS"):
            assert header in output
        assert "45" in output

    def test_verbose_shows_segments(self) -> None:
        result = ServiceResult(ok=True, op="snapshot", data=_snapshot_data())
        output = render_result(result, verbose=True)
        assert "segments:" in output
        assert "time: 14:30:45" in output

    def test_segments_hidden_without_verbose(self) -> None:
        output = render_result(ServiceResult(ok=True, op="snapshot", data=_snapshot_data()))
        assert "segments:" not in output


class TestRenderError:
    def test_error_line(self) -> None:
        result = ServiceResult(
            ok=False,
            op="snapshot",
            error=ServiceError(
                code="START_AFTER_NOW",
                message="Start instant is after the current instant",
                detail={"start": "2030-01-01T00:00:00"},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "Start instant is after the current instant" in output
        assert "detail" not in output

    def test_verbose_error_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="snapshot",
            error=ServiceError(code="X", message="boom", detail={"start": "2030"}),
        )
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "start: 2030" in output



class TestRenderQuiet:
    def test_display_line(self) -> None:
        result = ServiceResult(ok=True, op="snapshot", data=_snapshot_data())
        assert render_quiet(result) == "35 MONTHS / 15 DAYS / 14:30:45"

    def test_error(self) -> None:
        result = ServiceResult(ok=False, op="snapshot", error=ServiceError(code="E", message="no"))
        assert render_quiet(result) == "ERROR: snapshot — no"


class TestCounterPanel:
    def test_returns_panel(self) -> None:
        assert isinstance(counter_panel(_snapshot_data()), Panel)

    def test_panel_text(self) -> None:
        console = create_console(no_color=True)
        console.print(counter_panel(_snapshot_data()))
        output = get_output(console)
        assert "35 MONTHS / 15 DAYS / 14:30:45" in output
        assert "ELAPSED" in output
        assert "1065 days since 2022-02-24T00:00:00" in output

    def test_missing_segments_fall_back_to_zero(self) -> None:
        console = create_console(no_color=True)
        console.print(counter_panel({"label": "X"}))
        assert "00 MONTHS / 00 DAYS / 00:00:00" in get_output(console)
