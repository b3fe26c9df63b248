from __future__ import annotations

import pytest

from search_cursor.runtime import telemetry


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    first = telemetry.get_logger("search_cursor.tests")

    assert telemetry.get_logger("search_cursor.tests") is first


def test_span_reraises_and_clears_context() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span(
            "tests::boom", component=True, metadata={"case": "failure"}
        ) as handle:
            assert handle.component_name == "tests::boom"
            assert handle.metadata == {"case": "failure"}
            raise RuntimeError("boom")


def test_record_event_accepts_structured_data() -> None:
    telemetry.record_event(
        "tests.event", level="debug", data={"command": "cursor.left", "position": 0}
    )


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="shout")
