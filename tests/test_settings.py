from __future__ import annotations

import pytest

from virtual_editor import VirtualEditor
from virtual_editor.runtime import telemetry
from virtual_editor.runtime.settings import Settings, load_settings


def test_defaults_without_environment() -> None:
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.display_offset == 1
    assert settings.verbose is False


def test_values_read_from_prefixed_variables() -> None:
    settings = Settings.from_env(
        {
            "VIRTUAL_EDITOR_LOG_LEVEL": "debug",
            "VIRTUAL_EDITOR_DISPLAY_OFFSET": "0",
            "VIRTUAL_EDITOR_VERBOSE": "yes",
            "VIRTUAL_EDITOR_DISABLE_CONSOLE": "1",
            "VIRTUAL_EDITOR_LOG_BUFFER_SIZE": "64",
            "DISPLAY_OFFSET": "9",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.display_offset == 0
    assert settings.verbose is True
    assert settings.console is False
    assert settings.log_buffer_size == 64


def test_invalid_integer_is_rejected() -> None:
    with pytest.raises(ValueError):
        Settings.from_env({"VIRTUAL_EDITOR_DISPLAY_OFFSET": "one"})


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIRTUAL_EDITOR_DISPLAY_OFFSET", "3")
    try:
        assert load_settings(reload=True).display_offset == 3
    finally:
        monkeypatch.undo()
        load_settings(reload=True)


def test_verbose_flag_from_settings_or_argument() -> None:
    assert VirtualEditor([""], settings=Settings(verbose=True)).verbose is True
    editor = VirtualEditor([""], verbose=True, settings=Settings())
    assert editor.verbose is True

    editor.set_verbose(False)
    editor.apply_action({"name": "mouse-click", "value": "1"})
    assert editor.text == ""


def test_verbose_mode_does_not_change_results() -> None:
    actions = [
        {"name": "editor-type", "value": "abc"},
        {"name": "editor-backspace", "value": "1"},
        {"name": "unknown-kind", "value": "?"},
    ]
    quiet = VirtualEditor([""], actions, settings=Settings())
    loud = VirtualEditor([""], actions, verbose=True, settings=Settings())

    assert quiet.text_after_each_step() == loud.text_after_each_step()


def _capture_events(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str, str | None]]:
    events: list[tuple[str, str, str | None]] = []

    def record(name, *, level="info", data=None, logger_name=None):
        events.append((name, level, logger_name))

    monkeypatch.setattr(telemetry, "record_event", record)
    return events


@pytest.mark.parametrize("verbose", [False, True])
def test_unknown_action_warning_only_when_verbose(
    monkeypatch: pytest.MonkeyPatch, verbose: bool
) -> None:
    events = _capture_events(monkeypatch)
    editor = VirtualEditor([""], verbose=verbose, settings=Settings())

    editor.apply_action({"name": "mouse-click", "value": "1"})

    warnings = [event for event in events if event[0] == "editor.unknown_action"]
    if verbose:
        assert warnings == [("editor.unknown_action", "warning", editor.logger_name)]
    else:
        assert warnings == []
        assert events == []


@pytest.mark.parametrize("verbose", [False, True])
def test_malformed_repeat_count_warning_uses_editor_logger(
    monkeypatch: pytest.MonkeyPatch, verbose: bool
) -> None:
    events = _capture_events(monkeypatch)
    editor = VirtualEditor(["abc"], verbose=verbose, settings=Settings())

    editor.apply_action({"name": "editor-arrow-right", "value": "lots"})
    editor.apply_action({"name": "editor-arrow-right", "value": "1"})

    assert editor.caret == (0, 2)
    warnings = [event for event in events if event[0] == "action.repeat_count_invalid"]
    if verbose:
        assert warnings == [("action.repeat_count_invalid", "warning", editor.logger_name)]
    else:
        assert warnings == []


def test_configure_rejects_conflicting_options() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="quiet", settings=Settings())


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")
