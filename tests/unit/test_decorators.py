# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for entry/exit decoration and input synthesis."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.utils import Phase, phase_transducer
from transducers.core.decorators import add_entry_exit, add_entry_outputs, add_exit_outputs, synthesize_input
from transducers.core.errors import CompositionError
from transducers.examples.gui import (
    GUIConfig,
    GUIMode,
    MouseButton,
    MouseMove,
    ShowHand,
    base_gui_transducer,
    drag_rewrite,
)
from transducers.examples.light import LightConfig, LightInput, LightMode, LightOutput, counting_light_transducer

ENTRY = {Phase.BUSY: ["enter-busy"], Phase.IDLE: ["enter-idle"]}
EXIT = {Phase.BUSY: ["exit-busy"], Phase.IDLE: ["exit-idle"]}

# -----------------------------------------------------------------------------
# entry / exit
# -----------------------------------------------------------------------------


def test_entry_exit_brackets_base_outputs():
    decorated = add_entry_exit(phase_transducer, entry=ENTRY, exit=EXIT)
    assert decorated(Phase.IDLE, "go") == (Phase.BUSY, ["exit-idle", "started", "enter-busy"])


def test_entry_exit_fires_on_self_transition():
    decorated = add_entry_exit(phase_transducer, entry=ENTRY, exit=EXIT)
    assert decorated(Phase.IDLE, "noise") == (Phase.IDLE, ["exit-idle", "enter-idle"])


def test_missing_modes_contribute_nothing():
    decorated = add_entry_exit(phase_transducer, entry={Phase.BUSY: ["enter-busy"]})
    assert decorated(Phase.BUSY, "stop") == (Phase.IDLE, ["stopped"])


def test_no_tables_is_transparent():
    decorated = add_entry_exit(phase_transducer)
    assert decorated(Phase.IDLE, "go") == phase_transducer(Phase.IDLE, "go")


def test_entry_only_and_exit_only():
    entry_only = add_entry_outputs(phase_transducer, ENTRY)
    exit_only = add_exit_outputs(phase_transducer, EXIT)
    assert entry_only(Phase.IDLE, "go") == (Phase.BUSY, ["started", "enter-busy"])
    assert exit_only(Phase.IDLE, "go") == (Phase.BUSY, ["exit-idle", "started"])


def test_entry_exit_on_record_configuration():
    decorated = add_exit_outputs(counting_light_transducer, {LightMode.OFF: [LightOutput.BUZZ_BUZZER]})
    config, outputs = decorated(LightConfig(LightMode.OFF, 0), LightInput.TURN_ON)
    assert config == LightConfig(LightMode.ON, 1)
    assert outputs == [LightOutput.BUZZ_BUZZER, LightOutput.RING_BELL]


def test_custom_mode_of():
    def step(config, input):
        return (config[0], config[1] + 1), []

    decorated = add_entry_exit(step, entry={"a": ["in-a"]}, mode_of=lambda c: c[0])
    assert decorated(("a", 0), None) == (("a", 1), ["in-a"])


def test_double_wrapping_emits_twice():
    once = add_entry_outputs(phase_transducer, ENTRY)
    twice = add_entry_outputs(once, ENTRY)
    assert twice(Phase.IDLE, "go") == (Phase.BUSY, ["started", "enter-busy", "enter-busy"])


def test_decorators_nest_like_brackets():
    inner = add_entry_exit(phase_transducer, entry={Phase.BUSY: ["B-after"]}, exit={Phase.IDLE: ["B-before"]})
    outer = add_entry_exit(inner, entry={Phase.BUSY: ["A-after"]}, exit={Phase.IDLE: ["A-before"]})
    assert outer(Phase.IDLE, "go") == (Phase.BUSY, ["A-before", "B-before", "started", "B-after", "A-after"])


def test_exit_then_entry_decorators_compose():
    exit_first = add_entry_outputs(add_exit_outputs(phase_transducer, EXIT), ENTRY)
    entry_first = add_exit_outputs(add_entry_outputs(phase_transducer, ENTRY), EXIT)
    expected = (Phase.BUSY, ["exit-idle", "started", "enter-busy"])
    assert exit_first(Phase.IDLE, "go") == expected
    assert entry_first(Phase.IDLE, "go") == expected


@pytest.mark.property
@given(mode=st.sampled_from(list(Phase)), input=st.sampled_from(["go", "stop", "noise"]))
def test_bracket_law(mode, input):
    base_config, base_outputs = phase_transducer(mode, input)
    inner = add_entry_exit(phase_transducer, entry={m: ["B+"] for m in Phase}, exit={m: ["B-"] for m in Phase})
    outer = add_entry_exit(inner, entry={m: ["A+"] for m in Phase}, exit={m: ["A-"] for m in Phase})
    config, outputs = outer(mode, input)
    assert config == base_config
    assert outputs == ["A-", "B-"] + base_outputs + ["B+", "A+"]


def test_entry_exit_rejects_non_callable():
    with pytest.raises(CompositionError):
        add_entry_exit(None, entry=ENTRY)


# -----------------------------------------------------------------------------
# input synthesis
# -----------------------------------------------------------------------------


def test_rewrite_applies_in_matching_mode():
    gui = synthesize_input(base_gui_transducer, drag_rewrite)
    config, outputs = gui(GUIConfig(GUIMode.MOUSE_DOWN, 0, 0), MouseMove(3, 4))
    assert config == GUIConfig(GUIMode.MOUSE_DOWN, 3, 4)
    assert outputs == [ShowHand(3, 4)]


def test_rewrite_passes_input_through_otherwise():
    gui = synthesize_input(base_gui_transducer, drag_rewrite)
    assert gui(GUIConfig(GUIMode.MOUSE_UP, 0, 0), MouseMove(3, 4)) == (GUIConfig(GUIMode.MOUSE_UP, 3, 4), [])


def test_wrapped_transition_never_sees_raw_input():
    seen = []

    def recorder(config, input):
        seen.append(input)
        return config, []

    wrapped = synthesize_input(recorder, lambda mode, input: ("derived", input) if mode is Phase.BUSY else input)
    wrapped(Phase.BUSY, "raw")
    wrapped(Phase.IDLE, "raw")
    assert seen == [("derived", "raw"), "raw"]


def test_rewrite_sees_mode_and_input_only():
    calls = []

    def rewrite(mode, input):
        calls.append((mode, input))
        return input

    synthesize_input(base_gui_transducer, rewrite)(GUIConfig(GUIMode.MOUSE_UP, 5, 5), MouseButton.PRESS)
    assert calls == [(GUIMode.MOUSE_UP, MouseButton.PRESS)]


def test_synthesize_rejects_non_callable_rewrite():
    with pytest.raises(CompositionError):
        synthesize_input(base_gui_transducer, {"not": "callable"})
