# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Contract checks for every example machine, and the command line entry point."""

import unittest

import pytest

from transducers.__main__ import main
from transducers.core.validations import Validator, enumerate_configurations
from transducers.examples.barn import BarnConfig, barn_transducer, lights_lens
from transducers.examples.door import (
    DoorConfig,
    DoorInput,
    DoorMode,
    ForLight,
    deco_door_transducer,
    door_transducer,
    light_lens,
)
from transducers.examples.gui import Drag, GUIConfig, GUIMode, MouseButton, MouseMove, gui_transducer
from transducers.examples.light import (
    LightConfig,
    LightInput,
    LightMode,
    counting_light_transducer,
    light_transducer,
)
from transducers.examples.suite import SUITES, run_all
from transducers.runtime.rehearsal import Mismatch

LIGHTS = enumerate_configurations(LightMode, [0, 2], LightConfig)
DOOR_INPUTS = list(DoorInput) + [ForLight(i) for i in LightInput]


class ExampleTotalityTests(unittest.TestCase):
    """Every example is defined for every (mode, input) pair."""

    def setUp(self):
        self.validator = Validator()

    def test_light(self):
        self.validator.validate_transducer(light_transducer, LightMode, LightInput, modes=LightMode)

    def test_counting_light(self):
        self.validator.validate_transducer(counting_light_transducer, LIGHTS, LightInput, modes=LightMode)

    def test_doors(self):
        doors = [DoorConfig(mode, light) for mode in DoorMode for light in LIGHTS]
        for door in (door_transducer, deco_door_transducer):
            self.validator.validate_transducer(door, doors, DOOR_INPUTS, modes=DoorMode)

    def test_barn(self):
        barns = [BarnConfig(mode, lights) for mode in DoorMode for lights in [(), tuple(LIGHTS)]]
        self.validator.validate_transducer(barn_transducer, barns, DOOR_INPUTS, modes=DoorMode)

    def test_gui(self):
        guis = [GUIConfig(mode, 1, 2) for mode in GUIMode]
        inputs = [MouseButton.PRESS, MouseButton.RELEASE, MouseMove(5, 5), Drag(6, 6)]
        self.validator.validate_transducer(gui_transducer, guis, inputs, modes=GUIMode)

    def test_lenses(self):
        self.validator.validate_lens(light_lens, [DoorConfig(mode, light) for mode in DoorMode for light in LIGHTS])
        self.validator.validate_lens(lights_lens, [BarnConfig(DoorMode.OPENED, tuple(LIGHTS))])


def test_all_golden_suites_match():
    assert run_all() == []


def test_run_all_selected_suites():
    assert run_all(["door", "gui"]) == []


def test_run_all_unknown_suite():
    with pytest.raises(KeyError):
        run_all(["no-such-suite"])


def test_run_all_reports_mismatches(monkeypatch):
    monkeypatch.setitem(SUITES, "broken", lambda: [(1, 1), (1, 2)])
    assert run_all(["broken"]) == [("broken", Mismatch(1, 2))]


def test_cli_success(capsys):
    assert main([]) == 0
    assert "No mismatches" in capsys.readouterr().out


def test_cli_list(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.split() == list(SUITES)


def test_cli_reports_failure(monkeypatch, capsys):
    monkeypatch.setitem(SUITES, "gui", lambda: [("actual", "expected")])
    assert main(["--suite", "gui"]) == 1
    out = capsys.readouterr().out
    assert "[gui] actual:   'actual'" in out
    assert "1 mismatch(es)" in out
