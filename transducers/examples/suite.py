# transducers/examples/suite.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Golden rehearsals for every example machine.

Each suite returns ``(actual, expected)`` pairs; ``run_all`` compares them and
reports only the ones that differ.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from transducers.examples.barn import BarnConfig, barn_transducer
from transducers.examples.door import (
    INITIAL_DOOR_CONFIG,
    DoorConfig,
    DoorInput,
    DoorMode,
    ForLight,
    FromLight,
    deco_door_transducer,
    door_transducer,
)
from transducers.examples.gui import (
    INITIAL_GUI_CONFIG,
    GUIConfig,
    GUIMode,
    MouseButton,
    MouseMove,
    ShowClick,
    ShowHand,
    gui_transducer,
)
from transducers.examples.light import (
    INITIAL_LIGHT_CONFIG,
    LightConfig,
    LightInput,
    LightMode,
    LightOutput,
    counting_light_transducer,
    light_transducer,
    two_light_transducer,
)
from transducers.runtime.rehearsal import Mismatch, expect, rehearse

ON, OFF = LightMode.ON, LightMode.OFF
TURN_ON, TURN_OFF = LightInput.TURN_ON, LightInput.TURN_OFF
RING_BELL, BUZZ_BUZZER = LightOutput.RING_BELL, LightOutput.BUZZ_BUZZER
OPEN, CLOSE = DoorInput.OPEN, DoorInput.CLOSE
OPENED, CLOSED = DoorMode.OPENED, DoorMode.CLOSED

Pairs = List[Tuple[object, object]]


def rehearse_cases() -> Pairs:
    return [
        (rehearse(light_transducer, ON, [TURN_OFF]), (OFF, [])),
        (rehearse(light_transducer, OFF, [TURN_OFF]), (OFF, [])),
        (rehearse(light_transducer, OFF, [TURN_ON, TURN_ON, TURN_OFF]), (OFF, [RING_BELL])),
        (rehearse(light_transducer, ON, [TURN_ON, TURN_ON, TURN_OFF]), (OFF, [])),
        (rehearse(light_transducer, OFF, [TURN_ON, TURN_OFF, TURN_ON, TURN_OFF]), (OFF, [RING_BELL, RING_BELL])),
    ]


def combined_cases() -> Pairs:
    return [
        (rehearse(two_light_transducer, (ON, OFF), [TURN_OFF]), ((OFF, OFF), [])),
        (rehearse(two_light_transducer, (ON, OFF), [TURN_OFF, TURN_ON]), ((ON, ON), [RING_BELL, RING_BELL])),
    ]


def counting_light_cases() -> Pairs:
    def run(inputs):
        return rehearse(counting_light_transducer, INITIAL_LIGHT_CONFIG, inputs)

    return [
        (run([TURN_ON]), (LightConfig(ON, 1), [RING_BELL])),
        (run([TURN_ON, TURN_ON]), (LightConfig(ON, 1), [RING_BELL])),
        (run([TURN_ON, TURN_ON, TURN_OFF]), (LightConfig(OFF, 1), [RING_BELL])),
        (run([TURN_ON, TURN_ON, TURN_OFF, TURN_ON]), (LightConfig(ON, 2), [RING_BELL, RING_BELL])),
    ]


def door_cases() -> Pairs:
    def run(inputs):
        return rehearse(door_transducer, INITIAL_DOOR_CONFIG, inputs)

    return [
        (run([OPEN]), (DoorConfig(OPENED, LightConfig(OFF, 0)), [])),
        (run([ForLight(TURN_ON)]), (DoorConfig(CLOSED, LightConfig(OFF, 0)), [])),
        (run([OPEN, ForLight(TURN_ON), CLOSE]), (DoorConfig(CLOSED, LightConfig(ON, 1)), [FromLight(RING_BELL)])),
    ]


def barn_cases() -> Pairs:
    mixed = BarnConfig(CLOSED, (LightConfig(OFF, 0), LightConfig(ON, 0)))
    dark = BarnConfig(CLOSED, (LightConfig(OFF, 0), LightConfig(OFF, 0)))
    return [
        (rehearse(barn_transducer, mixed, [OPEN]), (BarnConfig(OPENED, mixed.lights), [])),
        (rehearse(barn_transducer, mixed, [ForLight(TURN_ON)]), (mixed, [])),
        (
            rehearse(barn_transducer, mixed, [OPEN, ForLight(TURN_ON), CLOSE]),
            (BarnConfig(CLOSED, (LightConfig(ON, 1), LightConfig(ON, 0))), [FromLight(RING_BELL)]),
        ),
        (
            rehearse(barn_transducer, dark, [OPEN, ForLight(TURN_ON), CLOSE]),
            (
                BarnConfig(CLOSED, (LightConfig(ON, 1), LightConfig(ON, 1))),
                [FromLight(RING_BELL), FromLight(RING_BELL)],
            ),
        ),
    ]


def deco_door_cases() -> Pairs:
    def run(inputs):
        return rehearse(deco_door_transducer, INITIAL_DOOR_CONFIG, inputs)

    return [
        (run([OPEN]), (DoorConfig(OPENED, LightConfig(OFF, 0)), [])),
        (run([ForLight(TURN_ON)]), (DoorConfig(CLOSED, LightConfig(OFF, 0)), [FromLight(BUZZ_BUZZER)])),
        (
            run([OPEN, ForLight(TURN_ON), CLOSE]),
            (
                DoorConfig(CLOSED, LightConfig(ON, 1)),
                [FromLight(BUZZ_BUZZER), FromLight(RING_BELL), FromLight(BUZZ_BUZZER)],
            ),
        ),
    ]


def gui_cases() -> Pairs:
    def run(inputs):
        return rehearse(gui_transducer, INITIAL_GUI_CONFIG, inputs)

    return [
        (
            run([MouseMove(10, 10), MouseButton.PRESS, MouseButton.RELEASE]),
            (GUIConfig(GUIMode.MOUSE_UP, 10, 10), [ShowClick(10, 10)]),
        ),
        (
            run([MouseButton.PRESS, MouseMove(10, 10), MouseButton.RELEASE]),
            (GUIConfig(GUIMode.MOUSE_UP, 10, 10), [ShowClick(0, 0), ShowHand(10, 10)]),
        ),
    ]


SUITES: Dict[str, Callable[[], Pairs]] = {
    "rehearse": rehearse_cases,
    "combined": combined_cases,
    "counting_light": counting_light_cases,
    "door": door_cases,
    "barn": barn_cases,
    "deco_door": deco_door_cases,
    "gui": gui_cases,
}


def run_all(names: Optional[Iterable[str]] = None) -> List[Tuple[str, Mismatch]]:
    """
    Run the named suites (all of them by default) and collect every mismatch.

    :raises KeyError: For an unknown suite name.
    """
    selected = list(names) if names is not None else list(SUITES)
    mismatches: List[Tuple[str, Mismatch]] = []
    for name in selected:
        mismatches.extend((name, m) for m in expect(SUITES[name]()))
    return mismatches
