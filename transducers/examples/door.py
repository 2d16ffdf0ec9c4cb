# transducers/examples/door.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
A counting light in a room behind a door.

The light can only be switched while the door is open. Closing the door keeps
the light as it was.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any

from transducers.core.decorators import add_entry_outputs, add_exit_outputs
from transducers.core.nesting import Lens, nest
from transducers.core.transducer import Transducer, unchanged
from transducers.examples.light import (
    INITIAL_LIGHT_CONFIG,
    LightConfig,
    LightInput,
    LightMode,
    LightOutput,
    counting_light_transducer,
)
from transducers.interfaces.types import TransitionFunc


class DoorMode(Enum):
    OPENED = auto()
    CLOSED = auto()


class DoorInput(Enum):
    OPEN = auto()
    CLOSE = auto()


@dataclass(frozen=True)
class ForLight:
    """Door input carrying an input for the light inside."""

    input: LightInput


@dataclass(frozen=True)
class FromLight:
    """Door output carrying an output of the light inside."""

    output: LightOutput


@dataclass(frozen=True)
class DoorConfig:
    mode: DoorMode
    light: LightConfig


INITIAL_DOOR_CONFIG = DoorConfig(DoorMode.CLOSED, INITIAL_LIGHT_CONFIG)

light_lens = Lens.field("light")


def _light_input(input: Any):
    return input.input if isinstance(input, ForLight) else None


def make_door_transducer(light: TransitionFunc, name: str = "door") -> Transducer:
    """
    Build a door around the given light transducer.

    :param light: Transition for the light, possibly decorated.
    """
    light_step = nest(
        light,
        light_lens,
        active=lambda mode, input: mode is DoorMode.OPENED,
        derive_input=_light_input,
        retag=FromLight,
    )

    def door(config: DoorConfig, input: Any):
        if config.mode is DoorMode.CLOSED and input is DoorInput.OPEN:
            return replace(config, mode=DoorMode.OPENED), []
        if config.mode is DoorMode.OPENED and input is DoorInput.CLOSE:
            return replace(config, mode=DoorMode.CLOSED), []
        if isinstance(input, ForLight):
            return light_step(config, input)
        return unchanged(config)

    return Transducer(door, name=name)


door_transducer = make_door_transducer(counting_light_transducer)

# Entry/exit outputs must be added at each level separately.
deco_light_transducer = add_exit_outputs(counting_light_transducer, {LightMode.OFF: [LightOutput.BUZZ_BUZZER]})
deco_door_transducer = add_entry_outputs(
    make_door_transducer(deco_light_transducer, name="deco_door"),
    {DoorMode.CLOSED: [FromLight(LightOutput.BUZZ_BUZZER)]},
)
