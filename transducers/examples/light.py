# transducers/examples/light.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""A light switch, with and without a counter of how often it was turned on."""

from dataclasses import dataclass
from enum import Enum, auto

from transducers.core.combinators import combine
from transducers.core.transducer import transducer, unchanged


class LightMode(Enum):
    ON = auto()
    OFF = auto()


class LightInput(Enum):
    TURN_ON = auto()
    TURN_OFF = auto()


class LightOutput(Enum):
    RING_BELL = auto()
    BUZZ_BUZZER = auto()


@transducer(name="light")
def light_transducer(mode: LightMode, input: LightInput):
    """The simplest machine: the configuration is just the mode."""
    if mode is LightMode.ON and input is LightInput.TURN_OFF:
        return LightMode.OFF, []
    if mode is LightMode.OFF and input is LightInput.TURN_ON:
        return LightMode.ON, [LightOutput.RING_BELL]
    return unchanged(mode)


two_light_transducer = combine(light_transducer, light_transducer)


@dataclass(frozen=True)
class LightConfig:
    mode: LightMode
    count: int = 0


INITIAL_LIGHT_CONFIG = LightConfig(LightMode.OFF, 0)


@transducer(name="counting_light")
def counting_light_transducer(config: LightConfig, input: LightInput):
    """Like ``light_transducer``, counting every time the light goes on."""
    if config.mode is LightMode.ON and input is LightInput.TURN_OFF:
        return LightConfig(LightMode.OFF, config.count), []
    if config.mode is LightMode.OFF and input is LightInput.TURN_ON:
        return LightConfig(LightMode.ON, config.count + 1), [LightOutput.RING_BELL]
    return unchanged(config)
