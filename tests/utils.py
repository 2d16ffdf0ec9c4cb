# tests/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Shared helpers and hypothesis strategies for the test suite."""

from dataclasses import dataclass
from enum import Enum, auto

from hypothesis import strategies as st

from transducers.core.transducer import unchanged
from transducers.examples.light import LightConfig, LightInput, LightMode


class Phase(Enum):
    IDLE = auto()
    BUSY = auto()


@dataclass(frozen=True)
class Tagged:
    """An output remembering which transducer produced it."""

    source: str
    value: object


def make_echo(tag: str):
    """A transducer counting its steps and emitting one tagged output per input."""

    def echo(config: int, input):
        return config + 1, [Tagged(tag, input)]

    echo.__name__ = f"echo_{tag}"
    return echo


def make_burst(tag: str):
    """A transducer emitting ``input`` tagged outputs (an int input), possibly none."""

    def burst(config: int, input: int):
        return config + input, [Tagged(tag, i) for i in range(input)]

    burst.__name__ = f"burst_{tag}"
    return burst


def phase_transducer(mode: Phase, input: str):
    """IDLE --go--> BUSY --stop--> IDLE."""
    if mode is Phase.IDLE and input == "go":
        return Phase.BUSY, ["started"]
    if mode is Phase.BUSY and input == "stop":
        return Phase.IDLE, ["stopped"]
    return unchanged(mode)


def silent(config, input):
    return unchanged(config)


light_modes = st.sampled_from(list(LightMode))
light_inputs = st.sampled_from(list(LightInput))
light_configs = st.builds(LightConfig, light_modes, st.integers(min_value=0, max_value=1000))
