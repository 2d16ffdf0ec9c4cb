# transducers/examples/barn.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""A row of counting lights behind one barn door, all switched together."""

from dataclasses import dataclass, replace
from typing import Any, Tuple

from transducers.core.combinators import regions
from transducers.core.nesting import Lens, nest
from transducers.core.transducer import transducer, unchanged
from transducers.examples.door import DoorInput, DoorMode, ForLight, FromLight
from transducers.examples.light import LightConfig, counting_light_transducer


@dataclass(frozen=True)
class BarnConfig:
    mode: DoorMode
    lights: Tuple[LightConfig, ...] = ()


lights_lens = Lens.field("lights")

_lights_step = nest(
    regions(counting_light_transducer),
    lights_lens,
    derive_input=lambda input: input.input,
    retag=FromLight,
)


@transducer(name="barn")
def barn_transducer(config: BarnConfig, input: Any):
    if config.mode is DoorMode.CLOSED and input is DoorInput.OPEN:
        return replace(config, mode=DoorMode.OPENED), []
    if config.mode is DoorMode.OPENED and input is DoorInput.CLOSE:
        return replace(config, mode=DoorMode.CLOSED), []
    if config.mode is DoorMode.OPENED and isinstance(input, ForLight):
        return _lights_step(config, input)
    return unchanged(config)
