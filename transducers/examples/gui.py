# transducers/examples/gui.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Pointer handling with a synthesized drag input.

Moving the pointer while the button is held arrives as a plain ``MouseMove``
and is rewritten to ``Drag`` before the base transducer sees it.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any

from transducers.core.decorators import synthesize_input
from transducers.core.transducer import transducer, unchanged


class GUIMode(Enum):
    MOUSE_DOWN = auto()
    MOUSE_UP = auto()


class MouseButton(Enum):
    PRESS = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class MouseMove:
    x: int
    y: int


@dataclass(frozen=True)
class Drag:
    x: int
    y: int


@dataclass(frozen=True)
class ShowClick:
    x: int
    y: int


@dataclass(frozen=True)
class ShowHand:
    x: int
    y: int


@dataclass(frozen=True)
class GUIConfig:
    mode: GUIMode
    x: int = 0
    y: int = 0


INITIAL_GUI_CONFIG = GUIConfig(GUIMode.MOUSE_UP, 0, 0)


@transducer(name="gui_base")
def base_gui_transducer(config: GUIConfig, input: Any):
    if config.mode is GUIMode.MOUSE_DOWN and input is MouseButton.RELEASE:
        return replace(config, mode=GUIMode.MOUSE_UP), []
    if config.mode is GUIMode.MOUSE_UP and input is MouseButton.PRESS:
        return replace(config, mode=GUIMode.MOUSE_DOWN), [ShowClick(config.x, config.y)]
    if isinstance(input, MouseMove):
        return replace(config, x=input.x, y=input.y), []
    if isinstance(input, Drag):
        return replace(config, x=input.x, y=input.y), [ShowHand(input.x, input.y)]
    return unchanged(config)


def drag_rewrite(mode: GUIMode, input: Any):
    if mode is GUIMode.MOUSE_DOWN and isinstance(input, MouseMove):
        return Drag(input.x, input.y)
    return input


gui_transducer = synthesize_input(base_gui_transducer, drag_rewrite)
