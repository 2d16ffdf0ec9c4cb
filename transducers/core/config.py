# transducers/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

M = TypeVar("M")
D = TypeVar("D")


@dataclass(frozen=True)
class Configuration(Generic[M, D]):
    """
    The complete state of a transducer instance: a finite mode plus extended data.

    Concrete transducers usually declare their own named record per nesting
    level instead (see ``transducers.examples``); any frozen record with a
    ``mode`` attribute is treated the same way by the combinators.
    """

    mode: M
    data: Optional[D] = None

    def with_mode(self, mode: M) -> Configuration[M, D]:
        """Return a copy in ``mode``, keeping the data."""
        return replace(self, mode=mode)

    def with_data(self, data: D) -> Configuration[M, D]:
        """Return a copy carrying ``data``, keeping the mode."""
        return replace(self, data=data)


def mode_of(config: Any) -> Any:
    """
    Return the mode of a configuration.

    A bare ``Enum`` member is its own mode (a transducer with no extended data);
    anything else must expose a ``mode`` attribute.

    :param config: The configuration to inspect.
    :raises TypeError: If the configuration has no mode.
    """
    if isinstance(config, Enum):
        return config
    try:
        return config.mode
    except AttributeError:
        raise TypeError(f"{type(config).__name__} has no mode; pass an explicit mode_of") from None
