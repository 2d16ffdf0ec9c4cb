# transducers/core/nesting.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional

from transducers.core.config import mode_of as default_mode_of
from transducers.core.transducer import Transducer, ensure_callable, name_of, unchanged
from transducers.interfaces.types import ModeFunc, Step, TransitionFunc


@dataclass(frozen=True)
class Lens:
    """
    Pure get/put pair locating an inner configuration inside an outer one.

    ``embed(outer, extract(outer))`` must equal ``outer``; see
    ``Validator.validate_lens``.
    """

    extract: Callable[[Any], Any]
    embed: Callable[[Any, Any], Any]

    @classmethod
    def field(cls, name: str) -> Lens:
        """
        Build a lens over a dataclass field.

        :param name: Name of the field holding the inner configuration.
        """
        return cls(
            extract=lambda outer: getattr(outer, name),
            embed=lambda outer, inner: replace(outer, **{name: inner}),
        )


def _identity(value: Any) -> Any:
    return value


def _replace_mode(outer: Any, mode: Any) -> Any:
    return replace(outer, mode=mode)


def nest(
    inner: TransitionFunc,
    lens: Lens,
    *,
    active: Optional[Callable[[Any, Any], bool]] = None,
    derive_input: Optional[Callable[[Any], Any]] = None,
    retag: Optional[Callable[[Any], Any]] = None,
    next_mode: Optional[Callable[[Any, List[Any]], Any]] = None,
    with_mode: Optional[Callable[[Any, Any], Any]] = None,
    mode_of: ModeFunc = default_mode_of,
) -> Transducer:
    """
    Run an inner transducer on a configuration embedded in the outer one.

    For each step:

    1. ``active(outer_mode, input)`` decides whether the inner transducer runs.
    2. ``derive_input(input)`` produces the inner input; ``None`` means the input
       is not meant for the inner transducer.
    3. ``lens.extract`` projects the inner configuration out.
    4. ``inner`` is transitioned.
    5. ``lens.embed`` puts the new inner configuration back.
    6. ``next_mode(outer, inner_outputs)`` may pick a new outer mode, and each
       inner output is mapped through ``retag`` into the outer output type.

    When the inner transducer does not run, the outer configuration is returned
    unchanged with no outputs; the inner configuration is retained as-is.

    :param inner: The inner transition function.
    :param lens: Where the inner configuration lives.
    :param active: Activation predicate over (outer mode, outer input); always active by default.
    :param derive_input: Outer input to inner input, or ``None``; identity by default.
    :param retag: Inner output to outer output; identity by default.
    :param next_mode: Outer mode after the step; the mode is kept by default.
    :param with_mode: Returns a copy of the outer configuration in a given mode;
        defaults to ``dataclasses.replace(outer, mode=mode)``. Needed with
        ``next_mode`` when the outer configuration is not a dataclass.
    :param mode_of: Mode accessor for the outer configuration; only consulted
        when ``active`` is given.
    """
    ensure_callable(inner)
    derive = derive_input or _identity
    tag = retag or _identity
    set_mode = with_mode or _replace_mode

    def nested(config: Any, input: Any) -> Step:
        if active is not None and not active(mode_of(config), input):
            return unchanged(config)
        inner_input = derive(input)
        if inner_input is None:
            return unchanged(config)
        inner_config, inner_outputs = inner(lens.extract(config), inner_input)
        outer = lens.embed(config, inner_config)
        if next_mode is not None:
            outer = set_mode(outer, next_mode(outer, inner_outputs))
        return outer, [tag(o) for o in inner_outputs]

    return Transducer(nested, name=f"nest({name_of(inner)})")
