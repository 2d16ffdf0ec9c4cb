# transducers/core/transducer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from transducers.core.errors import CompositionError
from transducers.interfaces.types import Step, TransitionFunc


def unchanged(config: Any) -> Tuple[Any, List[Any]]:
    """The "don't care" result: same configuration, no outputs."""
    return config, []


class Transducer:
    """
    A named, callable wrapper around a transition function.

    Every combinator returns one of these so composed machines stay callable
    with the plain ``(config, input)`` signature while keeping a readable name
    for logs and reprs. Wrapping never changes behaviour.
    """

    __slots__ = ("_transition", "_name")

    def __init__(self, transition: TransitionFunc, name: Optional[str] = None) -> None:
        """
        :param transition: Function mapping ``(config, input)`` to ``(config, outputs)``.
        :param name: Label used in logs; defaults to the function's name.
        :raises CompositionError: If ``transition`` is not callable.
        """
        if not callable(transition):
            raise CompositionError(f"Transition must be callable, got {transition!r}")
        self._transition = transition
        self._name = name or getattr(transition, "__name__", type(transition).__name__)

    @property
    def name(self) -> str:
        """The label of this transducer."""
        return self._name

    @property
    def transition(self) -> TransitionFunc:
        """The wrapped transition function."""
        return self._transition

    def __call__(self, config: Any, input: Any) -> Step:
        return self._transition(config, input)

    def __repr__(self) -> str:
        return f"Transducer({self._name})"


def transducer(func: Optional[TransitionFunc] = None, *, name: Optional[str] = None) -> Any:
    """
    Decorator turning a transition function into a ``Transducer``.

    Usable bare (``@transducer``) or with a name (``@transducer(name="door")``).
    """

    def wrap(f: TransitionFunc) -> Transducer:
        return Transducer(f, name=name)

    if func is None:
        return wrap
    return wrap(func)


def ensure_callable(*transitions: Callable[..., Any]) -> None:
    """
    Check combinator arguments at construction time.

    :raises CompositionError: If any argument is not callable.
    """
    for t in transitions:
        if not callable(t):
            raise CompositionError(f"Expected a transition function, got {t!r}")


def name_of(transition: Callable[..., Any]) -> str:
    """Best-effort label for a transition function."""
    if isinstance(transition, Transducer):
        return transition.name
    return getattr(transition, "__name__", type(transition).__name__)
