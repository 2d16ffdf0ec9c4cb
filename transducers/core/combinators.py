# transducers/core/combinators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Orthogonal regions.

``combine`` runs a fixed tuple of (possibly different) transducers side by side;
``transduce_all`` runs one transducer over a sequence of configurations. In both
cases every region receives the same input, no region sees another's
configuration, and outputs are concatenated in region order.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from transducers.core.errors import CompositionError
from transducers.core.transducer import Transducer, ensure_callable, name_of
from transducers.interfaces.types import Step, TransitionFunc


def combine(*transitions: TransitionFunc) -> Transducer:
    """
    Combine transducers into orthogonal regions over a tuple configuration.

    ``combine(tA, tB)((a, b), x) == ((a', b'), outputsA + outputsB)``. With more
    than two transducers the configuration is an N-tuple and outputs are
    concatenated left to right.

    :param transitions: Two or more transition functions.
    :return: A transducer over tuples of the component configurations.
    :raises CompositionError: If fewer than two transducers are given.
    """
    if len(transitions) < 2:
        raise CompositionError("combine() needs at least two transducers")
    ensure_callable(*transitions)
    arity = len(transitions)

    def combined(config: Tuple[Any, ...], input: Any) -> Step:
        if len(config) != arity:
            raise CompositionError(f"Expected a {arity}-tuple configuration, got {config!r}")
        configs: List[Any] = []
        outputs: List[Any] = []
        for t, c in zip(transitions, config):
            c2, out = t(c, input)
            configs.append(c2)
            outputs.extend(out)
        return tuple(configs), outputs

    return Transducer(combined, name="combine(" + ", ".join(name_of(t) for t in transitions) + ")")


def transduce_all(transition: TransitionFunc, input: Any, configs: Sequence[Any]) -> Tuple[Tuple[Any, ...], List[Any]]:
    """
    Apply one transition to every configuration in a sequence with the same input.

    :param transition: The transition shared by every region.
    :param input: The input given to each region.
    :param configs: Region configurations, in order.
    :return: The new configurations in the original order, and the outputs of
        element 0, then element 1, and so on.
    """
    new_configs: List[Any] = []
    outputs: List[Any] = []
    for config in configs:
        config2, out = transition(config, input)
        new_configs.append(config2)
        outputs.extend(out)
    return tuple(new_configs), outputs


def regions(transition: TransitionFunc) -> Transducer:
    """
    Lift a transducer over single configurations to one over tuples of them.

    The result can be nested inside an outer transducer like any other inner
    transducer.
    """
    ensure_callable(transition)

    def all_regions(configs: Sequence[Any], input: Any) -> Step:
        return transduce_all(transition, input, configs)

    return Transducer(all_regions, name=f"regions({name_of(transition)})")
