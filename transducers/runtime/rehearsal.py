# transducers/runtime/rehearsal.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Deterministic test driving of transducers over fixed input sequences."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, NamedTuple, Tuple

from transducers.core.transducer import name_of
from transducers.interfaces.types import Step, TransitionFunc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRecord:
    """One step of a rehearsal: the input, the configurations around it, and its outputs."""

    input: Any
    before: Any
    after: Any
    outputs: Tuple[Any, ...]


class Mismatch(NamedTuple):
    actual: Any
    expected: Any


def rehearse(transition: TransitionFunc, config: Any, inputs: Iterable[Any]) -> Step:
    """
    Drive a transducer over inputs in order.

    :param transition: Any function honouring the transducer contract.
    :param config: The initial configuration.
    :param inputs: Inputs, consumed strictly in order.
    :return: The final configuration and every step's outputs, earlier steps first.
        With no inputs this is ``(config, [])``.
    """
    outputs: List[Any] = []
    steps = 0
    for input in inputs:
        config, step_outputs = transition(config, input)
        outputs.extend(step_outputs)
        steps += 1
    logger.debug("Rehearsed %s over %d input(s), %d output(s)", name_of(transition), steps, len(outputs))
    return config, outputs


def trace(transition: TransitionFunc, config: Any, inputs: Iterable[Any]) -> List[StepRecord]:
    """
    Like ``rehearse`` but keep a record of every step.

    The concatenation of the records' outputs equals the outputs of ``rehearse``
    and the last record's ``after`` is its final configuration.
    """
    records: List[StepRecord] = []
    for input in inputs:
        config2, outputs = transition(config, input)
        records.append(StepRecord(input=input, before=config, after=config2, outputs=tuple(outputs)))
        config = config2
    return records


def expect(pairs: Iterable[Tuple[Any, Any]]) -> List[Mismatch]:
    """
    Compare ``(actual, expected)`` pairs.

    Every pair is checked; the ones that differ are returned. An empty list means
    all pairs matched. Callers decide whether a mismatch is fatal.
    """
    return [Mismatch(actual, expected) for actual, expected in pairs if actual != expected]
