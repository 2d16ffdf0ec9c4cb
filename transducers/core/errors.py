# transducers/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, List, Tuple


class TransducerError(Exception):
    """
    Base exception class for errors within the transducer library.

    Transitions themselves never raise for ordinary inputs; these errors signal
    mistakes made while building or validating transducers.
    """


class CompositionError(TransducerError):
    """
    Raised when a combinator is given arguments it cannot compose.
    """


class ValidationError(TransducerError):
    """
    Raised when validation detects a violation of the transducer contract.
    """


class TotalityError(ValidationError):
    """
    Raised when a transition is not defined for some (configuration, input) pair.

    :param failures: ``(configuration, input, reason)`` triples, one per failing pair.
    """

    def __init__(self, failures: List[Tuple[Any, Any, str]]) -> None:
        self.failures = failures
        lines = [f"{config!r} x {input!r}: {reason}" for config, input, reason in failures]
        super().__init__(f"Transition is not total over {len(failures)} pair(s):\n" + "\n".join(lines))


class LensLawError(ValidationError):
    """
    Raised when ``embed(outer, extract(outer)) != outer`` for some outer configuration.
    """

    def __init__(self, violations: List[Any]) -> None:
        self.violations = violations
        super().__init__(f"Lens round trip failed for {len(violations)} configuration(s): {violations!r}")


class UnhandledOutputError(TransducerError):
    """
    Raised by a strict effect table when an output has no registered handler.
    """

    def __init__(self, output: Any) -> None:
        self.output = output
        super().__init__(f"No handler registered for output {output!r}")
