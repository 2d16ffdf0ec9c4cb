# transducers/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Type

from transducers.core.config import mode_of as default_mode_of
from transducers.core.errors import LensLawError, TotalityError
from transducers.core.nesting import Lens
from transducers.interfaces.types import ModeFunc, TransitionFunc

logger = logging.getLogger(__name__)


class Validator:
    """
    Construction-time checks of the transducer contract.

    Validation is opt-in: call it once after building a transducer (typically
    from a test) with sample configurations and the full input alphabet. It
    never runs inside a transition.
    """

    def __init__(self, mode_of: ModeFunc = default_mode_of) -> None:
        """
        :param mode_of: Mode accessor used to check resulting modes.
        """
        self._rules_engine = _ValidationRulesEngine(mode_of)

    def validate_transducer(
        self,
        transition: TransitionFunc,
        configurations: Iterable[Any],
        inputs: Iterable[Any],
        modes: Optional[Type[Enum]] = None,
    ) -> None:
        """
        Check that a transition is defined for every (configuration, input) pair.

        :param transition: The transition to check.
        :param configurations: Sample configurations, ideally covering every mode.
        :param inputs: The input alphabet.
        :param modes: Enum class every resulting mode must belong to.
        :raises TotalityError: Listing every failing pair.
        """
        self._rules_engine.validate_totality(transition, list(configurations), list(inputs), modes)

    def validate_lens(self, lens: Lens, outers: Iterable[Any]) -> None:
        """
        Check the extract/embed round trip on sample outer configurations.

        :raises LensLawError: Listing every configuration that does not round-trip.
        """
        self._rules_engine.validate_round_trip(lens, list(outers))


def enumerate_configurations(
    modes: Iterable[Any],
    data_samples: Iterable[Any],
    build: Callable[[Any, Any], Any],
) -> List[Any]:
    """
    Build sample configurations from every mode paired with every data sample.

    :param modes: Usually an Enum class.
    :param data_samples: Extended-state values to pair with each mode.
    :param build: Constructor taking ``(mode, data)``.
    """
    return [build(mode, data) for mode, data in itertools.product(list(modes), list(data_samples))]


class _ValidationRulesEngine:
    """
    Internal engine applying the validation rules and collecting every failure
    before reporting, rather than stopping at the first.
    """

    def __init__(self, mode_of: ModeFunc) -> None:
        self._mode_of = mode_of
        self._default_rules = _DefaultValidationRules

    def validate_totality(
        self,
        transition: TransitionFunc,
        configurations: Sequence[Any],
        inputs: Sequence[Any],
        modes: Optional[Type[Enum]],
    ) -> None:
        failures: List[Tuple[Any, Any, str]] = []
        for config, input in itertools.product(configurations, inputs):
            reason = self._default_rules.check_step(transition, config, input, modes, self._mode_of)
            if reason is not None:
                failures.append((config, input, reason))
        if failures:
            logger.debug("Totality check failed for %d pair(s)", len(failures))
            raise TotalityError(failures)
        logger.debug("Totality check passed for %d pair(s)", len(configurations) * len(inputs))

    def validate_round_trip(self, lens: Lens, outers: Sequence[Any]) -> None:
        violations = [outer for outer in outers if not self._default_rules.round_trips(lens, outer)]
        if violations:
            raise LensLawError(violations)
        logger.debug("Lens round trip passed for %d configuration(s)", len(outers))


class _DefaultValidationRules:
    """
    Built-in rules: a step must return ``(configuration, list)`` without raising,
    with a mode from the declared enumeration.
    """

    @staticmethod
    def check_step(
        transition: TransitionFunc,
        config: Any,
        input: Any,
        modes: Optional[Type[Enum]],
        mode_of: ModeFunc,
    ) -> Optional[str]:
        """Return a failure reason, or ``None`` if the step is well-formed."""
        try:
            result = transition(config, input)
        except Exception as e:
            return f"raised {type(e).__name__}: {e}"
        if not isinstance(result, tuple) or len(result) != 2:
            return f"returned {result!r}, expected (configuration, outputs)"
        config2, outputs = result
        if not isinstance(outputs, list):
            return f"outputs {outputs!r} are not a list"
        if modes is not None:
            try:
                mode = mode_of(config2)
            except TypeError as e:
                return str(e)
            if not isinstance(mode, modes):
                return f"mode {mode!r} is not a {modes.__name__}"
        return None

    @staticmethod
    def round_trips(lens: Lens, outer: Any) -> bool:
        return lens.embed(outer, lens.extract(outer)) == outer
