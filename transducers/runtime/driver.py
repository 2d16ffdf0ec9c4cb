# transducers/runtime/driver.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Reactive driver loop.

The driver owns all interaction with the outside world: it pulls inputs from a
source and hands outputs to a sink that carries out the matching effects. The
transducer stays pure; this module performs no I/O itself, the source and sink
are supplied by the application.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from transducers.core.errors import UnhandledOutputError
from transducers.core.transducer import name_of
from transducers.interfaces.types import TransitionFunc

logger = logging.getLogger(__name__)

StepHook = Callable[[Any, Any, Any], None]


def react_with(
    transition: TransitionFunc,
    config: Any,
    source: Iterable[Any],
    sink: Callable[[Any], None],
    on_step: Optional[StepHook] = None,
) -> Any:
    """
    Run a transducer against a live input source.

    Each input is transitioned as soon as it arrives and the resulting outputs
    are passed to ``sink`` one at a time, in order, before the next input is
    pulled.

    :param transition: The transducer to drive.
    :param config: The initial configuration.
    :param source: Inputs; may block or be infinite.
    :param sink: Called with every output in sequence order.
    :param on_step: Optional hook called as ``on_step(input, config_before, config_after)``.
    :return: The final configuration once ``source`` is exhausted.
    """
    for input in source:
        config2, outputs = transition(config, input)
        logger.debug("%s: %r --%r--> %r %r", name_of(transition), config, input, config2, outputs)
        if on_step is not None:
            on_step(input, config, config2)
        for output in outputs:
            sink(output)
        config = config2
    return config


class EffectTable:
    """
    Sink dispatching outputs to effect handlers.

    Handlers are looked up by the output value first and then by its type, so
    both nullary Enum outputs (``RING_BELL``) and variants with payload
    (``ShowClick``) can be handled. Outputs without a handler are logged and
    ignored, or rejected when ``strict`` is set.
    """

    def __init__(self, handlers: Mapping[Any, Callable[[Any], None]], strict: bool = False) -> None:
        """
        :param handlers: Output value or output type to a handler taking the output.
        :param strict: Raise ``UnhandledOutputError`` for unknown outputs.
        """
        self._handlers = dict(handlers)
        self._strict = strict

    def _lookup(self, output: Any) -> Optional[Callable[[Any], None]]:
        try:
            handler = self._handlers.get(output)
        except TypeError:
            # unhashable output
            handler = None
        if handler is None:
            handler = self._handlers.get(type(output))
        return handler

    def __call__(self, output: Any) -> None:
        handler = self._lookup(output)
        if handler is None:
            if self._strict:
                raise UnhandledOutputError(output)
            logger.warning("Ignoring output with no handler: %r", output)
            return
        handler(output)
