"""transducers: hierarchical, purely functional state machines with effect description

A transducer is a total, pure function ``(configuration, input) -> (configuration, outputs)``
where outputs are an ordered list of values describing effects. This package
provides the combinators for assembling transducers:

    - ``combine``: orthogonal regions of different transducers
    - ``transduce_all`` / ``regions``: orthogonal regions of one transducer
    - ``nest`` and ``Lens``: hierarchical embedding of an inner configuration
    - ``add_entry_exit``: mode-keyed entry and exit outputs
    - ``synthesize_input``: rewriting inputs before they reach a transducer

plus ``rehearse`` for driving a transducer over a fixed input sequence.

Cross-cutting Concerns:
    Purity:
        - Configurations are immutable values; combinators never mutate them
        - No shared or global state

    Error Handling:
        - Transitions are total and never raise for ordinary inputs
        - ``TransducerError`` subclasses signal construction or validation mistakes

    Logging:
        - Standard ``logging`` under the ``transducers`` logger, DEBUG only in hot paths
        - No handlers installed by the library
"""

import logging

from transducers.core import (
    CompositionError,
    Configuration,
    Lens,
    LensLawError,
    TotalityError,
    Transducer,
    TransducerError,
    UnhandledOutputError,
    ValidationError,
    Validator,
    add_entry_exit,
    add_entry_outputs,
    add_exit_outputs,
    combine,
    enumerate_configurations,
    mode_of,
    nest,
    regions,
    synthesize_input,
    transduce_all,
    transducer,
    unchanged,
)
from transducers.runtime import EffectTable, Mismatch, StepRecord, expect, react_with, rehearse, trace

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompositionError",
    "Configuration",
    "EffectTable",
    "Lens",
    "LensLawError",
    "Mismatch",
    "StepRecord",
    "TotalityError",
    "Transducer",
    "TransducerError",
    "UnhandledOutputError",
    "ValidationError",
    "Validator",
    "add_entry_exit",
    "add_entry_outputs",
    "add_exit_outputs",
    "combine",
    "enumerate_configurations",
    "expect",
    "mode_of",
    "nest",
    "react_with",
    "regions",
    "rehearse",
    "synthesize_input",
    "trace",
    "transduce_all",
    "transducer",
    "unchanged",
]
