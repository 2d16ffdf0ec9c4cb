# transducers/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from transducers.core.combinators import combine, regions, transduce_all
from transducers.core.config import Configuration, mode_of
from transducers.core.decorators import add_entry_exit, add_entry_outputs, add_exit_outputs, synthesize_input
from transducers.core.errors import (
    CompositionError,
    LensLawError,
    TotalityError,
    TransducerError,
    UnhandledOutputError,
    ValidationError,
)
from transducers.core.nesting import Lens, nest
from transducers.core.transducer import Transducer, transducer, unchanged
from transducers.core.validations import Validator, enumerate_configurations

__all__ = [
    "CompositionError",
    "Configuration",
    "Lens",
    "LensLawError",
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
    "mode_of",
    "nest",
    "regions",
    "synthesize_input",
    "transduce_all",
    "transducer",
    "unchanged",
]
