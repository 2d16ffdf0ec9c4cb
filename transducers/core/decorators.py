# transducers/core/decorators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Optional

from transducers.core.config import mode_of as default_mode_of
from transducers.core.transducer import Transducer, ensure_callable, name_of
from transducers.interfaces.types import EntryExitTable, ModeFunc, Rewrite, Step, TransitionFunc

_EMPTY: EntryExitTable = {}


def add_entry_exit(
    transition: TransitionFunc,
    entry: Optional[EntryExitTable] = None,
    exit: Optional[EntryExitTable] = None,
    mode_of: ModeFunc = default_mode_of,
) -> Transducer:
    """
    Wrap a transition so it emits mode-keyed exit and entry outputs.

    The wrapped step emits ``exit[old_mode] + outputs + entry[new_mode]``. Both
    lookups happen on every step, including steps that stay in the same mode.
    Modes missing from a table contribute nothing.

    Only this transducer's own modes are seen: inner transducers in a hierarchy
    must be wrapped separately or their entry/exit outputs are not emitted.
    Wrapping the same transition twice emits the outputs twice. Nested wrappers
    bracket the base outputs like matched brackets, counted from the outermost
    wrapper: ``add_entry_exit(add_entry_exit(base, B), A)`` emits A's exit
    outputs, then B's, then the base outputs, then B's entry outputs, then A's.

    :param transition: The transition to decorate.
    :param entry: Outputs emitted after entering a mode.
    :param exit: Outputs emitted before leaving a mode.
    :param mode_of: Mode accessor for this transducer's configurations.
    """
    ensure_callable(transition)
    entry_table = entry if entry is not None else _EMPTY
    exit_table = exit if exit is not None else _EMPTY

    def decorated(config: Any, input: Any) -> Step:
        config2, outputs = transition(config, input)
        before = list(exit_table.get(mode_of(config), ()))
        after = list(entry_table.get(mode_of(config2), ()))
        return config2, before + list(outputs) + after

    return Transducer(decorated, name=f"entry_exit({name_of(transition)})")


def add_entry_outputs(transition: TransitionFunc, entry: EntryExitTable, mode_of: ModeFunc = default_mode_of) -> Transducer:
    """Entry-only form of ``add_entry_exit``."""
    return add_entry_exit(transition, entry=entry, mode_of=mode_of)


def add_exit_outputs(transition: TransitionFunc, exit: EntryExitTable, mode_of: ModeFunc = default_mode_of) -> Transducer:
    """Exit-only form of ``add_entry_exit``."""
    return add_entry_exit(transition, exit=exit, mode_of=mode_of)


def synthesize_input(transition: TransitionFunc, rewrite: Rewrite, mode_of: ModeFunc = default_mode_of) -> Transducer:
    """
    Wrap a transition so its input is rewritten before delegation.

    ``rewrite(mode, input)`` returns either ``input`` itself or a derived input;
    it sees only the current mode and the literal input. When a rewrite applies,
    the wrapped transition never sees the raw input.

    :param transition: The transition to wrap.
    :param rewrite: Maps (current mode, raw input) to the input to deliver.
    :param mode_of: Mode accessor for this transducer's configurations.
    """
    ensure_callable(transition, rewrite)

    def synthesizing(config: Any, input: Any) -> Step:
        return transition(config, rewrite(mode_of(config), input))

    return Transducer(synthesizing, name=f"synthesize({name_of(transition)})")

