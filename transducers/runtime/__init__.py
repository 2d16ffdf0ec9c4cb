# transducers/runtime/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from transducers.runtime.driver import EffectTable, react_with
from transducers.runtime.rehearsal import Mismatch, StepRecord, expect, rehearse, trace

__all__ = ["EffectTable", "Mismatch", "StepRecord", "expect", "react_with", "rehearse", "trace"]
