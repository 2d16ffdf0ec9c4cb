# transducers/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, List, Mapping, Sequence, Tuple

# A single transition result: new configuration plus ordered outputs.
Step = Tuple[Any, List[Any]]

# Callback Types
TransitionFunc = Callable[[Any, Any], Step]
ModeFunc = Callable[[Any], Any]
Rewrite = Callable[[Any, Any], Any]
EntryExitTable = Mapping[Any, Sequence[Any]]
