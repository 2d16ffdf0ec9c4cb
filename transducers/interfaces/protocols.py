# transducers/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class TransducerProtocol(Protocol):
    """
    Transducer protocol for type checking.

    A transducer is any callable taking ``(configuration, input)`` and returning
    ``(new_configuration, outputs)``.

    Runtime Invariants:
    - The call is pure: equal arguments always produce equal results.
    - The call is total: every reachable (mode, input) pair has a result, with
      "don't care" pairs returning the configuration unchanged and no outputs.
    - Outputs are an ordered list; duplicates are significant.

    Error Handling:
    - Implementations must not raise for ordinary inputs. An exception escaping
      a transition is an implementation error.
    """

    def __call__(self, config: Any, input: Any) -> Tuple[Any, List[Any]]:
        """Compute the next configuration and the outputs for one input."""
        ...


@runtime_checkable
class LensProtocol(Protocol):
    """
    Lens protocol for hierarchical embedding.

    Methods:
        extract(outer): Return the inner configuration held in ``outer``.
        embed(outer, inner): Return a copy of ``outer`` holding ``inner``.

    Runtime Invariants:
    - ``embed(outer, extract(outer)) == outer`` for every outer configuration.
    - Neither method mutates its arguments.
    """

    def extract(self, outer: Any) -> Any:
        """Project the inner configuration out of the outer one."""
        ...

    def embed(self, outer: Any, inner: Any) -> Any:
        """Return a new outer configuration carrying ``inner``."""
        ...
