"""Id and label sequences.

Every component, pin and node draws its id from the active
``IdentitySequence``. ``identity_scope()`` installs a fresh sequence for
the duration of a block, which gives reproducible ids to tests and to
batch loaders without touching module state.
"""

from __future__ import annotations

import contextvars
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager


class IdentitySequence:
    """Counters for component ids, per-prefix labels, pin and node ids."""

    def __init__(self) -> None:
        self._components = 0
        self._pins = 0
        self._nodes = 0
        self._labels: defaultdict[str, int] = defaultdict(int)

    def next_component_id(self, type_tag: str) -> str:
        # One counter across all variants: resistor_1, capacitor_2, ...
        self._components += 1
        return f"{type_tag}_{self._components}"

    def next_label(self, prefix: str) -> str:
        self._labels[prefix] += 1
        return f"{prefix}{self._labels[prefix]}"

    def next_pin_id(self) -> str:
        self._pins += 1
        return f"pin_{self._pins}"

    def next_node_id(self) -> str:
        self._nodes += 1
        return f"node_{self._nodes}"


_active_sequence: contextvars.ContextVar[IdentitySequence] = contextvars.ContextVar(
    "wirelang_identity_sequence", default=IdentitySequence()
)


def current_sequence() -> IdentitySequence:
    return _active_sequence.get()


@contextmanager
def identity_scope(
    sequence: IdentitySequence | None = None,
) -> Iterator[IdentitySequence]:
    """Run a block with its own id/label counters.

    Usage:
        with identity_scope():
            r = R(100)   # r.id == "resistor_1", r.label == "R1"
    """
    seq = sequence if sequence is not None else IdentitySequence()
    token = _active_sequence.set(seq)
    try:
        yield seq
    finally:
        _active_sequence.reset(token)
