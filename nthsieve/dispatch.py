"""
Fallback dispatcher.

Resolves the active backend once, then routes count_primes / nth_prime to it.
Edge-case policy (limit < 2, ordinal validation, estimation) lives here and
in locator, never in a backend, so backends cannot disagree on it.
"""

import operator
import sys
import threading
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from . import locator
from .backends import BASELINE, Backend, BackendKind, Binder, probe
from .config import EngineConfig


@dataclass(frozen=True)
class CandidateReport:
    """Why one probed backend was or was not chosen."""
    kind: BackendKind
    available: bool
    disabled: bool
    selected: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class BackendSelection:
    backend: Backend
    reports: Tuple[CandidateReport, ...]
    config: EngineConfig

    @property
    def kind(self) -> BackendKind:
        return self.backend.kind


def select(probed: Sequence[Tuple[Backend, bool]], config: EngineConfig) -> BackendSelection:
    """
    Pick the first available, non-disabled backend from a probe result.

    Either disable flag rules out every non-baseline backend. Falls back to
    BASELINE if nothing qualifies.
    """
    chosen = None
    reports = []
    for backend, available in probed:
        disabled = config.accel_disabled and backend.kind is not BackendKind.BASELINE
        selected = chosen is None and available and not disabled
        if selected:
            chosen = backend
        reports.append(CandidateReport(backend.kind, available, disabled, selected, backend.error))

    if chosen is None:
        chosen = BASELINE
        reports.append(CandidateReport(BackendKind.BASELINE, True, False, True))

    return BackendSelection(chosen, tuple(reports), config)


def describe(selection: BackendSelection) -> str:
    """Human-readable probe/selection table."""
    lines = [f"nthsieve backend: {selection.kind.value}"]
    for r in selection.reports:
        if r.selected:
            status = "selected"
        elif r.disabled:
            status = "disabled by config"
        elif not r.available:
            status = f"unavailable ({r.error})" if r.error else "unavailable"
        else:
            status = "available"
        lines.append(f"  {r.kind.value:<16} {status}")
    return "\n".join(lines)


class Dispatcher:
    """
    Routes the public operations to one backend, chosen on first use.

    Parameters
    ----------
    config : EngineConfig, optional
        Flags to resolve with. Read from the environment at resolution time
        when omitted.
    binders : sequence of (BackendKind, binder), optional
        Non-baseline candidates, defaults to backends.BINDERS.
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 binders: Optional[Sequence[Tuple[BackendKind, Binder]]] = None):
        self._config = config
        self._binders = binders
        self._selection: Optional[BackendSelection] = None
        self._publish_lock = threading.Lock()

    def resolve(self) -> BackendSelection:
        """
        Return the backend selection, computing it on the first call.

        Concurrent first calls may each probe; only the first result is
        published and every caller gets that one.
        """
        selection = self._selection
        if selection is not None:
            return selection

        config = self._config if self._config is not None else EngineConfig.from_env()
        candidate = select(probe(self._binders), config)

        with self._publish_lock:
            if self._selection is None:
                self._selection = candidate
                if config.debug:
                    print(describe(candidate), file=sys.stderr)
            return self._selection

    @property
    def resolved(self) -> bool:
        return self._selection is not None

    def _backend(self) -> Backend:
        return self.resolve().backend

    def count_primes(self, limit: int) -> int:
        """Number of primes <= limit. 0 for limit < 2."""
        limit = operator.index(limit)
        if limit < 2:
            return 0
        return self._backend().count_primes(limit)

    def nth_prime(self, n: int) -> int:
        """The nth prime, 1-indexed. Raises InvalidArgument for n < 1."""
        n = operator.index(n)
        return locator.nth_prime(n, self._backend().nth_within)


def check_backends(dispatcher: Dispatcher) -> bool:
    """Print the selection report. True if a non-baseline backend is active."""
    selection = dispatcher.resolve()
    print(describe(selection))
    return selection.kind is not BackendKind.BASELINE
