"""Coarse-grained progress signal for a pipeline invocation.

The tracker is owned by whoever calls the pipeline; the pipeline only moves
it between states. Listeners receive ``(previous, current)`` on every
transition so a UI can drive its loading feedback from it.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, List

logger = logging.getLogger(__name__)


class LoadingState(str, Enum):
    IDLE = "idle"
    RESEARCHING = "researching"
    PLANNING = "planning"
    SCOUTING = "scouting"
    COMPLETE = "complete"
    DIETARY_LOADING = "dietary-loading"
    ERROR = "error"


IN_PROGRESS_STATES: FrozenSet[LoadingState] = frozenset(
    {
        LoadingState.RESEARCHING,
        LoadingState.PLANNING,
        LoadingState.SCOUTING,
        LoadingState.DIETARY_LOADING,
    }
)

_TRANSITIONS: Dict[LoadingState, FrozenSet[LoadingState]] = {
    LoadingState.IDLE: frozenset({LoadingState.RESEARCHING}),
    LoadingState.RESEARCHING: frozenset({LoadingState.PLANNING, LoadingState.ERROR}),
    LoadingState.PLANNING: frozenset({LoadingState.SCOUTING, LoadingState.ERROR}),
    LoadingState.SCOUTING: frozenset({LoadingState.COMPLETE, LoadingState.ERROR}),
    LoadingState.COMPLETE: frozenset({LoadingState.DIETARY_LOADING, LoadingState.RESEARCHING}),
    LoadingState.DIETARY_LOADING: frozenset({LoadingState.COMPLETE, LoadingState.ERROR}),
    LoadingState.ERROR: frozenset({LoadingState.RESEARCHING}),
}

Listener = Callable[[LoadingState, LoadingState], None]


class InvalidTransitionError(ValueError):
    pass


class ProgressTracker:
    def __init__(self) -> None:
        self._state = LoadingState.IDLE
        self._listeners: List[Listener] = []
        self.history: List[LoadingState] = [LoadingState.IDLE]

    @property
    def state(self) -> LoadingState:
        return self._state

    @property
    def in_progress(self) -> bool:
        return self._state in IN_PROGRESS_STATES

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def can_transition(self, target: LoadingState) -> bool:
        return target in _TRANSITIONS[self._state]

    def transition(self, target: LoadingState) -> None:
        if not self.can_transition(target):
            raise InvalidTransitionError(
                f"Cannot move from {self._state.value} to {target.value}"
            )
        self._move(target)

    def _move(self, target: LoadingState) -> None:
        previous = self._state
        self._state = target
        self.history.append(target)
        logger.info("Progress %s -> %s", previous.value, target.value)
        for listener in list(self._listeners):
            try:
                listener(previous, target)
            except Exception:
                logger.warning("Progress listener failed", exc_info=True)

    def reset(self) -> None:
        """Return to idle (the UI's "start over"); refused while a stage runs."""
        if self.in_progress:
            raise InvalidTransitionError(
                f"Cannot reset while {self._state.value}"
            )
        self._move(LoadingState.IDLE)
