# typegallery/controller.py
# Selection -> fetch -> result state machine behind the gallery

import threading
from dataclasses import dataclass
from typing import Callable, Optional, Union

from typegallery import config
from typegallery.errors import FetchError
from typegallery.logger import get_logger, log_action
from typegallery.pokeapi import PokemonRecord, fetch_by_type
from typegallery.theme import Theme, theme_for
from typegallery.types import normalize_type

logger = get_logger(__name__)

# --------------------------------------------------------------------------- #
# States
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Idle:
    status = "idle"


@dataclass(frozen=True)
class Loading:
    type_name: str
    status = "loading"


@dataclass(frozen=True)
class Success:
    type_name: str
    records: tuple[PokemonRecord, ...]
    status = "success"


@dataclass(frozen=True)
class Failed:
    type_name: str
    message: str
    kind: str
    status = "failed"


FetchState = Union[Idle, Loading, Success, Failed]

# --------------------------------------------------------------------------- #
# Events
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class TypeSelected:
    type_name: str


@dataclass(frozen=True)
class FetchSucceeded:
    records: tuple[PokemonRecord, ...]


@dataclass(frozen=True)
class FetchFailed:
    error: FetchError


Event = Union[TypeSelected, FetchSucceeded, FetchFailed]


def transition(state: FetchState, event: Event) -> FetchState:
    """
    Pure transition function.

    Any state + TypeSelected("")   -> Idle
    Any state + TypeSelected(t)    -> Loading(t)
    Loading   + FetchSucceeded(rs) -> Success(rs)
    Loading   + FetchFailed(err)   -> Failed(message)
    Everything else leaves the state as it is.
    """
    if isinstance(event, TypeSelected):
        type_name = normalize_type(event.type_name)
        return Loading(type_name) if type_name else Idle()
    if not isinstance(state, Loading):
        return state
    if isinstance(event, FetchSucceeded):
        return Success(state.type_name, tuple(event.records))
    if isinstance(event, FetchFailed):
        return Failed(state.type_name, config.ERROR_MESSAGE, event.error.kind)
    return state


def state_to_dict(state: FetchState) -> dict:
    """Flat view for templates/JSON: loading flag, error message, records."""
    return {
        "status": state.status,
        "type": getattr(state, "type_name", ""),
        "loading": isinstance(state, Loading),
        "error": state.message if isinstance(state, Failed) else "",
        "errorKind": state.kind if isinstance(state, Failed) else None,
        "pokemon": [r.to_dict() for r in state.records] if isinstance(state, Success) else [],
    }


Listener = Callable[[FetchState], None]


class FetchController:
    """Owns the FetchState and runs the fetcher for each non-empty selection.

    A selection supersedes any fetch still running: results are tagged with
    the generation they were started under and dropped if it is stale.
    """

    def __init__(self, fetcher: Callable[[str], list] = fetch_by_type):
        self._fetcher = fetcher
        self._state: FetchState = Idle()
        self._selected = ""
        self._generation = 0
        self._lock = threading.Lock()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def selected_type(self) -> str:
        return self._selected

    @property
    def theme(self) -> Theme:
        return theme_for(self._selected)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(state) on every change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, event: Event, generation: Optional[int] = None) -> bool:
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            new_state = transition(self._state, event)
            if new_state == self._state:
                return False
            self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return True

    def select(self, type_name: Optional[str]) -> FetchState:
        """Select a type (empty = placeholder) and run the fetch to completion."""
        selected = normalize_type(type_name)
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._selected = selected
        self._apply(TypeSelected(selected), generation)
        if not selected:
            return self._state

        try:
            records = self._fetcher(selected)
        except FetchError as e:
            logger.warning(f"fetch failed [{e.kind}]: {e}")
            if not self._apply(FetchFailed(e), generation):
                log_action(f"Discarded stale failure for {selected}")
        else:
            if not self._apply(FetchSucceeded(tuple(records)), generation):
                log_action(f"Discarded stale result for {selected}")
        return self._state
