from enum import Enum, auto
from typing import Dict, List


class AttemptState(Enum):
    ATTEMPTING       = auto()
    RETRY_WAIT       = auto()
    SUCCESS          = auto()
    TERMINAL_FAILURE = auto()


class InvalidTransitionError(RuntimeError):
    pass


class AttemptStateMachine:
    """Tracks one operation through its attempts; SUCCESS and TERMINAL_FAILURE are final."""

    def __init__(self, initial: AttemptState = AttemptState.ATTEMPTING):
        self._state = initial
        self._trans: Dict[AttemptState, List[AttemptState]] = {
            AttemptState.ATTEMPTING:       [AttemptState.RETRY_WAIT, AttemptState.SUCCESS,
                                            AttemptState.TERMINAL_FAILURE],
            AttemptState.RETRY_WAIT:       [AttemptState.ATTEMPTING],
            AttemptState.SUCCESS:          [],
            AttemptState.TERMINAL_FAILURE: [],
        }

    @property
    def state(self) -> AttemptState: return self._state

    @property
    def finished(self) -> bool: return not self._trans[self._state]

    def can(self, nxt: AttemptState) -> bool: return nxt in self._trans[self._state]

    def transition(self, nxt: AttemptState) -> None:
        if not self.can(nxt):
            raise InvalidTransitionError(f"{self._state.name} -> {nxt.name}")
        self._state = nxt
