from .state_machine import AttemptState, AttemptStateMachine, InvalidTransitionError

__all__ = ["AttemptState", "AttemptStateMachine", "InvalidTransitionError"]
