from __future__ import annotations


class UnlockEngineError(Exception):
    '''Base class for errors raised by the unlock engine.'''


class RuleEvaluationError(UnlockEngineError):
    '''A rule raised while being evaluated.

    Never raised out of a sweep or a selection; instances are collected on the
    component's ``last_errors`` so callers can inspect what failed.
    '''

    def __init__(self, unlockable_id: str, cause: BaseException) -> None:
        super().__init__(f'Rule for {unlockable_id!r} failed: {cause!r}')
        self.unlockable_id = unlockable_id
        self.cause = cause


class PersistenceError(UnlockEngineError):
    '''The injected save operation failed while granting an unlockable.'''

    def __init__(self, unlockable_id: str) -> None:
        super().__init__(f'Could not persist grant of {unlockable_id!r}')
        self.unlockable_id = unlockable_id


class MisconfigurationWarning(UserWarning):
    '''A catalog entry has no rule and can never be unlocked.'''
