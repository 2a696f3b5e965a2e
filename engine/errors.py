"""Recoverable engine faults.

None of these ever escape a public command: commands answer ``False``,
loads fall back to defaults and unknown references are ignored.
"""


class EngineError(Exception):
    """Base class for session engine faults."""


class InvalidTransition(EngineError):
    """A command arrived in a phase where it has no meaning."""

    def __init__(self, command: str, phase):
        super().__init__(f"'{command}' is not valid while {phase.value}")
        self.command = command
        self.phase = phase


class ExhaustedContentPool(EngineError):
    """The content pool has no items for a level."""


class CorruptPersistedState(EngineError):
    """A persisted progress record could not be read."""


class UnknownLevelReference(EngineError):
    """A lookup or unlock edge names a level that does not exist."""

    def __init__(self, level_id):
        super().__init__(f"Unknown level: {level_id}")
        self.level_id = level_id
