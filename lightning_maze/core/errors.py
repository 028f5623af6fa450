class MazeEngineError(Exception):
    """Base class for everything the engine raises on purpose."""


class ConfigurationError(MazeEngineError, ValueError):
    """Invalid construction input (dimensions, factors, start cell, algo)."""


class InvariantViolation(MazeEngineError, AssertionError):
    """
    Internal consistency check failed.
    Never triggered by valid input; indicates a generator or propagation bug.
    """


class EngineStateError(MazeEngineError, RuntimeError):
    """Operation called in the wrong lifecycle state (e.g. path before exhaustion)."""
