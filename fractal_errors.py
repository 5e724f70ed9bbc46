"""
Error types raised while rendering a fractal.

Every failure of a render request is one of these. The HTTP API and the CLI
catch them and turn them into a status code or an exit code; the core
modules only raise.
"""


class FractalError(Exception):
    """Base class for all render failures."""


class UnknownFractal(FractalError):
    def __init__(self, fractal_id):
        self.fractal_id = fractal_id
        super().__init__(f"Unknown fractal id: {fractal_id!r}")


class IterationLimitExceeded(FractalError):
    def __init__(self, requested, maximum):
        self.requested = requested
        self.maximum = maximum
        super().__init__(f"Iterations must be between 0 and {maximum}, got {requested}")


# The expansion engine calls this an out-of-range request
OutOfRange = IterationLimitExceeded


class MalformedSequence(FractalError):
    def __init__(self, message, position=None):
        self.position = position
        if position is not None:
            message = f"{message} (at symbol {position})"
        super().__init__(message)


class InvalidColor(FractalError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid color {value!r}, expected 6 hex digits like '#4DFE44'")


class SurfaceUnavailable(FractalError):
    pass


class DefinitionError(FractalError):
    pass


__all__ = [
    'FractalError',
    'UnknownFractal',
    'IterationLimitExceeded',
    'OutOfRange',
    'MalformedSequence',
    'InvalidColor',
    'SurfaceUnavailable',
    'DefinitionError',
]
