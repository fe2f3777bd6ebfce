"""Error kinds raised by the Monty Hall simulator."""


class MontyHallError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(MontyHallError, ValueError):
    """Raised for malformed caller input, e.g. a non-positive trial count."""


class NoSuitableCandidateError(MontyHallError, LookupError):
    """Raised when no door satisfies a required predicate.

    With a valid three-door board this can only happen through a defect, so the
    error is never caught inside the package and aborts the whole run.
    """
