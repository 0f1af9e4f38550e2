"""Custom exceptions for the job board application engine.

Every error raised by the engine derives from ``EngineError`` so callers can
separate engine rejections from programming errors.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base exception for all engine errors."""

    pass


class ValidationError(EngineError):
    """Raised when input to the engine breaks a rule.

    Recoverable locally: the caller should re-prompt. Nothing is mutated.
    """

    @classmethod
    def blank_application_id(cls) -> ValidationError:
        return cls("Application id must not be blank.")

    @classmethod
    def unchanged_status(cls, status: str) -> ValidationError:
        return cls(f"Application is already {status}.")

    @classmethod
    def unknown_status(cls, value: str) -> ValidationError:
        return cls(f"Unknown application status: {value!r}.")

    @classmethod
    def forbidden_transition(cls, from_status: str, to_status: str, reason: str) -> ValidationError:
        return cls(f"Cannot move application from {from_status} to {to_status}: {reason}.")

    @classmethod
    def missing_interview(cls) -> ValidationError:
        return cls("Scheduling an interview requires a date, a mode and notes.")

    @classmethod
    def interview_not_in_future(cls, when: str) -> ValidationError:
        return cls(f"Interview date and time must be in the future (got {when}).")

    @classmethod
    def unknown_interview_mode(cls, value: str) -> ValidationError:
        return cls(f"Unknown interview mode: {value!r}. Use 'in-person' or 'virtual'.")


class NotFoundError(EngineError):
    """Raised when a history lookup finds no entry for an application id.

    Means "no prior status available"; not fatal.
    """

    def __init__(self, application_id: str) -> None:
        self.application_id = application_id
        super().__init__(f"No previous status recorded for application {application_id!r}.")


class ConflictError(EngineError):
    """Raised when an undo is requested but there is nothing to undo."""

    def __init__(self, application_id: str) -> None:
        self.application_id = application_id
        super().__init__(f"Nothing to undo for application {application_id!r}.")


class UpstreamError(EngineError):
    """Raised when the backend fails during the write half of a transition.

    The engine rolls back its own history mutation and re-raises unchanged.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(UpstreamError):
    """Raised when the backend rejects the API token (401/403)."""

    @classmethod
    def for_status(cls, status_code: int, details: str) -> AuthenticationError:
        return cls(
            f"Backend rejected the API token ({details}).\n"
            "Please check JOBBOARD_API_TOKEN in .env is correct and not expired.",
            status_code=status_code,
        )


class ConfigFileNotFoundError(EngineError):
    """Raised when a requested config file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(EngineError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, details: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {details}")


class ConfigFileValidationError(EngineError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, details: str) -> None:
        super().__init__(f"Config file {path} is invalid: {details}")
