"""Error taxonomy for order log validation."""

from __future__ import annotations

from enum import Enum, IntEnum


class ErrorType(Enum):
    """Broad category of a failure, used for programmatic discrimination."""

    UNKNOWN = "unknown"
    AUTHORIZATION = "authorization"
    INCORRECT_INPUT = "incorrect-input"
    NOT_FOUND = "not-found"


class ErrorCode(IntEnum):
    """Numeric error codes surfaced by the order pipeline.

    ``UNKNOWN`` is reserved for failures without a dedicated code; the
    pipeline itself never raises it.
    """

    UNKNOWN = -1
    INVALID_FILE = 700
    FILE_NOT_FOUND = 701
    INCORRECT_INPUT = 702


class OrderLogError(Exception):
    """A validation failure carrying a category and a numeric code.

    ``field`` names the offending order field (``eater_id`` or
    ``food_menu_id``) when a value failed to parse; ``line_number`` is the
    1-based log line the failure was detected on, when known.
    """

    def __init__(
        self,
        code: ErrorCode,
        error_type: ErrorType,
        message: str,
        *,
        field: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.error_type = error_type
        self.message = message
        self.field = field
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message

    @classmethod
    def unknown(
        cls, code: ErrorCode, message: str, *, line_number: int | None = None
    ) -> OrderLogError:
        return cls(code, ErrorType.UNKNOWN, message, line_number=line_number)

    @classmethod
    def authorization(cls, code: ErrorCode, message: str) -> OrderLogError:
        return cls(code, ErrorType.AUTHORIZATION, message)

    @classmethod
    def incorrect_input(
        cls,
        code: ErrorCode,
        message: str,
        *,
        field: str | None = None,
        line_number: int | None = None,
    ) -> OrderLogError:
        return cls(
            code,
            ErrorType.INCORRECT_INPUT,
            message,
            field=field,
            line_number=line_number,
        )

    @classmethod
    def not_found(cls, code: ErrorCode, message: str) -> OrderLogError:
        return cls(code, ErrorType.NOT_FOUND, message)


# Only this suffix is accepted for order logs (compared case-insensitively)
ORDER_LOG_SUFFIX = ".txt"
