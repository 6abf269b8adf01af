"""
Error definitions for golden file comparisons.

Rules:
- No silent failures: every step raises a coded GoldenError
- Underlying OSError / TypeError is always chained (``raise ... from e``)
- No retries: a deterministic comparison gives the same answer twice
"""

from typing import Any


class GoldenError(Exception):
    """
    Base error for every failure raised by golden_files.

    Carries a stable error code plus keyword context so that test reports and
    logs can be filtered by code.

    Usage:
        raise NotFoundError(path=str(path), cause=e) from e
    """

    code = "GOLDEN_ERROR"

    def __init__(self, message: str = "", **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx = {k: v for k, v in self.context.items() if k != "cause"}
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in ctx.items())
        parts = [f"[{self.code}]"]
        if self.message:
            parts.append(self.message)
        if ctx_str:
            parts.append(f"({ctx_str})")
        return " ".join(parts)

    @property
    def cause(self) -> BaseException | None:
        """Underlying exception, if any."""
        cause = self.context.get("cause")
        return cause if isinstance(cause, BaseException) else self.__cause__

    def to_dict(self) -> dict[str, Any]:
        """For logs / JSON serialization."""
        data: dict[str, Any] = {"code": self.code}
        if self.message:
            data["message"] = self.message
        for key, value in self.context.items():
            data[key] = repr(value) if isinstance(value, BaseException) else value
        return data


class SerializationError(GoldenError):
    """The actual object could not be marshaled to JSON."""

    code = "SERIALIZATION_FAILED"


class UnsupportedTypeError(GoldenError):
    """Raw input is neither bytes, str nor a value with its own __str__."""

    code = "UNSUPPORTED_TYPE"


class MalformedUUIDError(GoldenError):
    """Text matched the UUID pattern but failed the strict parse."""

    code = "MALFORMED_UUID"


class NotFoundError(GoldenError):
    """The golden file could not be read."""

    code = "GOLDEN_NOT_FOUND"


class GoldenIOError(GoldenError):
    """Creating the golden directory or writing the golden file failed."""

    code = "GOLDEN_WRITE_FAILED"


class MismatchError(GoldenError, AssertionError):
    """
    Normalized actual output differs from the normalized golden file.

    Also an AssertionError so pytest reports it as a failed assertion
    instead of an error.
    """

    code = "GOLDEN_MISMATCH"

    def __init__(self, path: str, diff: str) -> None:
        self.path = path
        self.diff = diff
        super().__init__(f"mismatch of actual output and golden-file \"{path}\":\n{diff}")

    def _format_message(self) -> str:
        return self.message


class UpdateBlockedError(GoldenError):
    """Update mode was requested while running in a CI environment."""

    code = "GOLDEN_UPDATE_IN_CI"


class ConfigError(GoldenError):
    """The golden config file is unreadable or invalid."""

    code = "CONFIG_INVALID"


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants, one per GoldenError subclass."""

    # === Serialize ===
    SERIALIZATION_FAILED = SerializationError.code
    UNSUPPORTED_TYPE = UnsupportedTypeError.code

    # === Normalize ===
    MALFORMED_UUID = MalformedUUIDError.code

    # === Reference Store ===
    GOLDEN_NOT_FOUND = NotFoundError.code
    GOLDEN_WRITE_FAILED = GoldenIOError.code

    # === Compare ===
    GOLDEN_MISMATCH = MismatchError.code

    # === Config ===
    GOLDEN_UPDATE_IN_CI = UpdateBlockedError.code
    CONFIG_INVALID = ConfigError.code
