"""GitHub API errors and call results."""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from pydantic import ValidationError

T = TypeVar("T")


class GitHubError(Exception):
    """Base error for a failed GitHub API call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(GitHubError):
    """Non-success status or network failure."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(GitHubError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
        self.reason = message

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "DecodeError":
        """Build from the first pydantic validation failure."""
        first = error.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        return cls(first["msg"], path=path)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call carrying the decoded value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed call carrying the error."""

    error: GitHubError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Ok[T] | Err
