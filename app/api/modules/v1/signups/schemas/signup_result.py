from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SignupErrorKind(str, Enum):
    NOT_CONFIGURED = "NOT_CONFIGURED"
    # Classification of an insert failure only; a signup result never carries it.
    CONFLICT_EXISTING = "CONFLICT_EXISTING"
    BACKEND_ERROR = "BACKEND_ERROR"
    UNKNOWN_EXCEPTION = "UNKNOWN_EXCEPTION"


class SignupOutcome(str, Enum):
    NEW = "new"
    EXISTING = "existing"
    FAILED = "failed"


@dataclass(frozen=True)
class SignupError:
    """Why a signup store operation failed.

    Attributes:
        kind: Category of the failure.
        message: Human-readable description for logs.
        code: Store-specific code when one was reported.
    """

    kind: SignupErrorKind
    message: str = ""
    code: Optional[str] = None


NOT_CONFIGURED_ERROR = SignupError(
    kind=SignupErrorKind.NOT_CONFIGURED,
    message="Signup store not configured",
)


@dataclass(frozen=True)
class SignupResult:
    """Outcome of recording a signup.

    ``success`` is True for both new and already-known emails; ``error`` is
    only set when ``success`` is False.
    """

    success: bool
    is_new: bool
    error: Optional[SignupError] = None

    @classmethod
    def new(cls) -> "SignupResult":
        return cls(success=True, is_new=True)

    @classmethod
    def existing(cls) -> "SignupResult":
        return cls(success=True, is_new=False)

    @classmethod
    def failed(cls, error: SignupError) -> "SignupResult":
        return cls(success=False, is_new=False, error=error)

    @property
    def outcome(self) -> SignupOutcome:
        if not self.success:
            return SignupOutcome.FAILED
        return SignupOutcome.NEW if self.is_new else SignupOutcome.EXISTING


@dataclass(frozen=True)
class EmailLookupResult:
    exists: bool
    error: Optional[SignupError] = None
