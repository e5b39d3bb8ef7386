from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from uuid import UUID

from src.libs.result import Result


@dataclass(frozen=True)
class SessionClaims:
    """Identity asserted by a valid session token"""

    identity_id: UUID
    email: str


@dataclass(frozen=True)
class ResetClaims:
    """Identity and reset record asserted by a valid reset token"""

    identity_id: UUID
    token_id: UUID


class TokenCodec(ABC):
    """
    Signed bearer token port.

    validate() and validate_reset() return INVALID_TOKEN for every failure
    (malformed, bad signature, expired, wrong kind) without saying which.
    """

    session_ttl: timedelta
    reset_ttl: timedelta

    @abstractmethod
    def issue(
        self, identity_id: UUID, email: str, ttl: Optional[timedelta] = None
    ) -> str:
        pass

    @abstractmethod
    def validate(self, token: str) -> Result[SessionClaims]:
        pass

    @abstractmethod
    def issue_reset(
        self, identity_id: UUID, token_id: UUID, ttl: Optional[timedelta] = None
    ) -> str:
        pass

    @abstractmethod
    def validate_reset(self, token: str) -> Result[ResetClaims]:
        pass
