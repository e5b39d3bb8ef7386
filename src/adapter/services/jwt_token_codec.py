import logging
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from src.app.services.token_codec import ResetClaims, SessionClaims, TokenCodec
from src.domain.entities import TokenKind
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired token")

_DECODE_OPTIONS = {"require_exp": True, "require_iat": True, "require_sub": True}


class JwtTokenCodec(TokenCodec):
    """
    python-jose implementation of the token codec.

    Session token claims: sub, email, kind=session, iat, exp
    Reset token claims:   sub, jti, kind=reset, iat, exp

    The signing secret is fixed at construction. Rotating it means building
    a new codec, which invalidates every outstanding token.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        session_ttl: timedelta = timedelta(days=7),
        reset_ttl: timedelta = timedelta(hours=1),
    ):
        if not secret:
            raise ValueError("JWT signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.session_ttl = session_ttl
        self.reset_ttl = reset_ttl

    def _encode(self, claims: dict, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {**claims, "iat": now, "exp": now + ttl}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def _decode(self, token: str, kind: TokenKind) -> Optional[dict]:
        """Signature, expiry and required claims are checked by jose; kind here"""
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm], options=_DECODE_OPTIONS
            )
        except ExpiredSignatureError:
            logger.debug(f"Rejected {kind.value} token: expired")
            return None
        except JWTError as exc:
            logger.debug(f"Rejected {kind.value} token: {exc}")
            return None

        if payload.get("kind") != kind.value:
            logger.debug(f"Rejected {kind.value} token: kind={payload.get('kind')!r}")
            return None
        return payload

    def issue(
        self, identity_id: UUID, email: str, ttl: Optional[timedelta] = None
    ) -> str:
        claims = {
            "sub": str(identity_id),
            "email": email,
            "kind": TokenKind.session.value,
        }
        return self._encode(claims, ttl if ttl is not None else self.session_ttl)

    def validate(self, token: str) -> Result[SessionClaims]:
        payload = self._decode(token, TokenKind.session)
        if payload is None:
            return Return.err(INVALID_TOKEN)

        email = payload.get("email")
        try:
            identity_id = UUID(payload["sub"])
        except ValueError:
            return Return.err(INVALID_TOKEN)
        if not isinstance(email, str):
            return Return.err(INVALID_TOKEN)

        return Return.ok(SessionClaims(identity_id=identity_id, email=email))

    def issue_reset(
        self, identity_id: UUID, token_id: UUID, ttl: Optional[timedelta] = None
    ) -> str:
        claims = {
            "sub": str(identity_id),
            "jti": str(token_id),
            "kind": TokenKind.reset.value,
        }
        return self._encode(claims, ttl if ttl is not None else self.reset_ttl)

    def validate_reset(self, token: str) -> Result[ResetClaims]:
        payload = self._decode(token, TokenKind.reset)
        if payload is None:
            return Return.err(INVALID_TOKEN)

        try:
            identity_id = UUID(payload["sub"])
            token_id = UUID(str(payload.get("jti")))
        except ValueError:
            return Return.err(INVALID_TOKEN)

        return Return.ok(ResetClaims(identity_id=identity_id, token_id=token_id))
