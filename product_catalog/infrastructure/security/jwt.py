"""
JWT Service Module

Validates bearer tokens minted by the external token-issuing authority.
Validation is local: signature, expiry and (when configured) issuer and
audience are checked against the shared settings, no call is made to the
issuer.

Domain exceptions are raised here; the HTTP layer turns them into 401s.
"""

from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from product_catalog.config.config import JWTConfig
from product_catalog.config.logger_config import log
from product_catalog.core.exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingClaimError,
)
from product_catalog.domain.models import Principal


class JWTService:
    """
    Validates JWTs and turns their claims into a Principal.

    Instantiated once in product_catalog/infrastructure/services.py with config
    from product_catalog/config/config.py.

    Attributes:
        config (JWTConfig): Secret, algorithm and optional issuer/audience.
    """

    def __init__(self, config: JWTConfig):
        self.config = config
        log.info(
            "JWTService initialized [algorithm={}, issuer={}, audience={}]",
            config.ALGORITHM,
            config.JWT_ISSUER,
            config.JWT_AUDIENCE,
        )

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token (str): The raw JWT token string (without 'Bearer ' prefix).

        Returns:
            Dict[str, Any]: The decoded JWT payload.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the signature, format, issuer or audience is wrong.
        """
        log.debug("Verifying JWT token (length={})", len(token))

        try:
            payload = jwt.decode(
                token,
                self.config.JWT_SECRET,
                algorithms=[self.config.ALGORITHM],
                audience=self.config.JWT_AUDIENCE,
                issuer=self.config.JWT_ISSUER,
                options={"verify_aud": self.config.JWT_AUDIENCE is not None},
            )
            log.debug("Token decoded successfully [sub={}]", payload.get("sub"))
            return payload

        except ExpiredSignatureError as e:
            log.warning("Token verification failed: expired")
            raise TokenExpiredError("Token has expired") from e

        except JWTClaimsError as e:
            log.warning("Token claims rejected", error=str(e))
            raise TokenInvalidError(f"Invalid token claims: {e}") from e

        except JWTError as e:
            log.error("JWT decoding failed (signature, format, etc.)", error=str(e))
            raise TokenInvalidError(f"Invalid token: {e}") from e

    def get_principal(self, token: str) -> Principal:
        """
        Verify `token` and build the Principal from its 'sub' claim.

        Raises:
            TokenExpiredError, TokenInvalidError: From verify_token.
            TokenMissingClaimError: If the token has no 'sub' claim.
        """
        payload = self.verify_token(token)
        subject = payload.get("sub")

        if not subject:
            log.warning("Token is missing 'sub' claim")
            raise TokenMissingClaimError("Token is missing 'sub' claim")

        return Principal(name=str(subject), method="bearer", claims=payload)
