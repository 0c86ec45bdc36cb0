from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from product_catalog.application.product_service import ProductService
from product_catalog.config.logger_config import log
from product_catalog.core.exceptions import (
    CertificateError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingClaimError,
)
from product_catalog.domain.models import Principal
from product_catalog.infrastructure.services import certificate_extractor, jwt_service
from product_catalog.infrastructure.store.product_store import ProductStore
from product_catalog.interfaces.http.errors import CatalogHTTPException
from product_catalog.interfaces.http.schemas import ErrorCode

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> CatalogHTTPException:
    return CatalogHTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        code=ErrorCode.UNAUTHORIZED,
        message=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """
    Establish the request principal.

    Tries the client certificate subject first, then the bearer token.
    The resolved principal is also stored on `request.state.principal`.
    """
    try:
        principal = certificate_extractor.extract(request)
        if principal is None and credentials is not None:
            principal = jwt_service.get_principal(credentials.credentials)

    except CertificateError as e:
        log.warning("Authentication failed: unusable client certificate", error=str(e))
        raise _unauthorized("Client certificate subject has no common name") from e

    except TokenExpiredError as e:
        log.info("Authentication failed: token has expired")
        raise _unauthorized("Token has expired") from e

    except TokenMissingClaimError as e:
        log.warning("Authentication failed: missing subject in token")
        raise _unauthorized("Token is missing subject (claim 'sub')") from e

    except TokenInvalidError as e:
        log.info("Authentication failed: invalid or malformed token")
        raise _unauthorized("Invalid token") from e

    if principal is None:
        log.info("Authentication failed: no client certificate or bearer token")
        raise _unauthorized("Authentication required")

    log.debug("Authenticated", principal=principal.name, method=principal.method)
    request.state.principal = principal
    return principal


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def get_product_service(
    store: ProductStore = Depends(get_product_store),
) -> ProductService:
    return ProductService(store=store)
