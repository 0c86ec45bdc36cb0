"""
Client certificate principal extraction.

uvicorn does not hand the peer certificate to the application, so mutual TLS
is terminated in front of the service (ingress, sidecar or load balancer).
The verified subject DN then reaches us in one of two ways:

- the ASGI TLS extension (`client_cert_name`), when the server fills it in;
- a header set by the terminator, read only when TRUST_CLIENT_CERT_HEADER is
  on. The terminator must overwrite or strip that header on inbound traffic.
"""

from typing import Optional

from starlette.requests import Request

from product_catalog.config.logger_config import log
from product_catalog.core.exceptions import CertificateError
from product_catalog.domain.models import Principal


def common_name_from_dn(dn: str) -> str:
    """
    Return the CN attribute of an RFC 4514 style subject DN.

    >>> common_name_from_dn("CN=inventory-service,O=Lite,C=US")
    'inventory-service'
    """
    for rdn in dn.split(","):
        attribute, sep, value = rdn.strip().partition("=")
        if sep and attribute.strip().upper() == "CN" and value.strip():
            return value.strip()
    raise CertificateError(f"No CN found in certificate subject: {dn!r}")


class CertificatePrincipalExtractor:
    def __init__(self, header_name: str, trust_header: bool = False):
        self.header_name = header_name
        self.trust_header = trust_header

    def subject_dn(self, request: Request) -> Optional[str]:
        tls = request.scope.get("extensions", {}).get("tls") or {}
        dn = tls.get("client_cert_name")

        if not dn and self.trust_header:
            dn = request.headers.get(self.header_name)
        elif not dn and self.header_name in request.headers:
            log.warning(
                "Ignoring client certificate header; header trust is disabled",
                header=self.header_name,
            )

        return dn.strip() if dn and dn.strip() else None

    def extract(self, request: Request) -> Optional[Principal]:
        """Principal for the client certificate, or None if none was presented."""
        dn = self.subject_dn(request)
        if dn is None:
            return None

        log.info("Client certificate presented", dn=dn)
        return Principal(name=common_name_from_dn(dn), method="certificate")
