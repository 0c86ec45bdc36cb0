"""
Centralized service instances for the product-service.
Ensures single, shared instances of JWTService and the certificate extractor.
"""

from product_catalog.config.config import config
from product_catalog.infrastructure.security.certificate import (
    CertificatePrincipalExtractor,
)
from product_catalog.infrastructure.security.jwt import JWTService

# Single shared instances
jwt_service = JWTService(config=config.jwt_config)
certificate_extractor = CertificatePrincipalExtractor(
    config.CLIENT_CERT_HEADER, trust_header=config.TRUST_CLIENT_CERT_HEADER
)
