from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class JWTConfig(BaseModel):
    """JWT Config needed to validate tokens from the issuing authority"""

    JWT_SECRET: str
    ALGORITHM: str = "HS256"
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None


class Config(BaseSettings):
    """Config settings"""

    ENV: str = "development"
    SERVICE_NAME: str = "product-service"

    # Server
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8012

    # JWT
    JWT_SECRET: str
    ALGORITHM: str = "HS256"
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None

    # Mutual TLS is terminated upstream; only enable header trust behind a
    # terminator that overwrites the header.
    CLIENT_CERT_HEADER: str = "X-SSL-Client-Subject-DN"
    TRUST_CLIENT_CERT_HEADER: bool = False

    # Server-side TLS
    SSL_CERTFILE: Optional[str] = None
    SSL_KEYFILE: Optional[str] = None

    @property
    def tls_enabled(self) -> bool:
        return bool(self.SSL_CERTFILE and self.SSL_KEYFILE)

    @property
    def jwt_config(self) -> JWTConfig:
        """Method to return JWT Config"""
        return JWTConfig(
            JWT_SECRET=self.JWT_SECRET,
            ALGORITHM=self.ALGORITHM,
            JWT_ISSUER=self.JWT_ISSUER,
            JWT_AUDIENCE=self.JWT_AUDIENCE,
        )

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent.parent / ".env.product",
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = Config()
