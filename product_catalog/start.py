import uvicorn

from product_catalog.config.config import config
from product_catalog.config.logger_config import log


def server_options() -> dict:
    """
    uvicorn keyword arguments for the configured host, port and TLS setup.

    Only server-side TLS is configured here. uvicorn never exposes the peer
    certificate to the app, so client certificates are verified by the TLS
    terminator in front of the service.
    """
    options = {"host": config.APP_HOST, "port": config.APP_PORT}

    if config.tls_enabled:
        options.update(
            ssl_certfile=config.SSL_CERTFILE,
            ssl_keyfile=config.SSL_KEYFILE,
        )

    return options


def main():
    options = server_options()
    log.info(
        "Starting product-service on {}:{}",
        options["host"],
        options["port"],
        tls=config.tls_enabled,
        trust_client_cert_header=config.TRUST_CLIENT_CERT_HEADER,
    )
    uvicorn.run("product_catalog.main:app", **options)


if __name__ == "__main__":
    main()
