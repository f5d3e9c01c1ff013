"""Development server.

Starts a pounce ASGI server with the live perch app object.
"""


def run_dev_server(app: object, host: str, port: int) -> None:
    """Start a single-worker pounce server with the given perch app.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but the preview app is built from CLI flags at runtime. We use
    ``pounce.Server`` directly with the ASGI callable.

    Content files need no reload: every request re-reads them.

    Args:
        app: ASGI callable (perch PreviewApp instance).
        host: Bind host address.
        port: Bind port number.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=False,
    )
    server = Server(config, app)
    server.run()
