"""
Main CLI application for go-cloud.

Provides the Typer application with the serve and probe commands.
"""

from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

from ..api.config import Config
from ..api.server import serve as serve_service
from .probe import Endpoint, probe_command

app = typer.Typer(
    name="go-cloud",
    help="go-cloud - minimal HTTP service with liveness and readiness probes",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Listen address [default: $HOST or 0.0.0.0]")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Listen port [default: $PORT or 8080]")] = None,
):
    """
    Run the HTTP service until SIGINT/SIGTERM.

    Examples:
      go-cloud serve

      APP_READY=true go-cloud serve --port 9000
    """
    overrides: Dict[str, Any] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port

    try:
        config = Config(**overrides)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    raise typer.Exit(serve_service(config))


@app.command()
def probe(
    endpoint: Annotated[Endpoint, typer.Argument(help="Endpoint to check")] = Endpoint.HEALTHZ,
    url: Annotated[
        str, typer.Option("--url", "-u", envvar="GO_CLOUD_URL", help="Base URL of the service")
    ] = "http://127.0.0.1:8080",
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 5.0,
):
    """
    GET a probe endpoint; exit 0 on 200, 1 on other statuses, 2 if unreachable.

    Examples:
      go-cloud probe readyz --url http://localhost:8080
    """
    raise typer.Exit(probe_command(url, endpoint, timeout))


def main():
    """Entry point for go-cloud command."""
    app()


if __name__ == "__main__":
    main()
