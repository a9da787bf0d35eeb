"""
Probe command.

Implements 'go-cloud probe', a single GET against a running instance.
Suitable as a container health-check command.
"""

from enum import Enum
from typing import Optional

import httpx
import typer

from .. import __version__


class Endpoint(str, Enum):
    """Probe targets exposed by the service."""

    HEALTHZ = "healthz"
    READYZ = "readyz"
    ROOT = "root"

    @property
    def path(self) -> str:
        return "/" if self is Endpoint.ROOT else f"/{self.value}"


def probe_command(
    url: str,
    endpoint: Endpoint,
    timeout: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """GET ``endpoint`` on the service at ``url`` and echo the result.

    Returns:
        0 when the service answered 200, 1 for any other status,
        2 when the service could not be reached.
    """
    try:
        with httpx.Client(
            base_url=url,
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": f"go-cloud-probe/{__version__}"},
        ) as client:
            response = client.get(endpoint.path)
    except httpx.RequestError as e:
        typer.echo(f"{endpoint.value}: request failed: {e}", err=True)
        return 2

    typer.echo(f"{endpoint.value}: {response.status_code} {response.text.strip()}")
    return 0 if response.status_code == 200 else 1
