"""CLI command that runs the products API."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Optional

import click
import uvicorn

from catalog.infrastructure.bootstrap import DEFAULT_SEED_FILE, api_app, settings


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default CATALOG_HOST).")
@click.option("--port", default=None, type=int, help="Port (default CATALOG_PORT).")
@click.option(
    "--seed",
    "seed_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file of products to load at startup.",
)
@click.option("--demo", is_flag=True, default=False, help="Load the bundled demo products.")
def serve(host: Optional[str], port: Optional[int], seed_file: Optional[Path], demo: bool) -> None:
    """Serve the products API."""
    config = settings()
    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if seed_file is not None:
        overrides["seed_file"] = seed_file
    elif demo:
        overrides["seed_file"] = DEFAULT_SEED_FILE
    config = dataclasses.replace(config, **overrides)

    app = api_app(config)
    click.echo(f"Serving products API on http://{config.host}:{config.port}{config.route_prefix}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
