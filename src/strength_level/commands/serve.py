"""Web server command."""

import logging

import click

from .base import thresholds_option


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@thresholds_option
def serve(host: str, port: int, thresholds_source: str | None):
    """Start the web server.

    Launches the strength level calculator on the specified host and port.
    The threshold table is loaded on startup; if it fails to load the
    form stays up and reports results as unavailable.

    Examples:

        # Start on default port (8000)
        strength-level serve

        # Start on custom port with a custom table
        strength-level serve --port 3000 --thresholds standards.json

        # Expose to network (all interfaces)
        strength-level serve --host 0.0.0.0
    """
    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting strength-level web server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    if host == "0.0.0.0":
        import socket
        hostname = socket.gethostname()
        try:
            local_ip = socket.gethostbyname(hostname)
            click.echo(f"  Network: http://{local_ip}:{port}")
        except socket.gaierror:
            pass
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    # Configure logging so threshold load failures reach the console
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = create_app(thresholds_source=thresholds_source)
    uvicorn.run(app, host=host, port=port)
