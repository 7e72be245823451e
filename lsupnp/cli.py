import sys
import logging

import click

from .config import SessionConfig
from .const import DEFAULT_TIMEOUT
from .errors import DiscoveryError, TransportError
from .ssdp import DiscoverySession


def _absolute_timeout(ctx, param, value):
    value = abs(value)
    if value == 0:
        raise click.BadParameter("timeout must be at least 1 second")
    return value


def exit_status(exc):
    """Map a fatal discovery error onto a process exit status."""
    if isinstance(exc, TransportError) and exc.errno:
        return (exc.errno & 0xFF) or 1
    return 1


def print_host(host, name):
    if name:
        click.echo("%s\t%s" % (host, name))
    else:
        click.echo(host)


@click.command("lsupnp")
@click.option(
    "-p", "--port", "source_port", type=click.IntRange(0, 65535), default=0,
    help="Client-side (source) UDP port to bind to.",
)
@click.option("-r", "--resolve", "resolve_names", is_flag=True,
              help="Do reverse DNS lookups.")
@click.option(
    "-t", "--timeout", type=int, default=DEFAULT_TIMEOUT, callback=_absolute_timeout,
    help="Seconds to wait for further responses (default %d)." % DEFAULT_TIMEOUT,
)
@click.option("-v", "--verbose", is_flag=True, help="Provide verbose information.")
def root(source_port, resolve_names, timeout, verbose):
    """
    Discover and list UPnP devices on the network.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
    )
    config = SessionConfig.create(
        source_port=source_port,
        receive_timeout=timeout,
        verbose=verbose,
        resolve_names=resolve_names,
    )
    session = DiscoverySession(config, on_host=print_host)
    try:
        session.run()
    except DiscoveryError as exc:
        click.echo(str(exc), err=True)
        sys.exit(exit_status(exc))


def main(argv=None):
    root.main(args=argv, prog_name="lsupnp")
