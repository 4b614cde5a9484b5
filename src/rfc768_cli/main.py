"""
rfc768 CLI - main entry point.
"""
import logging

import click

from .decode import decode
from .encode import encode
from .read import read


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
def cli(verbose: bool):
    """rfc768 - UDP datagram encoder, decoder and capture reader."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")


cli.add_command(encode)
cli.add_command(decode)
cli.add_command(read)

if __name__ == "__main__":
    cli()
