"""
CLI command for building datagrams.
"""
from typing import Optional
import ipaddress

import click

from rfc768 import Datagram, PseudoHeader, RFC768Error
from .params import HEX, pseudo_header_options, require_address_pair


@click.command()
@click.option("--source", "-s", type=click.IntRange(0, 0xFFFF), required=True,
              help="Source port")
@click.option("--destination", "-d", type=click.IntRange(0, 0xFFFF), required=True,
              help="Destination port")
@click.option("--data", type=HEX, default="", help="Payload as hex")
@pseudo_header_options
def encode(source: int, destination: int, data: bytes,
           src_ip: Optional[ipaddress.IPv4Address], dst_ip: Optional[ipaddress.IPv4Address]):
    """
    Build a datagram and print it as hex.

    The checksum is computed when both --src-ip and --dst-ip are given,
    otherwise it is left absent (zero).

    Example:
      rfc768 encode -s 8080 -d 514 --data deadbeef --src-ip 10.0.0.1 --dst-ip 10.0.0.2
    """
    with_checksum = require_address_pair(src_ip, dst_ip)
    try:
        datagram = Datagram.create(source, destination, data)
    except RFC768Error as e:
        raise click.ClickException(str(e))

    if with_checksum:
        datagram = datagram.with_checksum(PseudoHeader.for_datagram(src_ip, dst_ip, datagram))

    click.echo(datagram.serialize().hex())
