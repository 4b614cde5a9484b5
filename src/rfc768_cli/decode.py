"""
CLI command for decoding a single datagram.
"""
import ipaddress
import json
from typing import Optional

import click

from pcap_loader.records import ChecksumStatus, checksum_status
from rfc768 import Datagram, DatagramError, PseudoHeader
from .params import HEX, pseudo_header_options, require_address_pair


@click.command()
@click.argument("hexdata", type=HEX)
@pseudo_header_options
@click.option("--format", "format", type=click.Choice(["table", "json"]),
              default="table", show_default=True, help="Output format")
def decode(hexdata: bytes, src_ip: Optional[ipaddress.IPv4Address],
           dst_ip: Optional[ipaddress.IPv4Address], format: str):
    """
    Decode one datagram given as hex.

    Give --src-ip and --dst-ip to verify the checksum.

    Example:
      rfc768 decode 3039003500140000000000000000000000000000
    """
    verify = require_address_pair(src_ip, dst_ip)
    try:
        datagram = Datagram.parse(hexdata)
    except DatagramError as e:
        raise click.ClickException(str(e))

    pseudo = PseudoHeader.for_datagram(src_ip, dst_ip, datagram) if verify else None
    status = checksum_status(datagram, pseudo)

    trailing = len(hexdata) - len(datagram)
    if trailing > 0:
        click.echo(f"Warning: {trailing} trailing bytes ignored", err=True)

    if format == "json":
        record = datagram.to_dict()
        record["checksum_status"] = status.value
        record["is_valid"] = status is not ChecksumStatus.INVALID
        click.echo(json.dumps(record, separators=(",", ":"), ensure_ascii=True))
        return

    header = datagram.header
    click.echo(f"Source:       {header.source}")
    click.echo(f"Destination:  {header.destination}")
    click.echo(f"Length:       {header.length} ({header.length.data} data bytes)")
    click.echo(f"Checksum:     {header.checksum} ({status.value})")
    click.echo(f"Data:         {datagram.data.hex(' ') if datagram.data else '-'}")
