"""
CLI command for listing the UDP datagrams of a capture file.
"""
import json
from typing import Optional

import click

from pcap_loader import CaptureFormatError, ReaderConfig, UdpPcapReader, UdpRecord


def _format_ports(record: UdpRecord) -> str:
    if record.datagram is None:
        return "-"
    return f"{record.datagram.source}->{record.datagram.destination}"


def _format_row(record: UdpRecord) -> str:
    if record.datagram is None:
        length = "-"
        status = f"error: {record.error}"
    else:
        length = str(record.datagram.header.length)
        status = f"{record.datagram.checksum} {record.checksum_status.value}"
    return (
        f"{record.packet_id:<5} {record.timestamp_us:<17} "
        f"{record.src_ip:<15} {record.dst_ip:<15} {_format_ports(record):<13} "
        f"{length:<6} {status}"
    )


@click.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", "limit", type=int, default=50, show_default=True,
              help="Max datagrams to read (0 = no limit)")
@click.option("--no-verify", is_flag=True, help="Skip checksum verification")
@click.option("--format", "format", type=click.Choice(["table", "json", "jsonl"]),
              default="table", show_default=True, help="Output format")
@click.option("--output", "output", type=click.Path(dir_okay=False),
              help="Write JSON/JSONL output to file")
def read(filepath: str, limit: int, no_verify: bool, format: str, output: Optional[str]):
    """
    List UDP datagrams from a PCAP/PCAPNG file.

    Example:
      rfc768 read capture.pcapng --limit 20
    """
    config = ReaderConfig(limit=limit, verify_checksums=not no_verify)
    records = []

    try:
        with UdpPcapReader(filepath, config) as reader:
            if format == "table":
                click.echo("ID    Time(us)          Src             Dst             "
                           "Ports         Len    Checksum")
                click.echo("-" * 96)
            for record in reader:
                if format == "table":
                    click.echo(_format_row(record))
                else:
                    records.append(record.to_dict())
            info = reader.get_session_info()
    except (OSError, RuntimeError, CaptureFormatError) as e:
        raise click.ClickException(str(e))

    if format == "table":
        click.echo(f"\n{info['udp_records']} UDP datagrams "
                   f"({info['malformed']} malformed) in {info['packets_seen']} packets")
        return

    if format == "json":
        lines = [json.dumps(records, separators=(",", ":"), ensure_ascii=True)]
    else:
        lines = [json.dumps(r, separators=(",", ":"), ensure_ascii=True) for r in records]

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    else:
        for line in lines:
            click.echo(line)
