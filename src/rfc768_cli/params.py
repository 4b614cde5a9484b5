"""
Shared click parameter types and options.
"""
import ipaddress

import click


class HexBytesType(click.ParamType):
    """Hex string such as ``deadbeef``, ``de ad be ef`` or ``0xde:ad``."""
    name = "hex"

    def convert(self, value, param, ctx):
        if isinstance(value, bytes):
            return value
        text = value.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        text = text.replace(":", "").replace(" ", "")
        try:
            return bytes.fromhex(text)
        except ValueError:
            self.fail(f"{value!r} is not valid hex", param, ctx)


class IPv4Type(click.ParamType):
    name = "ipv4"

    def convert(self, value, param, ctx):
        if isinstance(value, ipaddress.IPv4Address):
            return value
        try:
            return ipaddress.IPv4Address(value)
        except ValueError:
            self.fail(f"{value!r} is not an IPv4 address", param, ctx)


HEX = HexBytesType()
IPV4 = IPv4Type()


def pseudo_header_options(func):
    """Add --src-ip/--dst-ip, the addresses of the pseudo-header."""
    func = click.option("--dst-ip", type=IPV4,
                        help="Destination IPv4 address for the checksum pseudo-header")(func)
    func = click.option("--src-ip", type=IPV4,
                        help="Source IPv4 address for the checksum pseudo-header")(func)
    return func


def require_address_pair(src_ip, dst_ip) -> bool:
    """True if both addresses are given; error if only one is."""
    if (src_ip is None) != (dst_ip is None):
        raise click.UsageError("--src-ip and --dst-ip must be given together")
    return src_ip is not None
