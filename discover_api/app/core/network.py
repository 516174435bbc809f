"""
Listen address resolution for the command line entry point.

The server binds either to the first IPv4 address of a named network
interface, to an explicit IP address, or to every IPv4 interface.
Interface lookup uses the Linux ``SIOCGIFADDR`` ioctl.
"""

import ipaddress
import socket
import struct

ANY_ADDRESS = "0.0.0.0"

SIOCGIFADDR = 0x8915


class ListenAddressError(Exception):
    """Raised when no usable listen address can be derived from the flags."""


def find_interface_address(name: str) -> str:
    """Return the IPv4 address assigned to interface ``name``."""
    try:
        import fcntl
    except ImportError as exc:
        raise ListenAddressError("interface lookup is only supported on Linux") from exc

    known = {ifname for _, ifname in socket.if_nameindex()}
    if name not in known:
        raise ListenAddressError(f"cannot find interface {name!r}")

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            packed = fcntl.ioctl(
                sock.fileno(), SIOCGIFADDR, struct.pack("256s", name.encode("utf-8")[:15])
            )
        except OSError as exc:
            raise ListenAddressError(f"cannot find interface address for {name!r}") from exc
    return socket.inet_ntoa(packed[20:24])


def resolve_listen_address(interface: str = "", address: str = "") -> str:
    """Pick the bind address from the ``-i``/``-a`` flags.

    The interface wins over the address when both are given.  An address
    that does not parse as IPv4 or IPv6 is rejected instead of being
    handed to the server.
    """
    if interface:
        return find_interface_address(interface)
    if address:
        try:
            return str(ipaddress.ip_address(address))
        except ValueError as exc:
            raise ListenAddressError(f"invalid listen address {address!r}") from exc
    return ANY_ADDRESS
