"""Local and public IP addresses."""

import ipaddress
import urllib.error
import urllib.request
from typing import Iterable

import psutil

NOT_AVAILABLE = "N/A"
PUBLIC_IP_URL = "https://api.ipify.org"
_LOCAL_PREFIX = "192.168."


def _as_ipv4(text: str):
    try:
        address = ipaddress.ip_address(text.split("/", 1)[0])
    except ValueError:
        return None
    if isinstance(address, ipaddress.IPv6Address):
        address = address.ipv4_mapped
    return address


def pick_local_ip(addresses: Iterable[str]) -> str:
    """Return the first non-loopback IPv4 address in 192.168.0.0/16, or N/A."""
    for text in addresses:
        address = _as_ipv4(text)
        if address is None or address.is_loopback:
            continue
        if str(address).startswith(_LOCAL_PREFIX):
            return str(address)
    return NOT_AVAILABLE


def local_ip() -> str:
    """Return this machine's 192.168.x.x address, or N/A."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return NOT_AVAILABLE
    return pick_local_ip(
        entry.address for entries in interfaces.values() for entry in entries
    )


def public_ip(url: str = PUBLIC_IP_URL, timeout: float = 10.0) -> str:
    """Ask a web service for this machine's public address, or N/A."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as error:
        try:
            body = error.read()
        except OSError:
            return NOT_AVAILABLE
    except (OSError, ValueError):
        return NOT_AVAILABLE
    return body.decode("utf-8", errors="replace").strip()