import ipaddress
import re
from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

_PRIVATE_NETWORKS = [
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("169.254.0.0/16"),
]


def batched(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """
    Splits items into consecutive chunks of `size` (last one may be shorter).
    Example: batched([1, 2, 3, 4, 5], 2) -> [1, 2], [3, 4], [5]
    """
    if size < 1:
        raise ValueError("Batch size must be at least 1")
    for i in range(0, len(items), size):
        yield list(items[i:i + size])


def parse_port_range(port_input: str) -> Tuple[int, int]:
    """
    Parses "80" or "1-1000" into an inclusive (start, end) pair.
    Bounds are not checked here; that is the request validator's job.
    """
    text = port_input.strip()
    m = re.fullmatch(r"(\d+)\s*-\s*(\d+)", text)
    if m:
        return int(m.group(1)), int(m.group(2))
    if text.isdigit():
        port = int(text)
        return port, port
    raise ValueError(f"Invalid port range: {port_input!r}")


def is_private_host(host: str) -> bool:
    """True for localhost and IPv4 loopback/private/link-local literals."""
    if host.lower() == "localhost":
        return True
    try:
        addr = ipaddress.ip_address(host)
    except ValueError:
        return False
    return any(addr in net for net in _PRIVATE_NETWORKS if addr.version == net.version)
