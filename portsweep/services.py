from types import MappingProxyType
from typing import Optional

# Well-known port -> service name. Read-only, shared by every probe.
COMMON_SERVICES = MappingProxyType({
    20: "FTP Data",
    21: "FTP Control",
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    143: "IMAP",
    443: "HTTPS",
    445: "SMB",
    3306: "MySQL",
    3389: "RDP",
    5432: "PostgreSQL",
    5900: "VNC",
    6379: "Redis",
    8080: "HTTP Alt",
    8443: "HTTPS Alt",
    27017: "MongoDB",
})


def lookup(port: int) -> Optional[str]:
    """Returns the registered service name for a port, or None."""
    return COMMON_SERVICES.get(port)
