import asyncio
import logging

from .models import PortResult, PortStatus
from .services import lookup

logger = logging.getLogger(__name__)


async def probe_port(host: str, port: int, timeout_ms: int) -> PortResult:
    """
    Single TCP connect attempt against host:port, bounded by timeout_ms.

    - Connected: socket is closed straight away, status OPEN plus the
      registered service name.
    - Deadline hit first: FILTERED. wait_for cancels the pending connect,
      which tears down its transport.
    - Any other socket error (refused, unreachable, name resolution,
      a host name the resolver cannot encode): CLOSED.
    """
    logger.debug("Scanning %s:%d", host, port)

    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port),
            timeout=timeout_ms / 1000,
        )
    except (asyncio.TimeoutError, TimeoutError):
        # Must precede OSError: TimeoutError is an OSError subclass
        return PortResult(port, PortStatus.FILTERED)
    except (OSError, ValueError) as e:
        # ValueError: host rejected by the resolver (bad IDNA label, NUL byte)
        logger.debug("%s:%d refused or unreachable: %s", host, port, e)
        return PortResult(port, PortStatus.CLOSED)

    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass

    return PortResult(port, PortStatus.OPEN, lookup(port))
