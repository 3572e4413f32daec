import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

from .models import PortResult, ScanOutcome
from .prober import probe_port
from .utils import batched

logger = logging.getLogger(__name__)

ProbeFunc = Callable[[str, int, int], Awaitable[PortResult]]
BatchCallback = Callable[[List[PortResult]], None]


class ScanFailedError(RuntimeError):
    """The scan could not run to completion. No partial results are kept."""


class PortScanner:
    """
    Probes a contiguous port range in fixed-size batches.

    Every port in a batch is probed concurrently and the whole batch must
    finish before the next one starts, so at most `concurrency` probes are
    in flight and a scan of N filtered ports takes roughly
    ceil(N / concurrency) * timeout.
    """

    def __init__(self, host: str, start_port: int, end_port: int,
                 timeout_ms: int = 2000, concurrency: int = 50,
                 probe: ProbeFunc = probe_port,
                 on_batch: Optional[BatchCallback] = None):
        self.host = host
        self.start_port = start_port
        self.end_port = end_port
        self.timeout_ms = timeout_ms
        self.concurrency = concurrency
        self.probe = probe
        self.on_batch = on_batch

    @property
    def port_count(self) -> int:
        return self.end_port - self.start_port + 1

    async def _scan_batch(self, batch: List[int]) -> List[PortResult]:
        # gather() returns results in argument order, not completion order
        return list(await asyncio.gather(
            *(self.probe(self.host, port, self.timeout_ms) for port in batch)
        ))

    async def run(self) -> ScanOutcome:
        start_time = time.perf_counter()

        ports = list(range(self.start_port, self.end_port + 1))
        results: List[PortResult] = []

        try:
            for index, batch in enumerate(batched(ports, self.concurrency)):
                logger.debug("Batch %d: ports %d-%d", index, batch[0], batch[-1])
                batch_results = await self._scan_batch(batch)
                results.extend(batch_results)
                if self.on_batch:
                    self.on_batch(batch_results)
        except Exception as e:
            logger.error("Scan of %s failed: %s", self.host, e)
            raise ScanFailedError(str(e) or type(e).__name__) from e

        total_time_ms = int((time.perf_counter() - start_time) * 1000)

        outcome = ScanOutcome.from_results(
            self.host, self.start_port, self.end_port, total_time_ms, results
        )
        logger.debug(
            "%s: %d ports in %dms, %d open",
            self.host, outcome.total_ports_scanned,
            outcome.total_time_ms, outcome.open_ports,
        )
        return outcome


async def scan_range(host: str, start_port: int, end_port: int,
                     timeout_ms: int = 2000, concurrency: int = 50,
                     probe: ProbeFunc = probe_port) -> ScanOutcome:
    """Convenience wrapper around PortScanner(...).run()."""
    scanner = PortScanner(host, start_port, end_port, timeout_ms, concurrency, probe=probe)
    return await scanner.run()
