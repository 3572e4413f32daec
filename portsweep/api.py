"""
Transport-neutral scan endpoint.

Takes a decoded request body, returns (status_code, response_body). An HTTP
layer only needs to decode JSON, call handle_scan and encode the result.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from .config import ScanLimits, ScanRequest, ScanRequestError, parse_request
from .scanner import PortScanner, ScanFailedError
from .utils import is_private_host

logger = logging.getLogger(__name__)


def build_scanner(request: ScanRequest, **kwargs) -> PortScanner:
    return PortScanner(
        request.host,
        request.start_port,
        request.end_port,
        timeout_ms=request.timeout,
        concurrency=request.concurrency,
        **kwargs,
    )


async def handle_scan(payload: Any, limits: Optional[ScanLimits] = None,
                      **scanner_kwargs) -> Tuple[int, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return 400, {"error": "Request body must be a JSON object"}

    try:
        request = parse_request(payload, limits)
    except ScanRequestError as e:
        logger.warning("Rejected scan request: %s", e)
        return 400, {"error": str(e)}

    logger.info(
        "Scan request: %s:%d-%d (private: %s)",
        request.host, request.start_port, request.end_port,
        is_private_host(request.host),
    )

    try:
        outcome = await build_scanner(request, **scanner_kwargs).run()
    except ScanFailedError as e:
        logger.error("Scan error: %s", e)
        return 500, {"error": "Scan failed", "details": str(e)}

    logger.info(
        "Scan completed in %dms. Found %d open ports",
        outcome.total_time_ms, outcome.open_ports,
    )
    return 200, outcome.to_dict()
