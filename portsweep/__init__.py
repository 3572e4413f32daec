"""Batched asynchronous TCP connect port scanner."""

__version__ = "0.1.0"

from .models import PortResult, PortStatus, ScanOutcome
from .prober import probe_port
from .scanner import PortScanner, ScanFailedError, scan_range
from .services import lookup
