from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class PortStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    FILTERED = "filtered"


@dataclass(frozen=True)
class PortResult:
    """Outcome of a single TCP probe"""
    port: int
    status: PortStatus
    service: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status is PortStatus.OPEN

    def to_dict(self) -> Dict[str, Any]:
        data = {"port": self.port, "status": self.status.value}
        if self.service is not None:
            data["service"] = self.service
        return data


@dataclass(frozen=True)
class ScanOutcome:
    """
    Aggregate result of scanning a port range.
    Counters are derived from `results`, which is sorted by port.
    """
    host: str
    start_port: int
    end_port: int
    total_time_ms: int
    results: Tuple[PortResult, ...] = field(default_factory=tuple)

    @classmethod
    def from_results(cls, host: str, start_port: int, end_port: int,
                     total_time_ms: int, results: List[PortResult]) -> "ScanOutcome":
        return cls(
            host=host,
            start_port=start_port,
            end_port=end_port,
            total_time_ms=total_time_ms,
            results=tuple(results),
        )

    @property
    def total_ports_scanned(self) -> int:
        return len(self.results)

    @property
    def open_results(self) -> List[PortResult]:
        return [r for r in self.results if r.is_open]

    @property
    def open_ports(self) -> int:
        return len(self.open_results)

    @property
    def closed_count(self) -> int:
        return sum(1 for r in self.results if r.status is PortStatus.CLOSED)

    @property
    def filtered_count(self) -> int:
        return sum(1 for r in self.results if r.status is PortStatus.FILTERED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "host": self.host,
            "start_port": self.start_port,
            "end_port": self.end_port,
            "total_time_ms": self.total_time_ms,
            "total_ports_scanned": self.total_ports_scanned,
            "open_ports": self.open_ports,
            "results": [r.to_dict() for r in self.results],
        }
