import csv
import json
import time
from pathlib import Path
from typing import Optional

from .models import ScanOutcome

FORMATS = ("json", "csv")


def default_filename(host: str, fmt: str) -> str:
    stamp = int(time.time() * 1000)
    return f"port-scan-{host}-{stamp}.{fmt}"


def format_for(path: str) -> str:
    """Picks the export format from the file extension (json unless .csv)."""
    return "csv" if Path(path).suffix.lower() == ".csv" else "json"


def save_results(outcome: ScanOutcome, path: Optional[str] = None, fmt: Optional[str] = None) -> str:
    if fmt is None:
        fmt = format_for(path) if path else "json"
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format: {fmt}")

    filename = path or default_filename(outcome.host, fmt)

    if fmt == "csv":
        with open(filename, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["Port", "Status", "Service"])
            for r in outcome.results:
                w.writerow([r.port, r.status.value, r.service or "Unknown"])
    else:
        with open(filename, "w", encoding="utf-8") as f:
            json.dump(outcome.to_dict(), f, indent=4)

    return filename
