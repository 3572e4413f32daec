import argparse
import asyncio
import json
import sys

from .api import build_scanner
from .config import parse_request
from .output import save_results
from .scanner import ScanFailedError
from .ui import ScannerUI, configure_logging
from .utils import is_private_host, parse_port_range


def build_parser():
    parser = argparse.ArgumentParser(description="Portsweep - batched TCP connect port scanner")
    parser.add_argument("-t", "--target", default="localhost", help="Target IP or Hostname (Default: localhost)")
    parser.add_argument("-p", "--ports", default="1-1000", help="Port range to scan, e.g. 1-1000 or 443 (Default: 1-1000)")
    parser.add_argument("--timeout", type=int, default=2000, help="Per-port timeout in ms (Default: 2000)")
    parser.add_argument("-c", "--concurrency", type=int, default=50, help="Ports probed per batch (Default: 50)")
    parser.add_argument("-o", "--output", help="Save results to a .json or .csv file")
    parser.add_argument("--json", action="store_true", help="Print the JSON response instead of a table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose)
    ui = ScannerUI()

    try:
        start_port, end_port = parse_port_range(args.ports)
        request = parse_request({
            "host": args.target,
            "start_port": start_port,
            "end_port": end_port,
            "timeout": args.timeout,
            "concurrency": args.concurrency,
        })
    except ValueError as e:
        ui.show_message(f"Invalid request: {e}")
        return 2

    try:
        if args.json:
            outcome = asyncio.run(build_scanner(request).run())
            print(json.dumps(outcome.to_dict(), indent=2))
        else:
            ui.display_welcome()
            ui.display_start(request.host, request.start_port, request.end_port,
                             is_private_host(request.host))
            with ui.create_progress() as progress:
                task_id = progress.add_task(f"[cyan]Scanning {request.port_count} ports...",
                                            total=request.port_count)
                scanner = build_scanner(
                    request, on_batch=lambda batch: progress.advance(task_id, len(batch))
                )
                outcome = asyncio.run(scanner.run())
            ui.display_results(outcome)

    except KeyboardInterrupt:
        ui.show_message("\nScan interrupted by user.", style="yellow")
        return 130
    except ScanFailedError as e:
        ui.show_message(f"Scan failed: {e}")
        return 1

    if args.output:
        try:
            filename = save_results(outcome, args.output)
        except OSError as e:
            ui.show_message(f"Could not save results: {e}")
            return 1
        if not args.json:
            ui.show_saved(filename)

    return 0


if __name__ == "__main__":
    sys.exit(main())
