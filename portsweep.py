#!/usr/bin/env python3
"""
Portsweep - batched TCP connect port scanner

Probes a port range with bounded concurrency and classifies every port as
open, closed or filtered.

Usage:
    python portsweep.py -t example.com -p 1-1000
    python portsweep.py -t 10.0.0.5 -p 20-443 --timeout 500 -c 100 -o scan.csv
"""
import sys

from portsweep.main import main

if __name__ == "__main__":
    sys.exit(main())
