"""
DevOps Pipeline App - Process Statistics

Point-in-time readings of process uptime and memory usage.
"""

import gc
import os
import resource
import sys
import time

START_TIME = time.monotonic()

# ru_maxrss is reported in bytes on macOS and in kilobytes elsewhere
_MAXRSS_UNIT = 1 if sys.platform == "darwin" else 1024


def uptime() -> float:
    """Seconds elapsed since the process started serving."""
    return time.monotonic() - START_TIME


def peak_rss() -> int:
    """Peak resident set size in bytes."""
    return resource.getrusage(resource.RUSAGE_SELF).ru_maxrss * _MAXRSS_UNIT


def current_rss() -> int:
    """
    Current resident set size in bytes.

    Reads /proc/self/statm where it exists; falls back to the peak
    value on platforms without procfs.
    """
    try:
        with open("/proc/self/statm") as f:
            resident_pages = int(f.read().split()[1])
    except OSError:
        return peak_rss()
    return resident_pages * os.sysconf("SC_PAGE_SIZE")


def memory_snapshot() -> dict:
    """
    Return a snapshot of current memory usage as a dict.
    """
    return {
        "rss": current_rss(),
        "peak_rss": peak_rss(),
        "gc_objects": len(gc.get_objects()),
    }
