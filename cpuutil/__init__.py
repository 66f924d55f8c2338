"""Report per-CPU and overall CPU utilization over time from /proc/stat."""

__version__ = "1.0.0"
__all__ = ["__version__"]