"""
Report package: progress and summary output for export runs.
"""

from .console import ConsoleReporter, ProgressObserver, render_summary

__all__ = ["ConsoleReporter", "ProgressObserver", "render_summary"]
