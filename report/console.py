"""
Console progress reporting for the export run.
The pipeline calls an observer at fixed checkpoints; ProgressObserver is silent, ConsoleReporter prints.
"""

import sys
from typing import TextIO


def render_summary(summary) -> str:
    """Render the end-of-run summary and the stories-by-status breakdown as plain text."""
    lines = [
        "Summary:",
        f"   Total user stories: {summary.total}",
        f"   File saved: {summary.path}",
        f"   Project: {summary.project_key}",
        "",
        "Stories by status:",
    ]
    for status, count in summary.status_counts.items():
        lines.append(f"   {status}: {count}")
    return "\n".join(lines)


class ProgressObserver:
    """No-op observer. Subclass and override the checkpoints you care about."""

    def run_started(self, settings):
        pass

    def fetch_started(self, project_key: str):
        pass

    def fetch_done(self, count: int, total: int):
        pass

    def normalize_done(self, count: int):
        pass

    def write_done(self, path: str):
        pass

    def run_succeeded(self, summary):
        pass

    def run_failed(self, error: Exception):
        pass


class ConsoleReporter(ProgressObserver):
    """Print progress to stdout and failures to stderr."""

    def __init__(self, stream: TextIO = None, err: TextIO = None):
        self.stream = stream or sys.stdout
        self.err = err or sys.stderr

    def _print(self, *parts):
        print(*parts, file=self.stream)

    def run_started(self, settings):
        self._print("Starting Jira user stories extraction...")
        self._print(f"Project: {settings.project_key}")
        self._print(f"Jira URL: {settings.base_url}")

    def fetch_started(self, project_key: str):
        self._print(f"Fetching user stories from project: {project_key}...")

    def fetch_done(self, count: int, total: int):
        self._print(f"Found {total} user stories")
        if total > count:
            self._print(f"Warning: only the first {count} of {total} stories were fetched (raise --max-results to get more)")

    def normalize_done(self, count: int):
        self._print(f"Transformed {count} user stories")

    def write_done(self, path: str):
        self._print(f"Saved user stories to: {path}")

    def run_succeeded(self, summary):
        self._print()
        self._print(render_summary(summary))
        self._print()
        self._print("Process completed successfully!")

    def run_failed(self, error: Exception):
        print(f"Process failed: {error}", file=self.err)
