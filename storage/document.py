"""
Export document writer.
Wraps normalized stories with run metadata and writes them as pretty-printed JSON.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from errors import PersistenceError
from normalize.models import Story


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class DocumentWriter:
    """Write the export document to `<output_dir>/<filename>`."""

    def __init__(self, output_dir: str, project_key: str, base_url: str, clock: Callable[[], datetime] = None):
        self.output_dir = output_dir
        self.project_key = project_key
        self.base_url = base_url
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def build_document(self, stories: List[Story]) -> Dict[str, Any]:
        return {
            'metadata': {
                'projectKey': self.project_key,
                'totalStories': len(stories),
                'fetchedAt': utc_timestamp(self.clock()),
                'jiraBaseUrl': self.base_url,
            },
            'userStories': [story.to_dict() for story in stories],
        }

    def write(self, stories: List[Story], filename: str) -> str:
        """Write the document and return its path.

        The whole document is serialized before the file is opened, so a successful write
        always contains the full document.

        Raises:
            PersistenceError: if the directory cannot be created or the file cannot be written.
        """
        path = os.path.join(self.output_dir, filename)
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Error creating output directory {self.output_dir}: {exc}", path=path) from exc

        content = json.dumps(self.build_document(stories), indent=2, ensure_ascii=False)
        try:
            with open(path, 'w', encoding='utf-8') as fh:
                fh.write(content)
        except OSError as exc:
            raise PersistenceError(f"Error saving to JSON {path}: {exc}", path=path) from exc
        return path
