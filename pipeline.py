"""
Export pipeline: fetch -> normalize -> write.
Stages run strictly in order; the first failure aborts the run and nothing is written.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config import Settings
from ingest.jira import JiraClient
from normalize.models import Story
from normalize.util import StoryNormalizer
from report.console import ProgressObserver
from storage.document import DocumentWriter


def count_by_status(stories: List[Story]) -> Dict[str, int]:
    """Histogram of status names, in first-seen order."""
    counts: Dict[str, int] = {}
    for story in stories:
        name = story.status.name
        counts[name] = counts.get(name, 0) + 1
    return counts


@dataclass
class RunSummary:
    project_key: str
    total: int
    path: str
    status_counts: Dict[str, int] = field(default_factory=dict)
    remote_total: Optional[int] = None

    @property
    def truncated(self) -> bool:
        """True when Jira reported more matching stories than the single page returned."""
        return self.remote_total is not None and self.remote_total > self.total


class ExportPipeline:
    """Sequence the three stages for one project.

    Components default to the real implementations built from `settings`; tests pass stand-ins.
    """

    def __init__(
        self,
        settings: Settings,
        client: JiraClient = None,
        normalizer: StoryNormalizer = None,
        writer: DocumentWriter = None,
        observer: ProgressObserver = None,
    ):
        self.settings = settings
        self.client = client or JiraClient(settings)
        self.normalizer = normalizer or StoryNormalizer(settings.base_url, settings.story_points_field)
        self.writer = writer or DocumentWriter(settings.output_dir, settings.project_key, settings.base_url)
        self.observer = observer or ProgressObserver()

    def run(self) -> RunSummary:
        """Run the export. Exceptions from any stage propagate after the observer is told."""
        settings = self.settings
        self.observer.run_started(settings)
        try:
            self.observer.fetch_started(settings.project_key)
            raw_issues = self.client.fetch(settings.project_key, settings.max_results)
            remote_total = getattr(self.client, 'last_total', None)
            if remote_total is None:
                remote_total = len(raw_issues)
            self.observer.fetch_done(len(raw_issues), remote_total)

            stories = self.normalizer.normalize_all(raw_issues)
            self.observer.normalize_done(len(stories))

            path = self.writer.write(stories, settings.filename)
            self.observer.write_done(path)
        except Exception as exc:
            self.observer.run_failed(exc)
            raise

        summary = RunSummary(
            project_key=settings.project_key,
            total=len(stories),
            path=path,
            status_counts=count_by_status(stories),
            remote_total=remote_total,
        )
        self.observer.run_succeeded(summary)
        return summary
