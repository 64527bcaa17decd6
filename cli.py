"""
CLI entry point for jira-story-export. Wires the pipeline: fetch -> normalize -> write.
"""

import argparse
import sys

from config import load_settings
from errors import ConfigurationError, ExportError
from pipeline import ExportPipeline
from report.console import ConsoleReporter, ProgressObserver

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export Jira user stories to a JSON document")
    parser.add_argument("--project", type=str, default=None, help="Jira project key (overrides JIRA_PROJECT_KEY env)")
    parser.add_argument("--issue-type", type=str, default=None, help="Issue type to export (default: Story)")
    parser.add_argument("--max-results", type=int, default=None, help="Maximum stories to fetch in the single request (default: 100)")
    parser.add_argument("--out-dir", type=str, default=None, help="Directory for the output file (default: data)")
    parser.add_argument("--filename", type=str, default=None, help="Output file name (default: jira-user-story.json)")
    parser.add_argument("--base-url", type=str, default=None, help="Jira site URL, e.g. https://example.atlassian.net (overrides JIRA_BASE_URL env)")
    parser.add_argument("--email", type=str, default=None, help="Jira account email (overrides JIRA_EMAIL env)")
    parser.add_argument("--api-token", type=str, default=None, help="Jira API token (overrides JIRA_API_TOKEN env)")
    parser.add_argument("--story-points-field", type=str, default=None, help="Custom field id holding story points (default: customfield_10016)")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: none)")
    parser.add_argument("--env-file", type=str, default=None, help="Path to a .env file to load before reading the environment")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output; errors are still printed")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            env_file=args.env_file,
            base_url=args.base_url,
            email=args.email,
            api_token=args.api_token,
            project_key=args.project,
            issue_type=args.issue_type,
            max_results=args.max_results,
            output_dir=args.out_dir,
            filename=args.filename,
            story_points_field=args.story_points_field,
            timeout=args.timeout,
        )
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    observer = ConsoleReporter()
    if args.quiet:
        observer = ProgressObserver()

    try:
        ExportPipeline(settings, observer=observer).run()
    except ExportError as exc:
        if args.quiet:
            print(f"Process failed: {exc}", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
