"""
Jira search client used by the export pipeline.
Issues a single bounded search request and returns the raw issue dicts, most recent first.
"""

from typing import List, Dict, Any, Optional
import requests

from config import Settings
from errors import RemoteQueryError

SEARCH_PATH = "/search/jql"

# Projection requested from Jira. Order and content define the shape the normalizer can rely on.
STORY_FIELDS = [
    "key",
    "summary",
    "description",
    "status",
    "priority",
    "assignee",
    "reporter",
    "created",
    "updated",
    "components",
    "labels",
    "fixVersions",
    "customfield_10016",
    "issuelinks",
]


def quote_jql(value: str) -> str:
    """Quote a JQL string literal; multi-word values such as "User Story" are invalid unquoted."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_jql(project_key: str, issue_type: str = "Story") -> str:
    """Return the JQL selecting issues of `issue_type` in `project_key`, newest first."""
    return f"project = {quote_jql(project_key)} AND issuetype = {quote_jql(issue_type)} ORDER BY created DESC"


def field_projection(story_points_field: str = "customfield_10016") -> List[str]:
    """Return the requested field list, with the story point field swapped in if it differs per site."""
    return [story_points_field if f == "customfield_10016" else f for f in STORY_FIELDS]


def _error_payload(resp) -> Any:
    try:
        return resp.json()
    except ValueError:
        return getattr(resp, 'text', None) or None


class JiraClient:
    """Minimal Jira Cloud client for the story search.

    Authenticates with basic auth (account email + API token). No retries and no caching:
    one call, one page, errors propagate as RemoteQueryError.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.base_url = settings.api_url
        self.auth = (settings.email, settings.api_token)
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self.last_total: Optional[int] = None

    def build_params(self, project_key: str, max_results: int) -> Dict[str, Any]:
        return {
            "jql": build_jql(project_key, self.settings.issue_type),
            "maxResults": max_results,
            "fields": ",".join(field_projection(self.settings.story_points_field)),
        }

    def fetch(self, project_key: str, max_results: int = 100) -> List[Dict[str, Any]]:
        """Fetch up to `max_results` issues for the project in a single request.

        Parameters:
            project_key (str): Jira project key to filter on.
            max_results (int): Upper bound on returned issues. Results beyond it are not paged in.

        Returns:
            List[Dict[str, Any]]: raw Jira issue dicts, ordered by creation time descending.

        Raises:
            RemoteQueryError: on network failure or a non-2xx response.
        """
        url = f"{self.base_url}{SEARCH_PATH}"
        params = self.build_params(project_key, max_results)
        try:
            resp = requests.get(url, headers=self.headers, params=params, auth=self.auth, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            raise RemoteQueryError(f"Error fetching issues from {url}: {exc}", payload=str(exc)) from exc

        status = resp.status_code
        if not 200 <= status < 300:
            payload = _error_payload(resp) or getattr(resp, 'reason', None) or f"HTTP {status}"
            raise RemoteQueryError(f"Error fetching issues (HTTP {status}): {payload}", status=status, payload=payload)

        try:
            data = resp.json()
        except ValueError as exc:
            raise RemoteQueryError(f"Jira returned a non-JSON body: {exc}", status=status, payload=getattr(resp, 'text', None)) from exc

        issues = data.get('issues') or []
        total = data.get('total')
        self.last_total = total if isinstance(total, int) else len(issues)
        return issues
