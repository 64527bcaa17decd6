"""
Run configuration for the Jira story export.
Settings come from CLI overrides first, then environment variables (optionally loaded from a .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from errors import ConfigurationError

DEFAULT_ISSUE_TYPE = "Story"
DEFAULT_MAX_RESULTS = 100
DEFAULT_OUTPUT_DIR = "data"
DEFAULT_FILENAME = "jira-user-story.json"
# Story points live in a custom field whose id varies per Jira site.
DEFAULT_STORY_POINTS_FIELD = "customfield_10016"

REQUIRED_ENV = {
    "base_url": "JIRA_BASE_URL",
    "email": "JIRA_EMAIL",
    "api_token": "JIRA_API_TOKEN",
    "project_key": "JIRA_PROJECT_KEY",
}

OPTIONAL_ENV = {
    "issue_type": "JIRA_ISSUE_TYPE",
    "max_results": "JIRA_MAX_RESULTS",
    "output_dir": "JIRA_OUTPUT_DIR",
    "filename": "JIRA_OUTPUT_FILE",
    "story_points_field": "JIRA_STORY_POINTS_FIELD",
}


@dataclass(frozen=True)
class Settings:
    """Immutable run configuration handed to each pipeline component."""

    base_url: str
    email: str
    api_token: str
    project_key: str
    issue_type: str = DEFAULT_ISSUE_TYPE
    max_results: int = DEFAULT_MAX_RESULTS
    output_dir: str = DEFAULT_OUTPUT_DIR
    filename: str = DEFAULT_FILENAME
    story_points_field: str = DEFAULT_STORY_POINTS_FIELD
    timeout: Optional[float] = None

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/rest/api/3"


def _parse_max_results(value) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"max_results must be an integer, got {value!r}") from None
    if parsed <= 0:
        raise ConfigurationError(f"max_results must be positive, got {parsed}")
    return parsed


def load_settings(env_file: Optional[str] = None, **overrides) -> Settings:
    """Resolve settings from overrides and environment variables.

    Parameters:
        env_file (Optional[str]): Path to a .env file. When omitted, python-dotenv searches for one.
        **overrides: Values from the CLI; a value of None or "" falls through to the environment.

    Returns:
        Settings: the resolved configuration.

    Raises:
        ConfigurationError: if any required value is missing or max_results is invalid.
    """
    load_dotenv(dotenv_path=env_file, override=False)

    def resolve(name: str, env_var: str) -> Optional[str]:
        value = overrides.get(name)
        if value is None or value == "":
            value = os.getenv(env_var)
        return None if value == "" else value

    values = {name: resolve(name, env_var) for name, env_var in REQUIRED_ENV.items()}
    missing = [env_var for name, env_var in REQUIRED_ENV.items() if not values[name]]
    if missing:
        raise ConfigurationError("Missing Jira configuration. Required variables: " + ", ".join(missing))

    optional = {}
    for name, env_var in OPTIONAL_ENV.items():
        value = resolve(name, env_var)
        if value is not None:
            optional[name] = value
    if "max_results" in optional:
        optional["max_results"] = _parse_max_results(optional["max_results"])

    timeout = overrides.get("timeout")
    return Settings(
        base_url=values["base_url"].rstrip("/"),
        email=values["email"],
        api_token=values["api_token"],
        project_key=values["project_key"],
        timeout=float(timeout) if timeout is not None else None,
        **optional,
    )
