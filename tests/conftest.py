import sys
import os

import pytest

# Add project root to sys.path so tests can import top-level modules like 'ingest', 'normalize', 'storage', etc.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import Settings  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    return Settings(
        base_url='https://example.atlassian.net',
        email='dev@example.com',
        api_token='token',
        project_key='PROJ',
        output_dir=str(tmp_path / 'data'),
    )


@pytest.fixture
def raw_issue():
    """A fully populated Jira search result entry."""
    return {
        'id': '10001',
        'key': 'PROJ-1',
        'fields': {
            'summary': 'Login page',
            'description': {
                'type': 'doc',
                'version': 1,
                'content': [{'type': 'paragraph', 'content': [{'type': 'text', 'text': 'As a user I want to log in'}]}],
            },
            'status': {'name': 'In Progress', 'statusCategory': {'name': 'In Progress'}},
            'priority': {'name': 'High', 'id': '2'},
            'assignee': {'displayName': 'Alice', 'emailAddress': 'alice@example.com', 'accountId': 'acc-1', 'active': True},
            'reporter': {'displayName': 'Bob', 'emailAddress': 'bob@example.com', 'accountId': 'acc-2'},
            'created': '2025-01-02T10:00:00.000+0000',
            'updated': '2025-01-03T10:00:00.000+0000',
            'components': [{'id': '1', 'name': 'Frontend'}, {'id': '2', 'name': 'Auth'}],
            'labels': ['mvp', 'web'],
            'fixVersions': [{'id': '5', 'name': '1.0'}],
            'customfield_10016': 5,
            'issuelinks': [
                {
                    'type': {'name': 'Blocks', 'inward': 'is blocked by', 'outward': 'blocks'},
                    'inwardIssue': {'key': 'PROJ-9'},
                },
                {
                    'type': {'name': 'Relates', 'inward': 'relates to', 'outward': 'relates to'},
                    'outwardIssue': {'key': 'PROJ-7'},
                },
            ],
        },
    }
