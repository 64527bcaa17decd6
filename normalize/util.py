"""
Normalization helpers.
Map raw Jira issue dicts into normalize.models.Story. Every function here is pure and total:
missing optional fields become defaults, None, or empty tuples.
"""
from typing import Dict, Any, Optional, List

from normalize.accessor import dig, first_present, map_list
from normalize.models import Story, Status, Priority, Person, IssueLink

NO_DESCRIPTION = 'No description available'


def _adf_first_text(description: Any) -> Optional[str]:
    """First text run of the first block of an Atlassian Document Format body."""
    return dig(description, 'content', 0, 'content', 0, 'text')


def _plain_description(description: Any) -> Optional[str]:
    """Legacy (API v2 style) descriptions are plain strings."""
    return description if isinstance(description, str) else None


DESCRIPTION_EXTRACTORS = [_adf_first_text, _plain_description]


def extract_description(description: Any) -> str:
    return first_present(DESCRIPTION_EXTRACTORS, description, default=NO_DESCRIPTION)


def normalize_person(raw: Any) -> Optional[Person]:
    """Return a Person when Jira sent a user object, otherwise None."""
    if not isinstance(raw, dict):
        return None
    return Person(
        display_name=raw.get('displayName'),
        email_address=raw.get('emailAddress'),
        account_id=raw.get('accountId'),
    )


def normalize_priority(raw: Any) -> Priority:
    name = dig(raw, 'name')
    return Priority(name=name or 'None', id=dig(raw, 'id') or None)


def normalize_issue_link(raw: Dict[str, Any]) -> IssueLink:
    """Project a Jira issue link.

    Direction is the link type's inward label when the other issue sits on the inward side,
    otherwise its outward label.
    """
    inward_key = dig(raw, 'inwardIssue', 'key')
    if dig(raw, 'inwardIssue') is not None:
        direction = dig(raw, 'type', 'inward')
    else:
        direction = dig(raw, 'type', 'outward')
    return IssueLink(
        type=dig(raw, 'type', 'name'),
        direction=direction,
        linked_issue=inward_key or dig(raw, 'outwardIssue', 'key'),
    )


def _names(value: Any) -> List[str]:
    """Names of components or versions; entries without a name are skipped."""
    return [name for name in map_list(value, lambda item: dig(item, 'name')) if isinstance(name, str) and name]


class StoryNormalizer:
    """Turn raw Jira issues into Story records.

    Holds only run configuration (the browse base URL and story point field), never per-record state.
    """

    def __init__(self, base_url: str, story_points_field: str = 'customfield_10016'):
        self.base_url = base_url.rstrip('/')
        self.story_points_field = story_points_field

    def browse_url(self, key: str) -> str:
        return f"{self.base_url}/browse/{key}"

    def normalize(self, raw: Dict[str, Any]) -> Story:
        fields = raw.get('fields') or {}
        key = raw['key']
        labels = fields.get('labels')
        return Story(
            key=key,
            summary=fields['summary'],
            description=extract_description(fields.get('description')),
            status=Status(
                name=dig(fields, 'status', 'name'),
                category=dig(fields, 'status', 'statusCategory', 'name'),
            ),
            priority=normalize_priority(fields.get('priority')),
            assignee=normalize_person(fields.get('assignee')),
            reporter=normalize_person(fields.get('reporter')),
            created=fields.get('created'),
            updated=fields.get('updated'),
            components=tuple(_names(fields.get('components'))),
            labels=tuple(labels) if isinstance(labels, list) else (),
            fix_versions=tuple(_names(fields.get('fixVersions'))),
            story_points=fields.get(self.story_points_field),
            issue_links=tuple(map_list(fields.get('issuelinks'), normalize_issue_link)),
            url=self.browse_url(key),
        )

    def normalize_all(self, raws: List[Dict[str, Any]]) -> List[Story]:
        return [self.normalize(raw) for raw in raws]


def normalize_story(raw: Dict[str, Any], base_url: str, story_points_field: str = 'customfield_10016') -> Dict[str, Any]:
    """Convenience wrapper returning the output dict for a single raw issue."""
    return StoryNormalizer(base_url, story_points_field).normalize(raw).to_dict()
