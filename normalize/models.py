"""
Normalized story model written to the export document.
Instances are immutable; `to_dict` yields the camelCase output schema.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Status:
    name: str
    category: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "category": self.category}


@dataclass(frozen=True)
class Priority:
    """Issue priority; defaults to name "None" with no id when Jira sends none."""

    name: str = "None"
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "id": self.id}


@dataclass(frozen=True)
class Person:
    """Projection of a Jira user (assignee or reporter)."""

    display_name: Optional[str]
    email_address: Optional[str]
    account_id: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "displayName": self.display_name,
            "emailAddress": self.email_address,
            "accountId": self.account_id,
        }


@dataclass(frozen=True)
class IssueLink:
    type: Optional[str]
    direction: Optional[str]
    linked_issue: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "direction": self.direction, "linkedIssue": self.linked_issue}


@dataclass(frozen=True)
class Story:
    """
    Normalized story. Every optional Jira field is either a concrete default,
    None, or an empty tuple; there are no missing keys.
    """

    key: str
    summary: str
    description: str
    status: Status
    created: str
    updated: str
    url: str
    priority: Priority = field(default_factory=Priority)
    assignee: Optional[Person] = None
    reporter: Optional[Person] = None
    components: Tuple[str, ...] = ()
    labels: Tuple[str, ...] = ()
    fix_versions: Tuple[str, ...] = ()
    story_points: Optional[Number] = None
    issue_links: Tuple[IssueLink, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "summary": self.summary,
            "description": self.description,
            "status": self.status.to_dict(),
            "priority": self.priority.to_dict(),
            "assignee": self.assignee.to_dict() if self.assignee else None,
            "reporter": self.reporter.to_dict() if self.reporter else None,
            "created": self.created,
            "updated": self.updated,
            "components": list(self.components),
            "labels": list(self.labels),
            "fixVersions": list(self.fix_versions),
            "storyPoints": self.story_points,
            "issueLinks": [link.to_dict() for link in self.issue_links],
            "url": self.url,
        }
