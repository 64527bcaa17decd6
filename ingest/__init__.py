"""
Ingest package: Jira search client.
"""

from .jira import JiraClient, build_jql

__all__ = ["JiraClient", "build_jql"]
