"""Rendering of Jira records into the text returned by tools."""

from collections.abc import Sequence
from dataclasses import dataclass

from .models import UNKNOWN, ApiModel

NO_ISSUES_FOUND = "No issues found."
NO_PROJECTS_FOUND = "No projects found."


@dataclass(frozen=True)
class Projection:
    """How to render one kind of record: a line template and the empty-list text."""

    line_template: str
    empty_text: str

    def render_line(self, record: ApiModel) -> str:
        values = {
            name: UNKNOWN if value is None else value
            for name, value in record.to_simplified_dict().items()
        }
        return self.line_template.format(**values)


ISSUE_PROJECTION = Projection("Key: {key}, Summary: {summary}", NO_ISSUES_FOUND)
ISSUE_STATUS_PROJECTION = Projection(
    "Key: {key}, Summary: {summary}, Status: {status}", NO_ISSUES_FOUND
)
PROJECT_PROJECTION = Projection("Key: {key}, Name: {name}", NO_PROJECTS_FOUND)


def project(records: Sequence[ApiModel] | None, projection: Projection) -> str:
    """Render records one per line, in input order.

    Args:
        records: Records to render
        projection: Line template and empty-list text

    Returns:
        Newline-joined lines, or ``projection.empty_text`` for no records
    """
    if not records:
        return projection.empty_text
    return "\n".join(projection.render_line(record) for record in records)
