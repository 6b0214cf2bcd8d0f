from typing import Protocol

from domain.models import DispatchRequest


class WorkflowContentSource(Protocol):
    def get_workflow_path(self, repository: str, workflow_id: str) -> str:
        """Return the repository path of the workflow definition file."""

    def get_file_text(self, repository: str, path: str) -> str:
        """Return the decoded text of a repository file."""

    def get_branches(self, repository: str) -> list[dict[str, object]]:
        """Return the repository branches, each with at least a ``name``."""


class DispatchInvoker(Protocol):
    def dispatch_workflow(self, request: DispatchRequest) -> None:
        """Send the dispatch request; raise on any non-success response."""


class DispatchGateway(WorkflowContentSource, DispatchInvoker, Protocol):
    """Single remote client serving both the content fetch and the dispatch."""
