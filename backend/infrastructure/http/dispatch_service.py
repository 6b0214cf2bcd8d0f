import logging

from application.dispatch_flow import open_dispatch_session, run_dispatch_flow
from domain.dispatch import DispatchValidationError
from infrastructure.github.errors import RemoteError
from infrastructure.github.github_client import GitHubClient
from infrastructure.github.workflow_gateway import build_dispatch_dependencies
from infrastructure.http.errors import DispatchServiceError
from infrastructure.http.mappers import (
    to_commit_schema,
    to_dispatch_form_response,
    to_dispatch_workflow_response,
    to_workflow_run_schema,
    to_workflow_run_summary,
)
from infrastructure.http.schemas import (
    BranchSchema,
    CommitSchema,
    DispatchFormResponse,
    DispatchWorkflowRequest,
    DispatchWorkflowResponse,
    RepositorySchema,
    WorkflowRunSchema,
    WorkflowSchema,
)
from infrastructure.http.workflow_factory import build_dispatch_flow_config_from_request
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def list_repositories(client: GitHubClient) -> list[RepositorySchema]:
    return [RepositorySchema.model_validate(repo) for repo in client.list_repositories()]


def list_workflows(client: GitHubClient, repository: str) -> list[WorkflowSchema]:
    return [WorkflowSchema.model_validate(workflow) for workflow in client.list_workflows(repository)]


def list_workflow_runs(client: GitHubClient, repository: str) -> list[WorkflowRunSchema]:
    return [
        to_workflow_run_schema(to_workflow_run_summary(run_data))
        for run_data in client.list_workflow_runs(repository)
    ]


def list_branches(client: GitHubClient, repository: str) -> list[BranchSchema]:
    return [BranchSchema(name=branch["name"]) for branch in client.get_branches(repository)]


def list_commits(client: GitHubClient, repository: str) -> list[CommitSchema]:
    return [to_commit_schema(commit_data) for commit_data in client.get_commits(repository)]


def open_dispatch_form(
    client: GitHubClient,
    repository: str,
    workflow_id: str,
) -> DispatchFormResponse:
    dependencies = build_dispatch_dependencies(client)
    session = open_dispatch_session(repository, workflow_id, dependencies)
    return to_dispatch_form_response(session)


def dispatch_workflow(
    client: GitHubClient,
    repository: str,
    workflow_id: str,
    payload: DispatchWorkflowRequest,
) -> DispatchWorkflowResponse:
    flow_config = build_dispatch_flow_config_from_request(repository, workflow_id, payload)
    flow_dependencies = build_dispatch_dependencies(client)
    try:
        result = run_dispatch_flow(flow_config, flow_dependencies)
    except (DispatchValidationError, RemoteError):
        raise
    except Exception as error:
        log_event(logger, logging.ERROR, "http.dispatch.execution_failed", error=str(error))
        raise DispatchServiceError("workflow dispatch failed") from error

    return to_dispatch_workflow_response(result)
