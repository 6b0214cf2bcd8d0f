import logging

from application.dispatch_flow import DispatchFlowConfig
from infrastructure.github.github_client import GitHubClient
from infrastructure.http.schemas import DispatchWorkflowRequest
from infrastructure.observability.logging_utils import log_event, register_sensitive_values


logger = logging.getLogger(__name__)


def get_github_client() -> GitHubClient:
    client = GitHubClient.from_env()
    register_sensitive_values(client.token)
    log_event(logger, logging.DEBUG, "github.client.created", api_url=client.base)
    return client


def build_dispatch_flow_config_from_request(
    repository: str,
    workflow_id: str,
    payload: DispatchWorkflowRequest,
) -> DispatchFlowConfig:
    return DispatchFlowConfig(
        repository=repository,
        workflow_id=workflow_id,
        selected_ref=payload.ref,
        inputs=dict(payload.inputs),
    )
