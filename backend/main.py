import json
import logging
import os
import uuid

from dotenv import load_dotenv

from application.dispatch_flow import DispatchFlowConfig, run_dispatch_flow
from infrastructure.github.github_client import GitHubClient
from infrastructure.github.workflow_gateway import build_dispatch_dependencies
from infrastructure.observability.context import request_id_scope
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
)


load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)


def required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def parse_inputs_env(raw_inputs: str | None) -> dict[str, str]:
    if not raw_inputs:
        return {}
    parsed_inputs = json.loads(raw_inputs)
    if not isinstance(parsed_inputs, dict):
        raise RuntimeError("WORKFLOW_INPUTS must be a JSON object of input name to value")
    return {str(name): str(value) for name, value in parsed_inputs.items()}


def main() -> None:
    with request_id_scope(f"cli-{uuid.uuid4().hex[:8]}"):
        log_event(logger, logging.INFO, "cli.dispatch.start")
        github_client = GitHubClient.from_env()
        register_sensitive_values(github_client.token)

        flow_config = DispatchFlowConfig(
            repository=f"{required_env('GH_OWNER')}/{required_env('GH_REPO')}",
            workflow_id=required_env("WORKFLOW_ID"),
            selected_ref=os.getenv("WORKFLOW_REF") or None,
            inputs=parse_inputs_env(os.getenv("WORKFLOW_INPUTS")),
        )
        try:
            result = run_dispatch_flow(flow_config, build_dispatch_dependencies(github_client))
        except Exception as error:
            log_event(logger, logging.ERROR, "cli.dispatch.failed", error=str(error))
            raise

        log_event(
            logger,
            logging.INFO,
            "cli.dispatch.end",
            status=result.status,
            message=result.message,
        )


if __name__ == "__main__":
    main()
