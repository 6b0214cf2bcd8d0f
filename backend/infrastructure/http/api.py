import logging
import os
import time
import uuid
from collections.abc import Awaitable, Callable

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import Response

from infrastructure.github.github_client import GitHubClient
from infrastructure.http import dispatch_service
from infrastructure.http.errors import to_http_exception
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
from infrastructure.http.workflow_factory import get_github_client
from infrastructure.observability.context import reset_request_id, set_request_id
from infrastructure.observability.logging_utils import configure_logging, log_event


load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)
app = FastAPI(title="Workflow Dispatch API")


def _resolve_cors_origins() -> list[str]:
    raw_origins = os.getenv(
        "CORS_ALLOW_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )
    return [origin.strip() for origin in raw_origins.split(",") if origin.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_resolve_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


@app.middleware("http")
async def request_observability_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    token = set_request_id(request_id)

    method = request.method
    path = request.url.path
    start_time = time.perf_counter()
    log_event(logger, logging.INFO, "http.request.start", method=method, path=path)

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_event(
            logger,
            logging.INFO,
            "http.request.end",
            method=method,
            path=path,
            status=status_code,
            duration_ms=f"{duration_ms:.2f}",
        )
        reset_request_id(token)


def _call_service(endpoint: str, operation: Callable[[], object]):
    try:
        return operation()
    except Exception as error:
        log_event(logger, logging.ERROR, f"http.{endpoint}.endpoint_failed", error=str(error))
        raise to_http_exception(error)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/repos", response_model=list[RepositorySchema])
def list_repositories(client: GitHubClient = Depends(get_github_client)) -> list[RepositorySchema]:
    return _call_service("repos", lambda: dispatch_service.list_repositories(client))


@app.get("/repos/{owner}/{repo}/workflows", response_model=list[WorkflowSchema])
def list_workflows(
    owner: str,
    repo: str,
    client: GitHubClient = Depends(get_github_client),
) -> list[WorkflowSchema]:
    return _call_service(
        "workflows",
        lambda: dispatch_service.list_workflows(client, f"{owner}/{repo}"),
    )


@app.get("/repos/{owner}/{repo}/runs", response_model=list[WorkflowRunSchema])
def list_workflow_runs(
    owner: str,
    repo: str,
    client: GitHubClient = Depends(get_github_client),
) -> list[WorkflowRunSchema]:
    return _call_service(
        "runs",
        lambda: dispatch_service.list_workflow_runs(client, f"{owner}/{repo}"),
    )


@app.get("/repos/{owner}/{repo}/branches", response_model=list[BranchSchema])
def list_branches(
    owner: str,
    repo: str,
    client: GitHubClient = Depends(get_github_client),
) -> list[BranchSchema]:
    return _call_service(
        "branches",
        lambda: dispatch_service.list_branches(client, f"{owner}/{repo}"),
    )


@app.get("/repos/{owner}/{repo}/commits", response_model=list[CommitSchema])
def list_commits(
    owner: str,
    repo: str,
    client: GitHubClient = Depends(get_github_client),
) -> list[CommitSchema]:
    return _call_service(
        "commits",
        lambda: dispatch_service.list_commits(client, f"{owner}/{repo}"),
    )


@app.get(
    "/repos/{owner}/{repo}/workflows/{workflow_id}/dispatch-form",
    response_model=DispatchFormResponse,
)
def open_dispatch_form(
    owner: str,
    repo: str,
    workflow_id: str,
    client: GitHubClient = Depends(get_github_client),
) -> DispatchFormResponse:
    return _call_service(
        "dispatch_form",
        lambda: dispatch_service.open_dispatch_form(client, f"{owner}/{repo}", workflow_id),
    )


@app.post(
    "/repos/{owner}/{repo}/workflows/{workflow_id}/dispatches",
    response_model=DispatchWorkflowResponse,
    status_code=status.HTTP_200_OK,
)
def dispatch_workflow(
    owner: str,
    repo: str,
    workflow_id: str,
    payload: DispatchWorkflowRequest,
    client: GitHubClient = Depends(get_github_client),
) -> DispatchWorkflowResponse:
    return _call_service(
        "dispatch",
        lambda: dispatch_service.dispatch_workflow(client, f"{owner}/{repo}", workflow_id, payload),
    )
