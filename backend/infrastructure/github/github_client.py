import base64
import binascii
import logging
import os
from typing import Any
from urllib.parse import quote

import requests
from jsonschema import ValidationError, validate

from domain.models import DispatchRequest
from infrastructure.github.errors import RemoteError
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

_DEFAULT_API_URL = "https://api.github.com"
_DEFAULT_TIMEOUT_SECONDS = 30.0

_DISPATCH_BODY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["ref", "inputs"],
    "properties": {
        "ref": {"type": "string", "minLength": 1},
        "inputs": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}


class GitHubClient:
    def __init__(
        self,
        *,
        token: str,
        api_url: str = _DEFAULT_API_URL,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required to call the API")
        self.token = token
        self.base = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    @classmethod
    def from_env(cls) -> "GitHubClient":
        token = os.getenv("GITHUB_TOKEN")
        if not token:
            raise RuntimeError("Missing required environment variable: GITHUB_TOKEN")
        return cls(
            token=token,
            api_url=os.getenv("GITHUB_API_URL", _DEFAULT_API_URL),
            timeout_seconds=float(
                os.getenv("GITHUB_TIMEOUT_SECONDS", str(_DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    def _raise_for_status(self, response: requests.Response, event: str) -> None:
        if response.status_code < 400:
            return
        error_details = response.text or response.reason or ""
        try:
            error_payload = response.json()
            if isinstance(error_payload, dict) and error_payload.get("message"):
                error_details = str(error_payload["message"])
        except ValueError:
            pass
        safe_error_details = safe_message(error_details)
        log_event(
            logger,
            logging.ERROR,
            f"{event}_failed",
            status_code=response.status_code,
            details=safe_error_details,
        )
        raise RemoteError(response.status_code, safe_error_details)

    def _get(self, endpoint: str, event: str, **params: Any) -> Any:
        response = self.session.get(
            f"{self.base}{endpoint}",
            params=params or None,
            timeout=self.timeout_seconds,
        )
        self._raise_for_status(response, event)
        return response.json()

    def list_repositories(self) -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.repos.list")
        return self._get("/user/repos", "github.repos.list", sort="updated")

    def list_workflows(self, repository: str) -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.workflows.list", repository=repository)
        payload = self._get(f"/repos/{repository}/actions/workflows", "github.workflows.list")
        return payload.get("workflows", [])

    def list_workflow_runs(self, repository: str) -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.runs.list", repository=repository)
        payload = self._get(f"/repos/{repository}/actions/runs", "github.runs.list")
        return payload.get("workflow_runs", [])

    def get_branches(self, repository: str) -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.branches.list", repository=repository)
        return self._get(f"/repos/{repository}/branches", "github.branches.list")

    def get_commits(self, repository: str) -> list[dict[str, Any]]:
        log_event(logger, logging.INFO, "github.commits.list", repository=repository)
        return self._get(f"/repos/{repository}/commits", "github.commits.list")

    def get_workflow_path(self, repository: str, workflow_id: str) -> str:
        log_event(
            logger,
            logging.INFO,
            "github.workflow.get",
            repository=repository,
            workflow_id=workflow_id,
        )
        payload = self._get(
            f"/repos/{repository}/actions/workflows/{workflow_id}",
            "github.workflow.get",
        )
        return payload["path"]

    def get_file_text(self, repository: str, path: str) -> str:
        log_event(logger, logging.INFO, "github.contents.get", repository=repository, path=path)
        payload = self._get(
            f"/repos/{repository}/contents/{quote(path)}",
            "github.contents.get",
        )
        # A API devolve o conteudo em base64 quebrado em linhas.
        encoded_content = payload.get("content", "").replace("\n", "")
        try:
            return base64.b64decode(encoded_content, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as error:
            raise RemoteError(200, f"File {path} is not valid base64 UTF-8 text: {error}") from error

    def dispatch_workflow(self, request: DispatchRequest) -> None:
        log_event(
            logger,
            logging.INFO,
            "github.workflow.dispatch",
            repository=request.repository,
            workflow_id=request.workflow_id,
            ref=request.ref,
            inputs_count=len(request.inputs),
        )
        body = request.to_payload()
        try:
            validate(instance=body, schema=_DISPATCH_BODY_SCHEMA)
        except ValidationError as error:
            raise ValueError(f"Invalid workflow dispatch body: {error.message}") from error

        response = self.session.post(
            f"{self.base}/repos/{request.repository}/actions/workflows/{request.workflow_id}/dispatches",
            json=body,
            timeout=self.timeout_seconds,
        )
        self._raise_for_status(response, "github.workflow.dispatch")
