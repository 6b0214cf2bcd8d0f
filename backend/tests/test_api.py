import unittest
from typing import Any

from fastapi.testclient import TestClient

from domain.models import DispatchRequest
from infrastructure.github.errors import RemoteError
from infrastructure.http.api import app
from infrastructure.http.workflow_factory import get_github_client


_WORKFLOW_TEXT = """\
on:
  workflow_dispatch:
    inputs:
      environment:
        description: 'target env'
        required: true
        type: choice
        options: [prod, staging]
      replicas:
        type: number
        default: 2
"""


class _FakeGitHubClient:
    def __init__(self, *, dispatch_error: Exception | None = None) -> None:
        self.dispatch_error = dispatch_error
        self.sent_requests: list[DispatchRequest] = []

    def list_repositories(self) -> list[dict[str, Any]]:
        return [{"id": 1, "full_name": "octo/app", "private": True, "default_branch": "main"}]

    def list_workflow_runs(self, _: str) -> list[dict[str, Any]]:
        return [
            {
                "id": 10,
                "name": "Deploy",
                "head_branch": "main",
                "status": "in_progress",
                "conclusion": None,
                "html_url": "https://github.com/octo/app/actions/runs/10",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:05:00Z",
            },
            {
                "id": 11,
                "name": "Deploy",
                "head_branch": "main",
                "status": "completed",
                "conclusion": "failure",
                "html_url": "https://github.com/octo/app/actions/runs/11",
                "created_at": "2024-01-02T00:00:00Z",
                "updated_at": "2024-01-02T00:05:00Z",
            },
        ]

    def get_commits(self, _: str) -> list[dict[str, Any]]:
        return [
            {
                "sha": "abc123",
                "commit": {"message": "Fix deploy", "author": {"name": "Dana", "date": "2024-01-01T00:00:00Z"}},
                "html_url": "https://github.com/octo/app/commit/abc123",
            }
        ]

    def get_branches(self, _: str) -> list[dict[str, Any]]:
        return [{"name": "develop"}, {"name": "master"}]

    def get_workflow_path(self, _: str, workflow_id: str) -> str:
        return f".github/workflows/{workflow_id}"

    def get_file_text(self, _: str, __: str) -> str:
        return _WORKFLOW_TEXT

    def dispatch_workflow(self, request: DispatchRequest) -> None:
        if self.dispatch_error is not None:
            raise self.dispatch_error
        self.sent_requests.append(request)


class DispatchApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self.github_client = _FakeGitHubClient()
        app.dependency_overrides[get_github_client] = lambda: self.github_client
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_health_returns_request_id(self) -> None:
        response = self.client.get("/health", headers={"X-Request-ID": "req-1"})
        self.assertEqual(response.json(), {"status": "ok"})
        self.assertEqual(response.headers["X-Request-ID"], "req-1")

    def test_dispatch_form_lists_fields_and_fallback_ref(self) -> None:
        response = self.client.get("/repos/octo/app/workflows/deploy.yml/dispatch-form")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["has_manual_trigger"])
        self.assertEqual(body["default_ref"], "master")
        self.assertEqual(body["branches"], ["develop", "master"])
        self.assertEqual([field["name"] for field in body["fields"]], ["environment", "replicas"])
        self.assertEqual(body["fields"][0]["options"], ["prod", "staging"])
        self.assertEqual(body["fields"][1]["control"], "number")
        self.assertEqual(body["fields"][1]["value"], "2")
        self.assertEqual(body["fields"][1]["bounds"]["step"], 1)

    def test_dispatch_sends_request(self) -> None:
        response = self.client.post(
            "/repos/octo/app/workflows/deploy.yml/dispatches",
            json={"ref": "develop", "inputs": {"environment": "prod"}},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["ref"], "develop")
        self.assertEqual(
            self.github_client.sent_requests[0].inputs,
            {"environment": "prod", "replicas": "2"},
        )

    def test_dispatch_reports_missing_inputs(self) -> None:
        response = self.client.post("/repos/octo/app/workflows/deploy.yml/dispatches", json={})

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"]["missing_inputs"], ["environment"])
        self.assertFalse(response.json()["detail"]["missing_ref"])
        self.assertEqual(self.github_client.sent_requests, [])

    def test_dispatch_passes_remote_error_through(self) -> None:
        self.github_client.dispatch_error = RemoteError(403, "Resource not accessible by integration")

        response = self.client.post(
            "/repos/octo/app/workflows/deploy.yml/dispatches",
            json={"inputs": {"environment": "staging"}},
        )

        self.assertEqual(response.status_code, 502)
        self.assertEqual(
            response.json()["detail"],
            {"status": 403, "message": "Resource not accessible by integration"},
        )

    def test_runs_have_status_labels(self) -> None:
        response = self.client.get("/repos/octo/app/runs")
        self.assertEqual([run["status_label"] for run in response.json()], ["Running", "failure"])

    def test_commits_are_flattened(self) -> None:
        response = self.client.get("/repos/octo/app/commits")
        self.assertEqual(response.json()[0]["author_name"], "Dana")
        self.assertEqual(response.json()[0]["message"], "Fix deploy")

    def test_repositories(self) -> None:
        response = self.client.get("/repos")
        self.assertEqual(response.json()[0]["full_name"], "octo/app")


if __name__ == "__main__":
    unittest.main()
