from typing import Any

from application.dispatch_flow import DispatchFlowResult, DispatchSession
from domain.form import FormField
from domain.models import WorkflowRunSummary
from infrastructure.http.schemas import (
    CommitSchema,
    DispatchFormResponse,
    DispatchWorkflowResponse,
    FormFieldSchema,
    NumericBoundsSchema,
    WorkflowRunSchema,
)


def to_form_field_schema(form_field: FormField) -> FormFieldSchema:
    bounds = None
    if form_field.bounds is not None:
        bounds = NumericBoundsSchema(
            minimum=form_field.bounds.minimum,
            maximum=form_field.bounds.maximum,
            step=form_field.bounds.step,
        )
    return FormFieldSchema(
        name=form_field.name,
        label=form_field.label,
        control=form_field.control.value,
        required=form_field.required,
        value=form_field.value,
        placeholder=form_field.placeholder,
        options=list(form_field.options),
        bounds=bounds,
    )


def to_dispatch_form_response(session: DispatchSession) -> DispatchFormResponse:
    return DispatchFormResponse(
        repository=session.repository,
        workflow_id=session.workflow_id,
        has_manual_trigger=session.has_manual_trigger,
        fields=[to_form_field_schema(form_field) for form_field in session.form.fields()],
        branches=list(session.branch_names),
        default_ref=session.effective_ref,
    )


def to_dispatch_workflow_response(result: DispatchFlowResult) -> DispatchWorkflowResponse:
    request = result.request
    return DispatchWorkflowResponse(
        status=result.status,
        message=result.message,
        repository=request.repository,
        workflow_id=request.workflow_id,
        ref=request.ref,
        inputs=dict(request.inputs),
    )


def to_workflow_run_summary(run_data: dict[str, Any]) -> WorkflowRunSummary:
    return WorkflowRunSummary(
        id=int(run_data["id"]),
        name=run_data.get("name") or "",
        head_branch=run_data.get("head_branch") or "",
        status=run_data.get("status") or "",
        conclusion=run_data.get("conclusion"),
        html_url=run_data.get("html_url") or "",
        created_at=run_data.get("created_at") or "",
        updated_at=run_data.get("updated_at") or "",
    )


def to_workflow_run_schema(run: WorkflowRunSummary) -> WorkflowRunSchema:
    return WorkflowRunSchema(
        id=run.id,
        name=run.name,
        head_branch=run.head_branch,
        status=run.status,
        conclusion=run.conclusion,
        status_label=run.status_label,
        html_url=run.html_url,
        created_at=run.created_at,
        updated_at=run.updated_at,
    )


def to_commit_schema(commit_data: dict[str, Any]) -> CommitSchema:
    commit_details = commit_data.get("commit") or {}
    author = commit_details.get("author") or {}
    return CommitSchema(
        sha=commit_data["sha"],
        message=commit_details.get("message") or "",
        author_name=author.get("name"),
        authored_at=author.get("date"),
        html_url=commit_data.get("html_url"),
    )
