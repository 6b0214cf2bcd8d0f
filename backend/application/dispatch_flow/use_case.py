from domain.dispatch import DispatchValidationError, MissingRequiredInputsError

from application.dispatch_flow.contracts import (
    DispatchFlowConfig,
    DispatchFlowDependencies,
    DispatchFlowResult,
)
from application.dispatch_flow.steps import open_dispatch_session, submit_dispatch


def run_dispatch_flow(
    config: DispatchFlowConfig,
    dependencies: DispatchFlowDependencies,
    *,
    raise_on_error: bool = True,
) -> DispatchFlowResult:
    try:
        dependencies.observe_step("open_session", "start")
        session = open_dispatch_session(config.repository, config.workflow_id, dependencies)
        dependencies.observe_step(
            "open_session",
            "success",
            detail=(
                f"manual_trigger={str(session.has_manual_trigger).lower()} "
                f"inputs_count={len(session.schema or {})} branches_count={len(session.branch_names)}"
            ),
        )

        session.form.update(config.inputs)
        session.select_ref(config.selected_ref)

        dependencies.observe_step("submit", "start", detail=f"ref={session.effective_ref}")
        request = submit_dispatch(session, dependencies)
        dependencies.observe_step("submit", "success", detail=f"ref={request.ref}")
        return DispatchFlowResult(
            status="success",
            message=f"Workflow {config.workflow_id} dispatched on {request.ref}",
            request=request,
        )
    except DispatchValidationError as error:
        dependencies.observe_step("submit", "error", detail=str(error))
        if raise_on_error:
            raise
        missing_inputs = error.names if isinstance(error, MissingRequiredInputsError) else []
        return DispatchFlowResult(
            status="invalid",
            message="Workflow dispatch request is incomplete",
            missing_inputs=tuple(missing_inputs),
            error=str(error),
        )
    except Exception as error:
        dependencies.observe_step("finalize", "error", detail=str(error))
        if raise_on_error:
            raise
        return DispatchFlowResult(
            status="error",
            message="Workflow dispatch failed",
            error=str(error),
        )
