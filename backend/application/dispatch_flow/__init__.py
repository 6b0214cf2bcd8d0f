from application.dispatch_flow.contracts import (
    BranchData,
    DispatchFlowConfig,
    DispatchFlowDependencies,
    DispatchFlowResult,
    DispatchSession,
)
from application.dispatch_flow.steps import (
    load_branch_names,
    load_trigger_schema,
    open_dispatch_session,
    submit_dispatch,
)
from application.dispatch_flow.use_case import run_dispatch_flow

__all__ = [
    "BranchData",
    "DispatchFlowConfig",
    "DispatchFlowDependencies",
    "DispatchFlowResult",
    "DispatchSession",
    "load_branch_names",
    "load_trigger_schema",
    "open_dispatch_session",
    "run_dispatch_flow",
    "submit_dispatch",
]
