from application.dispatch_flow import DispatchFlowDependencies
from application.ports import DispatchGateway
from infrastructure.observability.dispatch_observer import (
    observe_dispatch_step,
    observe_trigger_schema,
)


def build_dispatch_dependencies(gateway: DispatchGateway) -> DispatchFlowDependencies:
    return DispatchFlowDependencies(
        get_workflow_path=gateway.get_workflow_path,
        get_file_text=gateway.get_file_text,
        get_branches=gateway.get_branches,
        dispatch_workflow=gateway.dispatch_workflow,
        observe_schema=observe_trigger_schema,
        observe_step=observe_dispatch_step,
    )
