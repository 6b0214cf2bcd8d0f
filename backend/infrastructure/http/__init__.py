"""HTTP layer package"""

from infrastructure.http.dispatch_service import dispatch_workflow, open_dispatch_form
from infrastructure.http.schemas import (
    DispatchFormResponse,
    DispatchWorkflowRequest,
    DispatchWorkflowResponse,
)

__all__ = [
    "DispatchFormResponse",
    "DispatchWorkflowRequest",
    "DispatchWorkflowResponse",
    "dispatch_workflow",
    "open_dispatch_form",
]
