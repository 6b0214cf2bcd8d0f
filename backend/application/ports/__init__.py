from application.ports.github_gateway import DispatchGateway, DispatchInvoker, WorkflowContentSource

__all__ = ["DispatchGateway", "DispatchInvoker", "WorkflowContentSource"]
