from dataclasses import dataclass, field
from typing import Callable, TypedDict

from domain.dispatch import resolve_ref
from domain.form import InputForm
from domain.models import DispatchRequest, TriggerSchema
from domain.trigger import extract_trigger_schema


class BranchData(TypedDict, total=False):
    name: str


def _noop_observe_schema(_: str, __: str, ___: TriggerSchema | None) -> None:
    return None


def _noop_observe_step(_: str, __: str, detail: str | None = None) -> None:
    return None


@dataclass(frozen=True)
class DispatchFlowConfig:
    repository: str
    workflow_id: str
    selected_ref: str | None = None
    inputs: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchFlowDependencies:
    get_workflow_path: Callable[[str, str], str]
    get_file_text: Callable[[str, str], str]
    get_branches: Callable[[str], list[BranchData]]
    dispatch_workflow: Callable[[DispatchRequest], None]
    extract_schema: Callable[[str], TriggerSchema | None] = extract_trigger_schema
    observe_schema: Callable[[str, str, TriggerSchema | None], None] = _noop_observe_schema
    observe_step: Callable[[str, str, str | None], None] = _noop_observe_step


@dataclass
class DispatchSession:
    """State of one open trigger dialog; discarded when the dialog closes."""

    repository: str
    workflow_id: str
    schema: TriggerSchema | None
    branch_names: list[str]
    form: InputForm
    selected_ref: str | None = None
    closed: bool = False

    @property
    def has_manual_trigger(self) -> bool:
        return self.schema is not None

    @property
    def effective_ref(self) -> str:
        return resolve_ref(self.selected_ref, self.branch_names)

    def select_ref(self, ref: str | None) -> None:
        self.selected_ref = ref

    def close(self) -> None:
        self.closed = True
        self.form.values.clear()


@dataclass(frozen=True)
class DispatchFlowResult:
    status: str
    message: str
    request: DispatchRequest | None = None
    missing_inputs: tuple[str, ...] = ()
    error: str | None = None
