from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class InputKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CHOICE = "choice"
    ENVIRONMENT = "environment"

    @classmethod
    def parse(cls, raw_value: str | None) -> "InputKind":
        # Tipo ausente ou desconhecido vira string.
        if not raw_value:
            return cls.STRING
        try:
            return cls(raw_value.strip().lower())
        except ValueError:
            return cls.STRING


@dataclass(frozen=True)
class NumericBounds:
    minimum: int | float | None = None
    maximum: int | float | None = None
    step: int | float = 1


@dataclass(frozen=True)
class InputSpec:
    name: str
    kind: InputKind = InputKind.STRING
    description: str | None = None
    required: bool = False
    default: str | None = None
    options: tuple[str, ...] | None = None
    bounds: NumericBounds | None = None

    @property
    def label(self) -> str:
        return self.description or self.name


# None significa "sem gatilho manual"; dict vazio significa gatilho sem inputs.
TriggerSchema = dict[str, InputSpec]


@dataclass(frozen=True)
class DispatchRequest:
    repository: str
    workflow_id: str
    ref: str
    inputs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copia somente leitura: o pedido nao muda depois de validado.
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))

    def to_payload(self) -> dict[str, object]:
        return {"ref": self.ref, "inputs": dict(self.inputs)}


@dataclass(frozen=True)
class WorkflowRunSummary:
    id: int
    name: str
    head_branch: str
    status: str
    conclusion: str | None
    html_url: str
    created_at: str
    updated_at: str

    @property
    def status_label(self) -> str:
        if self.status == "in_progress":
            return "Running"
        return self.conclusion or "Pending"
