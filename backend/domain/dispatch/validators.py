from dataclasses import dataclass, field

from domain.dispatch.errors import MissingRefError, MissingRequiredInputsError
from domain.models import TriggerSchema
from domain.trigger import required_inputs


@dataclass(frozen=True)
class ValidationResult:
    missing_ref: bool = False
    missing_inputs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.missing_ref and not self.missing_inputs

    @property
    def problems(self) -> list[str]:
        problems: list[str] = []
        if self.missing_ref:
            problems.append("ref: a branch or tag must be selected")
        for input_name in self.missing_inputs:
            problems.append(f"inputs.{input_name}: value is required")
        return problems

    def raise_for_problems(self) -> None:
        if self.missing_inputs:
            raise MissingRequiredInputsError(
                list(self.missing_inputs),
                missing_ref=self.missing_ref,
            )
        if self.missing_ref:
            raise MissingRefError()


def has_value(value: str | None) -> bool:
    # Qualquer string nao vazia conta como valor, inclusive so espacos.
    return isinstance(value, str) and value != ""


def validate(
    schema: TriggerSchema | None,
    current_values: dict[str, str],
    selected_ref: str | None,
) -> ValidationResult:
    # As duas verificacoes rodam ate o fim antes de reportar.
    missing_ref = not has_value(selected_ref)
    missing_inputs = tuple(
        input_spec.name
        for input_spec in required_inputs(schema)
        if not has_value(current_values.get(input_spec.name))
    )
    return ValidationResult(missing_ref=missing_ref, missing_inputs=missing_inputs)
