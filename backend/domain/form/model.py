from dataclasses import dataclass
from enum import Enum

from domain.models import InputKind, InputSpec, NumericBounds, TriggerSchema


class WidgetControl(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"


_CONTROL_BY_KIND = {
    InputKind.STRING: WidgetControl.TEXT,
    InputKind.NUMBER: WidgetControl.NUMBER,
    InputKind.BOOLEAN: WidgetControl.SELECT,
    InputKind.CHOICE: WidgetControl.SELECT,
    InputKind.ENVIRONMENT: WidgetControl.SELECT,
}


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    control: WidgetControl
    required: bool
    value: str
    placeholder: str
    options: tuple[str, ...] = ()
    bounds: NumericBounds | None = None


def build_form_field(input_spec: InputSpec, value: str | None) -> FormField:
    control = _CONTROL_BY_KIND[input_spec.kind]
    if control is WidgetControl.SELECT:
        placeholder = f"Select {input_spec.name}"
    else:
        placeholder = input_spec.default or f"Enter {input_spec.name}"
    return FormField(
        name=input_spec.name,
        label=input_spec.label,
        control=control,
        required=input_spec.required,
        value=value or "",
        placeholder=placeholder,
        options=input_spec.options or (),
        bounds=input_spec.bounds if control is WidgetControl.NUMBER else None,
    )


class InputForm:
    """Current values of one dispatch dialog, seeded from the schema defaults.

    Edits are not validated here; the dispatch builder checks them on submit.
    """

    def __init__(self, schema: TriggerSchema | None) -> None:
        self.schema: TriggerSchema = dict(schema or {})
        self.values: dict[str, str] = {}
        self.reset()

    def reset(self) -> None:
        self.values = {
            input_name: input_spec.default
            for input_name, input_spec in self.schema.items()
            if input_spec.default is not None
        }

    def set_value(self, name: str, value: str) -> None:
        self.values[name] = value

    def update(self, edits: dict[str, str]) -> None:
        for name, value in edits.items():
            self.set_value(name, value)

    def snapshot(self) -> dict[str, str]:
        return dict(self.values)

    def fields(self) -> list[FormField]:
        return [
            build_form_field(input_spec, self.values.get(input_name))
            for input_name, input_spec in self.schema.items()
        ]
