from domain.models import InputKind, InputSpec, NumericBounds
from domain.trigger.tokenizer import LineToken, unquote


BOOLEAN_OPTIONS = ("true", "false")
ENVIRONMENT_OPTIONS = ("production", "staging", "development")
DEFAULT_NUMBER_STEP = 1
_BLOCK_SCALAR_MARKERS = {"|", "|-", "|+", ">", ">-", ">+"}


def parse_flow_list(raw_value: str) -> tuple[str, ...] | None:
    # Aceita apenas lista entre colchetes: [a, 'b', "c"].
    stripped_value = raw_value.strip()
    if not (stripped_value.startswith("[") and stripped_value.endswith("]")):
        return None
    inner_text = stripped_value[1:-1]
    if not inner_text.strip():
        return ()
    return tuple(unquote(element) or "" for element in inner_text.split(","))


def parse_number(raw_value: str | None) -> int | float | None:
    if raw_value is None:
        return None
    try:
        return int(raw_value)
    except ValueError:
        pass
    try:
        return float(raw_value)
    except ValueError:
        return None


def _block_scalar(marker: str, continuation_lines: list[str]) -> str:
    if marker.startswith(">"):
        return " ".join(line.strip() for line in continuation_lines)
    return "\n".join(line.strip() for line in continuation_lines)


def collect_fields(field_tokens: list[LineToken]) -> dict[str, object]:
    """Group one input's tokens into raw field values.

    Only keys at the shallowest indentation of the run are fields; deeper lines are
    list items or continuation text of the field above them. The first occurrence of
    a field wins.
    """
    if not field_tokens:
        return {}
    field_indent = min(token.indent for token in field_tokens)

    raw_fields: dict[str, object] = {}
    current_key: str | None = None
    nested_values: dict[str, list[LineToken]] = {}
    for token in field_tokens:
        if token.indent <= field_indent and token.key is not None:
            current_key = token.key.strip().lower()
            if current_key not in raw_fields:
                raw_fields[current_key] = token.value
                nested_values[current_key] = []
            else:
                current_key = None
            continue
        if current_key is not None:
            nested_values[current_key].append(token)

    for key, nested_tokens in nested_values.items():
        raw_value = raw_fields[key]
        if not nested_tokens:
            continue
        if raw_value is None and all(token.is_item for token in nested_tokens):
            # Lista em bloco ("- valor" por linha).
            raw_fields[key] = tuple(unquote(token.value) or "" for token in nested_tokens)
        elif raw_value in _BLOCK_SCALAR_MARKERS or raw_value is None:
            continuation_lines = [_token_text(token) for token in nested_tokens]
            raw_fields[key] = _block_scalar(str(raw_value or ">"), continuation_lines)
        elif isinstance(raw_value, str):
            # Escalar simples quebrado em varias linhas.
            continuation_lines = [raw_value, *(_token_text(token) for token in nested_tokens)]
            raw_fields[key] = _block_scalar(">", continuation_lines)
    return raw_fields


def _token_text(token: LineToken) -> str:
    if token.key is not None:
        return f"{token.key}: {token.value or ''}".strip()
    if token.is_item:
        return f"- {token.value or ''}".strip()
    return token.value or ""


def _scalar(raw_fields: dict[str, object], key: str) -> str | None:
    raw_value = raw_fields.get(key)
    if isinstance(raw_value, tuple):
        return None
    if raw_value in _BLOCK_SCALAR_MARKERS:
        return None
    return unquote(raw_value) if isinstance(raw_value, str) else None


def _declared_options(raw_fields: dict[str, object]) -> tuple[str, ...] | None:
    raw_value = raw_fields.get("options")
    if isinstance(raw_value, tuple):
        options = tuple(option.strip() for option in raw_value)
    elif isinstance(raw_value, str):
        options = parse_flow_list(raw_value)
    else:
        return None
    if options is None:
        return None
    options = tuple(option for option in options if option)
    return options or None


def _options_for_kind(
    kind: InputKind,
    declared_options: tuple[str, ...] | None,
    default: str | None,
) -> tuple[str, ...] | None:
    if kind is InputKind.BOOLEAN:
        return BOOLEAN_OPTIONS
    if kind is InputKind.CHOICE:
        if declared_options:
            return declared_options
        # Garante que a lista nunca fique vazia quando existe default.
        return (default,) if default else None
    if kind is InputKind.ENVIRONMENT:
        if default and default not in ENVIRONMENT_OPTIONS:
            return (default, *ENVIRONMENT_OPTIONS)
        return ENVIRONMENT_OPTIONS
    return None


def _bounds_for_kind(kind: InputKind, raw_fields: dict[str, object]) -> NumericBounds | None:
    if kind is not InputKind.NUMBER:
        return None
    step = parse_number(_scalar(raw_fields, "step"))
    return NumericBounds(
        minimum=parse_number(_scalar(raw_fields, "minimum")),
        maximum=parse_number(_scalar(raw_fields, "maximum")),
        step=step if step is not None else DEFAULT_NUMBER_STEP,
    )


def build_input_spec(name: str, field_tokens: list[LineToken]) -> InputSpec:
    raw_fields = collect_fields(field_tokens)
    kind = InputKind.parse(_scalar(raw_fields, "type"))
    required_value = _scalar(raw_fields, "required") or ""
    default = _scalar(raw_fields, "default")
    description = _scalar(raw_fields, "description")

    return InputSpec(
        name=name,
        kind=kind,
        description=description or None,
        required=required_value.lower() == "true",
        default=default,
        options=_options_for_kind(kind, _declared_options(raw_fields), default),
        bounds=_bounds_for_kind(kind, raw_fields),
    )
