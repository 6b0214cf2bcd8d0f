import logging
import re
from enum import Enum

from domain.models import InputSpec, TriggerSchema
from domain.trigger.fields import build_input_spec
from domain.trigger.tokenizer import LineToken, tokenize


logger = logging.getLogger(__name__)

MANUAL_TRIGGER_EVENT = "workflow_dispatch"
_TRIGGER_SECTION_KEYS = {"on"}
_WORD_PATTERN = re.compile(r"[A-Za-z0-9_\-]+")


class ExtractorState(Enum):
    SEEKING_TRIGGER = "seeking_trigger"
    SEEKING_INPUTS = "seeking_inputs"
    IN_INPUT = "in_input"
    DONE = "done"


def _mentions_manual_trigger(raw_value: str | None) -> bool:
    # Cobre "on: workflow_dispatch" e "on: [push, workflow_dispatch]".
    if not raw_value:
        return False
    return MANUAL_TRIGGER_EVENT in _WORD_PATTERN.findall(raw_value)


class _TriggerSchemaMachine:
    """Walks line tokens once: SEEKING_TRIGGER -> SEEKING_INPUTS -> IN_INPUT -> DONE."""

    def __init__(self) -> None:
        self.state = ExtractorState.SEEKING_TRIGGER
        self.schema: TriggerSchema | None = None
        self.top_level_indent: int | None = None
        self.trigger_indent: int | None = None
        self.trigger_child_indent: int | None = None
        self.dispatch_indent: int | None = None
        self.dispatch_child_indent: int | None = None
        self.inputs_indent: int | None = None
        self.input_name_indent: int | None = None
        self.current_input: str | None = None
        self.current_tokens: list[LineToken] = []
        self.runs: list[tuple[str, list[LineToken]]] = []

    def feed(self, token: LineToken) -> None:
        if self.state is ExtractorState.SEEKING_TRIGGER:
            self._seek_trigger(token)
        elif self.state is ExtractorState.SEEKING_INPUTS:
            self._seek_inputs(token)
        elif self.state is ExtractorState.IN_INPUT:
            self._collect_input(token)

    def finish(self) -> TriggerSchema | None:
        self._close_current_input()
        self.state = ExtractorState.DONE
        if self.schema is None:
            return None
        for input_name, field_tokens in self.runs:
            self.schema[input_name] = build_input_spec(input_name, field_tokens)
        return self.schema

    def _seek_trigger(self, token: LineToken) -> None:
        if self.top_level_indent is None:
            self.top_level_indent = token.indent

        if self.trigger_indent is None:
            # Procura a secao "on:" no nivel raiz do documento.
            if token.indent != self.top_level_indent or token.key is None:
                return
            if token.key.strip().lower() not in _TRIGGER_SECTION_KEYS:
                return
            if token.value is not None:
                if _mentions_manual_trigger(token.value):
                    self.schema = {}
                self.state = ExtractorState.DONE
                return
            self.trigger_indent = token.indent
            return

        # Itens de lista podem ficar na mesma coluna de "on:".
        same_level_item = token.is_item and token.indent == self.trigger_indent
        if token.indent <= self.trigger_indent and not same_level_item:
            # Saiu da secao de gatilhos sem encontrar workflow_dispatch.
            self.state = ExtractorState.DONE
            return

        # So os filhos diretos de "on:" declaram gatilhos.
        if self.trigger_child_indent is None:
            self.trigger_child_indent = token.indent
        if token.indent != self.trigger_child_indent:
            return

        if token.is_item:
            # Gatilhos em lista de bloco: "- workflow_dispatch".
            if _mentions_manual_trigger(token.value):
                self.schema = {}
                self.state = ExtractorState.DONE
            return

        if token.key == MANUAL_TRIGGER_EVENT:
            self.schema = {}
            if token.value is not None:
                # "workflow_dispatch: {}" ou "workflow_dispatch: null" nao declaram inputs.
                self.state = ExtractorState.DONE
                return
            self.dispatch_indent = token.indent
            self.state = ExtractorState.SEEKING_INPUTS

    def _seek_inputs(self, token: LineToken) -> None:
        if token.indent <= self.dispatch_indent:
            self.state = ExtractorState.DONE
            return
        # "inputs:" so vale como filho direto de workflow_dispatch.
        if self.dispatch_child_indent is None:
            self.dispatch_child_indent = token.indent
        if token.indent != self.dispatch_child_indent:
            return
        if token.key == "inputs" and self.inputs_indent is None:
            if token.value is not None:
                self.state = ExtractorState.DONE
                return
            self.inputs_indent = token.indent
            self.state = ExtractorState.IN_INPUT

    def _collect_input(self, token: LineToken) -> None:
        if token.indent <= self.inputs_indent:
            self.state = ExtractorState.DONE
            return

        if self.input_name_indent is None:
            self.input_name_indent = token.indent

        if token.indent <= self.input_name_indent:
            self._close_current_input()
            if token.key is None:
                # Linha inesperada no nivel dos nomes: ignora ate o proximo input.
                return
            self.current_input = token.key
            if token.value is not None:
                # Input declarado inline ("nome: {}"), sem campos.
                self.runs.append((token.key, []))
                self.current_input = None
            return

        if self.current_input is not None:
            self.current_tokens.append(token)

    def _close_current_input(self) -> None:
        if self.current_input is not None:
            self.runs.append((self.current_input, self.current_tokens))
        self.current_input = None
        self.current_tokens = []


def _run_machine(text: str) -> TriggerSchema | None:
    machine = _TriggerSchemaMachine()
    for token in tokenize(text):
        if machine.state is ExtractorState.DONE:
            break
        machine.feed(token)
    return machine.finish()


def extract_trigger_schema(text: str) -> TriggerSchema | None:
    """Recover the manual-trigger input schema from raw workflow text.

    Returns ``None`` when the workflow declares no ``workflow_dispatch`` trigger and an
    empty dict when the trigger exists without inputs (an empty ``inputs:`` block gives
    the same result). Any failure while reading the text degrades to ``None``.
    """
    try:
        schema = _run_machine(text)
    except Exception as error:  # noqa: BLE001
        logger.info("event=trigger.schema.degraded error=%r", str(error))
        return None

    if schema is None:
        logger.debug("event=trigger.schema.absent")
    else:
        logger.debug("event=trigger.schema.extracted inputs_count=%d", len(schema))
    return schema


def required_inputs(schema: TriggerSchema | None) -> list[InputSpec]:
    if not schema:
        return []
    return [input_spec for input_spec in schema.values() if input_spec.required]
