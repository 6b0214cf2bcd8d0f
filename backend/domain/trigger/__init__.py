from domain.trigger.extractor import MANUAL_TRIGGER_EVENT, extract_trigger_schema, required_inputs
from domain.trigger.fields import BOOLEAN_OPTIONS, ENVIRONMENT_OPTIONS
from domain.trigger.tokenizer import LineToken, tokenize

__all__ = [
    "BOOLEAN_OPTIONS",
    "ENVIRONMENT_OPTIONS",
    "LineToken",
    "MANUAL_TRIGGER_EVENT",
    "extract_trigger_schema",
    "required_inputs",
    "tokenize",
]
