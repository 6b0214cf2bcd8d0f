import re
from dataclasses import dataclass


# Chave simples ou entre aspas seguida de ":" (fim de linha ou espaco depois).
_KEY_PATTERN = re.compile(
    r"""^(?P<key>"[^"]*"|'[^']*'|[^\s:#'"][^:#]*?)\s*:(?:\s+(?P<value>.*))?$"""
)
_ITEM_PATTERN = re.compile(r"^-(?:\s+(?P<value>.*))?$")


@dataclass(frozen=True)
class LineToken:
    line_number: int
    indent: int
    key: str | None = None
    value: str | None = None
    is_item: bool = False


def strip_comment(text: str) -> str:
    # Remove comentario "#" fora de aspas; "#" colado em texto faz parte do valor.
    quote_char: str | None = None
    for index, character in enumerate(text):
        if quote_char:
            if character == quote_char:
                quote_char = None
            continue
        if character in {"'", '"'} and (index == 0 or text[index - 1] in " \t:[,-"):
            quote_char = character
            continue
        if character == "#" and (index == 0 or text[index - 1] in " \t"):
            return text[:index].rstrip()
    return text.rstrip()


def unquote(value: str | None) -> str | None:
    if value is None:
        return None
    stripped_value = value.strip()
    if len(stripped_value) >= 2 and stripped_value[0] == stripped_value[-1] == "'":
        return stripped_value[1:-1].replace("''", "'")
    if len(stripped_value) >= 2 and stripped_value[0] == stripped_value[-1] == '"':
        return stripped_value[1:-1].replace('\\"', '"')
    return stripped_value


def _tokenize_line(line_number: int, raw_line: str) -> LineToken | None:
    expanded_line = raw_line.replace("\t", "  ")
    content = strip_comment(expanded_line.lstrip(" "))
    if not content or content in {"---", "..."}:
        return None
    indent = len(expanded_line) - len(expanded_line.lstrip(" "))

    item_match = _ITEM_PATTERN.match(content)
    if item_match:
        item_value = item_match.group("value")
        # "- chave: valor" abre um item de lista que e um mapa; so o valor importa aqui.
        return LineToken(
            line_number=line_number,
            indent=indent,
            value=item_value.strip() if item_value else None,
            is_item=True,
        )

    key_match = _KEY_PATTERN.match(content)
    if key_match:
        value = key_match.group("value")
        return LineToken(
            line_number=line_number,
            indent=indent,
            key=unquote(key_match.group("key")),
            value=value.strip() if value and value.strip() else None,
        )

    # Linha de continuacao (escalar multi-linha): guarda texto sem chave.
    return LineToken(line_number=line_number, indent=indent, value=content)


def tokenize(text: str) -> list[LineToken]:
    """Split workflow text into (indent, key, value) tokens, skipping blanks and comments."""
    tokens: list[LineToken] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        token = _tokenize_line(line_number, raw_line)
        if token is not None:
            tokens.append(token)
    return tokens
