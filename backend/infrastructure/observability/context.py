from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

# Variavel de contexto com o request_id atual; "-" fora de uma requisicao.
_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")


def set_request_id(request_id: str) -> Token[str]:
    return _request_id_ctx.set(request_id)


def get_request_id() -> str:
    return _request_id_ctx.get()


def reset_request_id(token: Token[str]) -> None:
    _request_id_ctx.reset(token)


@contextmanager
def request_id_scope(request_id: str | None) -> Iterator[None]:
    if not request_id:
        yield
        return
    token = set_request_id(request_id)
    try:
        yield
    finally:
        reset_request_id(token)
