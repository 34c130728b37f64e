"""Lista explícita de listeners por evento (hooks locais)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)

Hook = Callable[..., Any]


class LocalHooks:
    """Listeners síncronos agrupados por nome de evento.

    Args:
        events: nomes de eventos aceitos. Se informado, registrar um hook para
            outro nome lança ``ValueError``.

    Os callbacks de um evento rodam na ordem de registro, em linha com a
    chamada que os disparou; exceções de um callback propagam ao chamador.
    """

    def __init__(self, events: Iterable[str] | None = None) -> None:
        self._events = tuple(events) if events is not None else None
        self._hooks: dict[str, list[Hook]] = {}

    def add(self, name: str, callback: Hook) -> None:
        self._validate(name)
        if not callable(callback):
            raise TypeError("callback deve ser chamável")
        self._hooks.setdefault(name, []).append(callback)

    def remove(self, name: str, callback: Hook) -> None:
        callbacks = self._hooks.get(name, [])
        if callback not in callbacks:
            logger.warning("Hook %r não registrado para o evento %s", callback, name)
            return
        callbacks.remove(callback)

    def run(self, name: str, *args: Any) -> None:
        # cópia: um callback pode remover hooks durante a execução
        for callback in list(self._hooks.get(name, ())):
            callback(*args)

    def clear(self) -> None:
        self._hooks.clear()

    def count(self, name: str | None = None) -> int:
        if name is None:
            return sum(len(v) for v in self._hooks.values())
        return len(self._hooks.get(name, ()))

    def _validate(self, name: str) -> None:
        if self._events is not None and name not in self._events:
            raise ValueError(
                f"Evento desconhecido '{name}'. Eventos possíveis: {', '.join(self._events)}"
            )
