"""Contrato de interpretación de respuestas por endpoint."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ConsoleResult, RawResponse


@runtime_checkable
class ResponseStrategy(Protocol):
    """Convierte una respuesta 200 en un `ConsoleResult`.

    Puede elevar cualquier `core.errors.ConsoleError`; el intérprete la
    traduce a un resultado con `error_message`.
    """

    def parse(self, response: RawResponse) -> ConsoleResult:
        ...

    def status_error_message(self, response: RawResponse) -> str:
        """Mensaje para respuestas con status distinto de 200."""

        ...
