"""Errores de la consola remota.

Por qué una jerarquía propia:
- Las estrategias de interpretación fallan con un tipo concreto y el
  intérprete los convierte en un único `ConsoleResult`.
- Ningún error de la consola escala más allá del cliente: la UI decide
  cómo mostrarlo.
"""

from __future__ import annotations


class ConsoleError(Exception):
    """Base de todos los errores de la consola.

    `http_code` permite sobrescribir el código del resultado (p.ej. 400 ante
    un cuerpo imposible de parsear). `detail_message` viaja tal cual al
    resultado.
    """

    def __init__(
        self,
        message: str,
        *,
        http_code: int | None = None,
        detail_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_code = http_code
        self.detail_message = detail_message


class HttpStatusError(ConsoleError):
    """La consola respondió con un status distinto de 200."""


class MissingMarkerError(ConsoleError):
    """No aparece el elemento (DOM o JSON) esperado en la respuesta."""

    def __init__(self, message: str = "No data in response", **kwargs) -> None:
        super().__init__(message, **kwargs)


class RemoteExecutionError(ConsoleError):
    """La consola reportó un error de aplicación (stacktrace, data-level=error)."""


class TransportError(ConsoleError):
    """Fallo de conexión o de I/O antes de recibir una respuesta."""


class ParseError(ConsoleError):
    """HTML/JSON mal formado o que no encaja con el esquema esperado."""
