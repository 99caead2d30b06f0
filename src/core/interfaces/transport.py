"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el transporte httpx por un stub en tests sin acoplar
  el Core a una librería concreta.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from core.domain.models import RawResponse


@runtime_checkable
class ConsoleTransport(Protocol):
    """Contrato mínimo para enviar un formulario a la consola.

    Reglas de diseño:
    - Un único intento por llamada; quien llama decide si reintenta.
    - Fallos de conexión se elevan como `core.errors.TransportError`.
    """

    def post(
        self,
        path: str,
        params: Mapping[str, str],
        *,
        wait_for_completion: bool = False,
    ) -> RawResponse:
        """Hace POST de `params` a `<base_url><path>` y devuelve la respuesta cruda."""

        ...
