"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los esquemas de respuesta tipados sustituyen a los mapas JSON genéricos: un
  JSON que no encaja produce un error de validación en vez de un `None`.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

JsonScalar = Union[str, int, float, bool, None]


class ConsoleResult(BaseModel):
    """Resultado uniforme de una operación de consola.

    Por qué existe:
    - Unifica las respuestas HTML y JSON de los distintos endpoints en una
      estructura común que la UI/CLI puede mostrar sin conocer el endpoint.
    - Es inmutable: se crea por llamada y se descarta tras consumirse.
    """

    model_config = ConfigDict(frozen=True)

    http_code: int = Field(
        ...,
        ge=0,
        le=999,
        description="Status HTTP de la respuesta (0 si nunca llegó una respuesta).",
    )
    output: str | None = Field(
        default=None,
        description="Salida principal de la operación (texto o tabla renderizada).",
    )
    error_message: str | None = Field(
        default=None,
        description="Mensaje de error si la operación falló.",
    )
    detail_message: str | None = Field(
        default=None,
        description="Detalle adicional del error (p.ej. línea del ImpEx que falló).",
    )
    result: str | None = Field(
        default=None,
        description="Campo secundario: valor devuelto por un script.",
    )

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)


class RawResponse(BaseModel):
    """Respuesta cruda tal como la entrega el transporte.

    El dominio no conoce httpx: el adaptador traduce su respuesta a este modelo.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=100, le=999)
    reason_phrase: str = Field(default="")
    body: bytes | None = Field(
        default=None,
        description="Cuerpo sin decodificar; None si el servidor no envió entidad.",
    )


class ImpexRequest(BaseModel):
    """Parámetros del formulario de importación/validación ImpEx."""

    content: str = Field(..., description="Script ImpEx tal cual lo escribe el usuario.")
    validation_mode: str = Field(default="IMPORT_STRICT", min_length=1)
    max_threads: int = Field(default=1, ge=1, le=64)
    encoding: str = Field(default="UTF-8", min_length=1)
    legacy_mode: bool = False
    enable_code_execution: bool = True
    distributed_mode: bool = False
    sld_enabled: bool = False


class FlexibleSearchRequest(BaseModel):
    """Consulta FlexibleSearch o SQL plano."""

    content: str
    commit: bool = False
    plain_sql: bool = False
    max_rows: int = Field(default=200, ge=1)


class ScriptRequest(BaseModel):
    """Script Groovy a ejecutar en la consola."""

    content: str
    commit: bool = False


class ExceptionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = None


class FlexibleSearchResponse(BaseModel):
    """Cuerpo JSON de `/console/flexsearch/execute`.

    Ejemplo:
    {"headers": ["PK", "code"], "resultList": [["8796093054980", "electronics"]]}
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    exception: ExceptionPayload | None = None
    headers: list[str] | None = None
    result_list: list[list[str | None]] | None = Field(
        default=None,
        alias="resultList",
    )


class ScriptResponse(BaseModel):
    """Cuerpo JSON de `/console/scripting/execute`.

    Los valores pueden ser cualquier escalar JSON; se muestran con `str()`.
    Un objeto o lista anidada no encaja con el esquema.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    stacktrace_text: JsonScalar = Field(default=None, alias="stacktraceText")
    output_text: JsonScalar = Field(default=None, alias="outputText")
    execution_result: JsonScalar = Field(default=None, alias="executionResult")


class RemoteConnection(BaseModel):
    """Conexión a una consola remota (host, puerto, webroot)."""

    display_name: str | None = None
    host: str = Field(default="localhost", min_length=1)
    port: str | None = Field(default="9002")
    webroot: str = Field(default="", description="Contexto de la consola, p.ej. 'hac'.")
    ssl: bool = True

    @property
    def generated_url(self) -> str:
        scheme = "https" if self.ssl else "http"
        url = f"{scheme}://{self.host.strip()}"
        if self.port and self.port.strip():
            url += f":{self.port.strip()}"
        webroot = self.webroot.strip().strip("/")
        if webroot:
            url += f"/{webroot}"
        return url
