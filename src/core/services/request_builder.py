"""Construcción de formularios por operación.

El contenido del usuario se envía tal cual: la consola remota es la única
que valida ImpEx, consultas y scripts.
"""

from __future__ import annotations

from core.domain.models import FlexibleSearchRequest, ImpexRequest, ScriptRequest
from core.domain.operations import OperationKind

OperationRequest = ImpexRequest | FlexibleSearchRequest | ScriptRequest


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_impex_params(request: ImpexRequest) -> dict[str, str]:
    return {
        "scriptContent": request.content,
        "validationEnum": request.validation_mode,
        "maxThreads": str(request.max_threads),
        "encoding": request.encoding,
        "_legacyMode": _flag(request.legacy_mode),
        "_enableCodeExecution": _flag(request.enable_code_execution),
        "enableCodeExecution": _flag(request.enable_code_execution),
        "_distributedMode": _flag(request.distributed_mode),
        "_sldEnabled": _flag(request.sld_enabled),
    }


def build_flexible_search_params(request: FlexibleSearchRequest) -> dict[str, str]:
    # Exactamente uno de los dos campos de consulta va relleno.
    return {
        "scriptType": "flexibleSearch",
        "commit": _flag(request.commit),
        "flexibleSearchQuery": "" if request.plain_sql else request.content,
        "sqlQuery": request.content if request.plain_sql else "",
        "maxCount": str(request.max_rows),
    }


def build_script_params(request: ScriptRequest) -> dict[str, str]:
    return {
        "scriptType": "groovy",
        "commit": _flag(request.commit),
        "script": request.content,
    }


_EXPECTED: dict[OperationKind, type] = {
    OperationKind.VALIDATE_IMPORT: ImpexRequest,
    OperationKind.RUN_IMPORT: ImpexRequest,
    OperationKind.RUN_QUERY: FlexibleSearchRequest,
    OperationKind.RUN_SCRIPT: ScriptRequest,
}


def build_request(kind: OperationKind, request: OperationRequest) -> dict[str, str]:
    """Devuelve los campos de formulario exactos que espera el endpoint de `kind`.

    Un request de tipo incorrecto es un error de programación (`TypeError`),
    no un error de la consola.
    """

    expected = _EXPECTED[kind]
    if not isinstance(request, expected):
        raise TypeError(
            f"{kind.value} expects {expected.__name__}, got {type(request).__name__}"
        )

    if kind is OperationKind.RUN_QUERY:
        return build_flexible_search_params(request)
    if kind is OperationKind.RUN_SCRIPT:
        return build_script_params(request)
    return build_impex_params(request)
