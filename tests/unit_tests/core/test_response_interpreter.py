"""Unit tests for console response interpretation."""

from __future__ import annotations

import json

import pytest

from core.domain.operations import OperationKind
from core.services.response_interpreter import JsonStrategy, interpret

IMPEX_KINDS = [OperationKind.VALIDATE_IMPORT, OperationKind.RUN_IMPORT]
JSON_KINDS = [OperationKind.RUN_QUERY, OperationKind.RUN_SCRIPT]


def _validation_page(level: str, result: str) -> str:
    return (
        "<html><body><div class='box'>"
        f'<span id="validationResultMsg" data-level="{level}" data-result="{result}"></span>'
        "</div></body></html>"
    )


@pytest.mark.parametrize("kind", list(OperationKind))
def test_non_200_has_error_and_no_output(kind, raw_response) -> None:
    """Every endpoint turns a non-200 status into an error without output."""
    result = interpret(kind, raw_response("<html></html>", 500, "Internal Server Error"))

    assert result.http_code == 500
    assert result.error_message
    assert result.output is None


@pytest.mark.parametrize("kind", IMPEX_KINDS)
def test_impex_status_error_uses_reason_phrase(kind, raw_response) -> None:
    result = interpret(kind, raw_response(None, 403, "Forbidden"))

    assert result.error_message == "Forbidden"


@pytest.mark.parametrize("kind", JSON_KINDS)
def test_json_status_error_is_code_and_reason(kind, raw_response) -> None:
    result = interpret(kind, raw_response(None, 404, "Not Found"))

    assert result.error_message == "[404] Not Found"


def test_empty_reason_phrase_falls_back_to_standard_phrase(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response(None, 502, ""))

    assert result.error_message == "[502] Bad Gateway"


def test_validate_error_level_populates_error_message(raw_response) -> None:
    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response(_validation_page("error", "X")))

    assert result.http_code == 200
    assert result.error_message == "X"
    assert result.output is None


def test_validate_success_level_populates_output(raw_response) -> None:
    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response(_validation_page("success", "Y")))

    assert result.output == "Y"
    assert result.error_message is None
    assert not result.has_error


def test_missing_marker_reports_no_data(raw_response) -> None:
    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response("<html><body>login</body></html>"))

    assert result.error_message == "No data in response"


def test_marker_without_attributes_reports_no_data(raw_response) -> None:
    page = '<div id="validationResultMsg" data-level="error"></div>'

    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response(page))

    assert result.error_message == "No data in response"


def test_empty_impex_body_reports_no_data(raw_response) -> None:
    result = interpret(OperationKind.RUN_IMPORT, raw_response(None))

    assert result.http_code == 200
    assert result.error_message == "No data in response"


def test_import_error_carries_detail_message(raw_response) -> None:
    page = (
        "<html><body>"
        '<div id="impexResult" data-level="error" data-result="Import has encountered problems"></div>'
        '<div class="impexResult"><pre>line 3:   unknown\n  attribute [foo]</pre><p>ignored</p></div>'
        "</body></html>"
    )

    result = interpret(OperationKind.RUN_IMPORT, raw_response(page))

    assert result.error_message == "Import has encountered problems"
    assert result.detail_message == "line 3: unknown attribute [foo]"


def test_import_error_without_detail_container(raw_response) -> None:
    page = '<div id="impexResult" data-level="error" data-result="failed"></div>'

    result = interpret(OperationKind.RUN_IMPORT, raw_response(page))

    assert result.error_message == "failed"
    assert result.detail_message is None


def test_import_success_populates_output(raw_response) -> None:
    page = '<div id="impexResult" data-level="success" data-result="Import finished successfully"></div>'

    result = interpret(OperationKind.RUN_IMPORT, raw_response(page))

    assert result.output == "Import finished successfully"
    assert result.http_code == 200


def test_impex_undecodable_body_keeps_status(raw_response) -> None:
    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response(b"\xff\xfe\xfa"))

    assert result.http_code == 200
    assert result.error_message.startswith("Cannot decode response body")


def test_query_renders_table(raw_response) -> None:
    body = json.dumps({"headers": ["a", "b"], "resultList": [["1", "2"]]})

    result = interpret(OperationKind.RUN_QUERY, raw_response(body))

    lines = result.output.splitlines()
    assert lines[0].split() == ["a", "b"]
    assert lines[1].split() == ["1", "2"]
    assert result.error_message is None


def test_query_json_inside_html_body(raw_response) -> None:
    body = (
        "<html><head><title>x</title></head><body>"
        '{"headers":["code","name"],"resultList":[["electronics","Electronics"],["apparel",null]]}'
        "</body></html>"
    )

    result = interpret(OperationKind.RUN_QUERY, raw_response(body))

    assert result.output.splitlines() == [
        "code         name",
        "electronics  Electronics",
        "apparel",
    ]


def test_query_exception_populates_error(raw_response) -> None:
    body = json.dumps({"exception": {"message": "type code 'Foo' invalid"}})

    result = interpret(OperationKind.RUN_QUERY, raw_response(body))

    assert result.error_message == "type code 'Foo' invalid"
    assert result.output is None


def test_query_exception_without_message(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response('{"exception": {}}'))

    assert result.error_message == "Remote console reported an exception"


def test_query_without_rows_reports_no_data(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response('{"headers": ["a"]}'))

    assert result.error_message == "No data in response"


def test_query_invalid_json_is_bad_request(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response("<html><body>Login required</body></html>"))

    assert result.http_code == 400
    assert result.error_message.startswith("Invalid JSON in response")


def test_query_unexpected_structure_is_bad_request(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response('{"headers": "a", "resultList": 3}'))

    assert result.http_code == 400
    assert result.error_message.startswith("Unexpected response structure")


def test_query_without_entity_reports_status(raw_response) -> None:
    result = interpret(OperationKind.RUN_QUERY, raw_response(None))

    assert result.error_message == "[200] OK"


def test_script_stacktrace_is_error(raw_response) -> None:
    result = interpret(OperationKind.RUN_SCRIPT, raw_response('{"stacktraceText": "boom"}'))

    assert result.error_message == "boom"
    assert result.output is None


def test_script_output_and_result(raw_response) -> None:
    body = '{"outputText": "ok", "executionResult": "42", "stacktraceText": ""}'

    result = interpret(OperationKind.RUN_SCRIPT, raw_response(body))

    assert result.output == "ok"
    assert result.result == "42"
    assert result.error_message is None


def test_script_non_string_result_is_rendered(raw_response) -> None:
    result = interpret(OperationKind.RUN_SCRIPT, raw_response('{"executionResult": 42}'))

    assert result.result == "42"
    assert result.output is None


def test_script_output_keeps_markup_characters(raw_response) -> None:
    body = json.dumps({"outputText": "<b>bold</b>\nnext line"})

    result = interpret(OperationKind.RUN_SCRIPT, raw_response(body))

    assert result.output == "<b>bold</b>\nnext line"


def test_script_undecodable_body_is_bad_request(raw_response) -> None:
    result = interpret(OperationKind.RUN_SCRIPT, raw_response(b"\xff\xfe"))

    assert result.http_code == 400
    assert result.error_message.startswith("Cannot decode response body")


@pytest.mark.parametrize(
    ("kind", "body"),
    [
        (OperationKind.VALIDATE_IMPORT, _validation_page("error", "X")),
        (OperationKind.RUN_QUERY, '{"headers":["a"],"resultList":[["1"]]}'),
        (OperationKind.RUN_SCRIPT, "not json"),
    ],
)
def test_interpretation_is_repeatable(kind, body, raw_response) -> None:
    response = raw_response(body)

    assert interpret(kind, response) == interpret(kind, response)


def test_deeply_nested_json_is_bad_request(raw_response) -> None:
    body = '{"headers":["a"],"resultList":' + "[" * 100_000 + "]" * 100_000 + "}"

    result = interpret(OperationKind.RUN_QUERY, raw_response(body))

    assert result.http_code == 400
    assert result.error_message.startswith("Invalid JSON in response")
    assert result.output is None


def test_script_nested_value_is_bad_request(raw_response) -> None:
    body = json.dumps({"outputText": "ok", "executionResult": {"pk": 1}})

    result = interpret(OperationKind.RUN_SCRIPT, raw_response(body))

    assert result.http_code == 400
    assert result.error_message.startswith("Unexpected response structure")


def test_script_boolean_result_is_rendered(raw_response) -> None:
    result = interpret(OperationKind.RUN_SCRIPT, raw_response('{"executionResult": true}'))

    assert result.result == "True"


def test_nonstandard_status_is_reported(raw_response) -> None:
    result = interpret(OperationKind.RUN_SCRIPT, raw_response(None, 799, ""))

    assert result.http_code == 799
    assert result.error_message == "[799] HTTP 799"


def test_redirect_status_is_an_error(raw_response) -> None:
    result = interpret(OperationKind.VALIDATE_IMPORT, raw_response(None, 302, "Found"))

    assert result.http_code == 302
    assert result.error_message == "Found"


def test_json_strategy_requires_to_result() -> None:
    with pytest.raises(TypeError):
        JsonStrategy()  # type: ignore[abstract]
