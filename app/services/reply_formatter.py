from typing import Any, Optional

from app.services.payload import as_list, as_mapping, get_field, is_present, to_json, to_text

NO_RESPONSE = "Sem resposta"


def _fallback_reply(payload: Any) -> str:
    for key in ("reply", "answer"):
        value = get_field(payload, key)
        if is_present(value):
            return to_text(value)
    if is_present(payload):
        return to_json(payload)
    return NO_RESPONSE


def _render_record(index: int, record: Any) -> Optional[str]:
    parts = [
        f"{key}: {to_text(value)}"
        for key, value in as_mapping(record).items()
        if value is not None
    ]
    if not parts:
        return None
    return f"{index}. {', '.join(parts)}"


def format_reply(payload: Any) -> str:
    """
    Turns a Databricks serving response into the reply text.

    Only the first prediction is rendered. Each result record becomes one
    numbered line with its non-null fields; the number is the record's
    original position, so records without fields leave gaps. Payloads
    without predictions fall back to their "reply"/"answer" field or to
    their JSON form.
    """
    predictions = as_list(get_field(payload, "predictions"))
    if not is_present(payload) or not predictions:
        return _fallback_reply(payload)

    prediction = as_mapping(predictions[0])
    results = as_list(prediction.get("result"))
    question = prediction.get("question")
    question = to_text(question) if is_present(question) else ""

    if not results:
        return f'Não encontrei resultados para: "{question}"'

    lines = [
        line
        for line in (_render_record(i, record) for i, record in enumerate(results, 1))
        if line is not None
    ]
    return "\n".join(lines) or f"Recebi {len(results)} resultado(s)."
