import logging


# Diagnostic text keyed by a stable numeric identifier so log consumers can
# match on the id instead of the wording.
MESSAGES: dict[int, str] = {
    1001: "using config file {path}",
    2001: "Validating URL string: {locator}",
    2002: "Validating as a JSONL {target}.",
    2003: "validation run completed",
    3001: "Line {line_number} {reason}",
    4001: "check the input URL parameter: {locator!r}",
    4002: "{error}",
    4003: "no input URL given and standard input is not piped",
    5001: "validation run failed: {error}",
}


def format_message(message_id: int, **fields: object) -> str:
    return f"[{message_id}] {MESSAGES[message_id].format(**fields)}"


def log_message(
    logger: logging.Logger,
    level: int,
    message_id: int,
    *,
    extra: dict[str, object] | None = None,
    exc_info: bool = False,
    **fields: object,
) -> None:
    payload: dict[str, object] = {"message_id": message_id}
    if extra:
        payload.update(extra)
    logger.log(level, format_message(message_id, **fields), extra=payload, exc_info=exc_info)
