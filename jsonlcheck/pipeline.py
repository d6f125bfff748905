from collections.abc import Iterable
import logging
from typing import TextIO

from jsonlcheck.config import Settings
from jsonlcheck.errors import ValidatorFault
from jsonlcheck.messages import log_message
from jsonlcheck.record import RecordShapeValidator, RecordValidator
from jsonlcheck.schemas import FailureKind, SourceDescriptor, SourceKind, Tally
from jsonlcheck.sources import open_source, resolve_source


logger = logging.getLogger(__name__)

# Checked in order; the first marker found in a failure reason decides the bucket.
_CLASSIFICATION_RULES: tuple[tuple[str, FailureKind], ...] = (
    ("RECORD_ID", FailureKind.MISSING_RECORD_ID),
    ("DATA_SOURCE", FailureKind.MISSING_DATA_SOURCE),
    ("not well formed", FailureKind.MALFORMED),
)


def classify_failure(reason: str | None) -> FailureKind:
    if reason:
        for marker, kind in _CLASSIFICATION_RULES:
            if marker in reason:
                return kind
    return FailureKind.OTHER_INVALID


def validate_lines(lines: Iterable[str], validator: RecordValidator) -> Tally:
    tally = Tally()
    for line in lines:
        tally.total_lines += 1
        text = line.strip()
        if not text:
            continue

        try:
            valid, reason = validator.validate(text)
        except Exception as exc:
            raise ValidatorFault(tally.total_lines, str(exc)) from exc

        if valid:
            continue
        log_message(
            logger,
            logging.INFO,
            3001,
            line_number=tally.total_lines,
            reason=reason if reason is not None else "did not validate",
        )
        tally.record_failure(classify_failure(reason))
    return tally


class ValidationRunner:
    def __init__(self, settings: Settings, validator: RecordValidator | None = None) -> None:
        self.settings = settings
        self.validator = validator or RecordShapeValidator()

    def run(
        self,
        *,
        locator: str | None = None,
        file_type: str | None = None,
        stdin: TextIO | None = None,
    ) -> Tally:
        locator = self.settings.input_url if locator is None else locator
        file_type = self.settings.file_type if file_type is None else file_type

        source = resolve_source(locator, file_type)
        self._log_start(source)

        with open_source(source, stdin=stdin, timeout=self.settings.http_timeout_seconds) as lines:
            tally = validate_lines(lines, self.validator)

        log_message(
            logger,
            logging.INFO,
            2003,
            extra={
                "locator": source.locator or "-",
                "total_lines": tally.total_lines,
                "bad_lines": tally.bad_count,
            },
        )
        return tally

    def _log_start(self, source: SourceDescriptor) -> None:
        if source.kind is SourceKind.STDIN:
            log_message(logger, logging.INFO, 2001, locator="-")
            log_message(logger, logging.INFO, 2002, target="stream")
            return
        log_message(logger, logging.INFO, 2001, locator=source.locator)
        target = "resource" if source.is_remote else "file"
        log_message(logger, logging.INFO, 2002, target=target, extra={"encoding": source.encoding.value})
