import json
from typing import Protocol


REQUIRED_FIELDS = ("RECORD_ID", "DATA_SOURCE")


class RecordValidator(Protocol):
    def validate(self, line: str) -> tuple[bool, str | None]:
        ...


class RecordShapeValidator:
    """Checks that a line is a JSON object carrying RECORD_ID and DATA_SOURCE.

    Failure reasons are free text; the line pipeline sorts them into buckets by
    looking for the field names and the phrase "not well formed".
    """

    def validate(self, line: str) -> tuple[bool, str | None]:
        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            return False, f"JSON is not well formed: {exc}"

        if not isinstance(record, dict):
            return False, f"record must be a JSON object, got {type(record).__name__}"

        for field_name in REQUIRED_FIELDS:
            value = record.get(field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                return False, f"a {field_name} field is required"

        return True, None
