import io
import json


VALID_ROWS = [
    {"RECORD_ID": "1", "DATA_SOURCE": "TEST", "NAME_FULL": "Grace Hopper"},
    {"RECORD_ID": "2", "DATA_SOURCE": "TEST", "NAME_FULL": "Ada Lovelace"},
]


class PipedInput(io.StringIO):
    """Stand-in for sys.stdin when data is piped in."""

    def __init__(self, text: str, *, tty: bool = False) -> None:
        super().__init__(text)
        self.buffer = io.BytesIO(text.encode("utf-8"))
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


def jsonl_text(rows: list[dict[str, object]]) -> str:
    return "".join(json.dumps(row) + "\n" for row in rows)
