from dataclasses import dataclass
from enum import Enum


class SourceKind(str, Enum):
    STDIN = "stdin"
    FILE = "file"
    HTTP = "http"
    HTTPS = "https"


class Encoding(str, Enum):
    PLAIN = "JSONL"
    GZIP = "GZ"


class FailureKind(str, Enum):
    MISSING_RECORD_ID = "missing_record_id"
    MISSING_DATA_SOURCE = "missing_data_source"
    MALFORMED = "malformed"
    OTHER_INVALID = "other_invalid"


@dataclass(frozen=True)
class SourceDescriptor:
    kind: SourceKind
    locator: str
    path: str
    encoding: Encoding

    @property
    def is_remote(self) -> bool:
        return self.kind in (SourceKind.HTTP, SourceKind.HTTPS)


@dataclass
class Tally:
    total_lines: int = 0
    missing_record_id: int = 0
    missing_data_source: int = 0
    malformed: int = 0
    other_invalid: int = 0

    def record_failure(self, kind: FailureKind) -> None:
        if kind is FailureKind.MISSING_RECORD_ID:
            self.missing_record_id += 1
        elif kind is FailureKind.MISSING_DATA_SOURCE:
            self.missing_data_source += 1
        elif kind is FailureKind.MALFORMED:
            self.malformed += 1
        else:
            self.other_invalid += 1

    @property
    def bad_count(self) -> int:
        return self.missing_record_id + self.missing_data_source + self.malformed + self.other_invalid
