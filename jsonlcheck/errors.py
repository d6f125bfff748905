class JsonlCheckError(RuntimeError):
    pass


class UsageError(JsonlCheckError):
    """No usable source could be resolved from the arguments."""


class InvalidLocatorError(UsageError):
    pass


class UnrecognizedTypeError(UsageError):
    pass


class NoPipeError(UsageError):
    pass


class UnsupportedSchemeError(JsonlCheckError):
    pass


class SourceOpenError(JsonlCheckError):
    pass


class DecompressionError(JsonlCheckError):
    pass


class ValidatorFault(JsonlCheckError):
    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"validator failed on line {line_number}: {message}")
        self.line_number = line_number
