class TermglyphError(Exception):
    """Base class for every error raised by termglyph."""


class InputValidationError(TermglyphError, ValueError):
    """User supplied input that cannot be used (bad path, malformed range)."""


class DecodeError(TermglyphError):
    """An image or font file could not be parsed."""


class TerminalUnavailableError(TermglyphError):
    """The terminal width could not be determined."""


class ContractViolationError(TermglyphError):
    """Two pipeline stages disagree about an invariant. Indicates a bug."""


class InvalidDimensionsError(ContractViolationError, ValueError):
    pass


class DimensionMismatchError(ContractViolationError):
    pass
