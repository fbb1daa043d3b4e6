class GFError(Exception):
    """Base class for every error raised by the field and matrix modules."""


class ConfigurationError(GFError, ValueError):
    pass


class FieldMismatchError(GFError, ValueError):
    pass


class GFZeroDivisionError(GFError, ZeroDivisionError, ValueError):
    pass


class InverseNotFoundError(GFError, ArithmeticError):
    pass


class DimensionMismatchError(GFError, ValueError):
    pass


class IndexOutOfRangeError(GFError, IndexError):
    pass


class SearchBudgetExceeded(GFError, RuntimeError):
    pass


class ParseError(GFError, ValueError):
    pass
