from minilang.types import ErrorVal

UNDEFINED_VARIABLE = 'UndefinedVariable'
UNSUPPORTED_OPERATOR = 'UnsupportedOperator'
TYPE_MISMATCH = 'TypeMismatch'
ARITHMETIC_ERROR = 'ArithmeticError'
RESOURCE_LIMIT = 'ResourceLimit'


class EvalError(Exception):
    """Exception type used to propagate minilang evaluation errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(format_error(err))
        self.err = err

    @property
    def kind(self) -> str:
        return self.err.kind

    @property
    def statement_index(self):
        return self.err.statement_index


def format_error(err: ErrorVal) -> str:
    text = f"{err.kind}: {err.message}"
    if err.statement_index is not None:
        text += f" (statement {err.statement_index})"
    return text
