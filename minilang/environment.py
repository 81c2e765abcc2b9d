from typing import Dict
from minilang.errors import EvalError, UNDEFINED_VARIABLE
from minilang.types import ErrorVal, Value


class Environment:
    """Maps identifiers to the value they were last assigned."""
    def __init__(self):
        self.values: Dict[str, Value] = {}

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise EvalError(ErrorVal(UNDEFINED_VARIABLE, f'undefined variable {name}'))

    def set(self, name: str, value: Value):
        # No declarations: assignment creates the binding or overwrites it
        self.values[name] = value

    def snapshot(self) -> Dict[str, Value]:
        return dict(self.values)
