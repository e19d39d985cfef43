"""
param_types.py

Defines parameter types and a data class for command definitions.
This file standardizes how command parameters are range-checked and rendered
across all device command catalogs.
"""

import math
from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


class ParamType(Enum):
    """
    Enumeration of parameter types used in device commands.
    """
    UINT8 = "uint8"
    INT32 = "int32"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    CHOICE = "choice"


@dataclass
class CommandDefinition:
    """
    Data class representing a command definition for a device.

    Attributes:
        mnemonic: The command text sent on the wire, without its parameter.
        name: A short name for the command.
        description: A human-readable description of what the command does.
        read: True if the command is a query.
        write: True if the command sets a value or triggers an action.
        param_type: The type of parameter (if any) this command accepts.
        min_value: The minimum allowed value (if applicable).
        max_value: The maximum allowed value (if applicable).
        choices: The allowed values for enumerated parameters.
        eat_lines: Lines discarded after a write that only echoes.
        separator: Text placed between the mnemonic and the parameter.
        units: A string representing the unit of measure.
    """
    mnemonic: str
    name: str
    description: str
    read: bool = False
    write: bool = False
    param_type: Optional[ParamType] = None
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    choices: Optional[Tuple[Any, ...]] = None
    eat_lines: int = 2
    separator: str = " "
    units: Optional[str] = None

    def accepts(self, value: Any) -> bool:
        """
        Checks a parameter against the closed range or enumeration.

        Args:
            value: The proposed parameter.

        Returns:
            True if the value may be transmitted.
        """
        if self.param_type is None:
            return value is None
        if self.param_type == ParamType.BOOL:
            return isinstance(value, bool)
        if self.choices is not None:
            return value in self.choices
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.param_type in (ParamType.UINT8, ParamType.INT32, ParamType.UINT) \
                and not isinstance(value, int):
            return False
        if isinstance(value, float) and not math.isfinite(value):
            return False
        if self.min_value is not None and not self.min_value <= value:
            return False
        if self.max_value is not None and not value <= self.max_value:
            return False
        return True

    def render(self, value: Any = None) -> str:
        """
        Formats the full command line for a parameter.

        Args:
            value: The parameter, or None for parameterless commands.

        Returns:
            The command text.
        """
        if self.param_type is None:
            return self.mnemonic
        if self.param_type == ParamType.BOOL:
            text = "ON" if value else "OFF"
        elif self.param_type == ParamType.FLOAT:
            text = str(float(value))
        elif isinstance(value, Enum):
            text = str(value.value)
        else:
            text = str(value)
        return f"{self.mnemonic}{self.separator}{text}"

    def describe_range(self) -> str:
        """
        Returns a short description of the accepted values.
        """
        if self.choices is not None:
            return "one of " + ", ".join(str(c) for c in self.choices)
        if self.param_type == ParamType.BOOL:
            return "a boolean"
        low = "-inf" if self.min_value is None else self.min_value
        high = "inf" if self.max_value is None else self.max_value
        return f"[{low}, {high}]"
