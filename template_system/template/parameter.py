"""
Template Parameters

Defines the parameter declarations contributed to a template.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

GENERATE_EXPRESSION = "expression"
ALPHANUMERIC_16 = "[a-zA-Z0-9]{16}"


@dataclass(frozen=True)
class Parameter:
    """A named template parameter.

    A parameter either carries a literal ``value`` or a generation rule
    (``generate`` plus ``from_``) that the deployment engine resolves when
    the template is processed. Parameters compare and hash by name only.
    """

    name: str
    display_name: str = field(default="", compare=False)
    description: str = field(default="", compare=False)
    generate: Optional[str] = field(default=None, compare=False)
    from_: Optional[str] = field(default=None, compare=False)
    value: Optional[str] = field(default=None, compare=False)
    required: bool = field(default=False, compare=False)

    @classmethod
    def generated(
        cls,
        name: str,
        pattern: str = ALPHANUMERIC_16,
        display_name: str = "",
        description: str = "",
        required: bool = True,
    ) -> "Parameter":
        """Create a parameter generated from an expression pattern."""
        return cls(
            name=name,
            display_name=display_name,
            description=description,
            generate=GENERATE_EXPRESSION,
            from_=pattern,
            required=required,
        )

    @property
    def is_generated(self) -> bool:
        return self.generate is not None

    @property
    def placeholder(self) -> str:
        """Reference to this parameter inside template objects."""
        return f"${{{self.name}}}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the template parameter layout."""
        result: dict[str, Any] = {"name": self.name}
        if self.display_name:
            result["displayName"] = self.display_name
        if self.description:
            result["description"] = self.description
        if self.value is not None:
            result["value"] = self.value
        if self.generate:
            result["generate"] = self.generate
            result["from"] = self.from_
        result["required"] = self.required
        return result
