"""
Options Builder

Staged construction of validated, immutable component options.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar

from ..error_handling import MissingRequiredConfigurationError

OptionsT = TypeVar("OptionsT")


class BuildResult(Generic[OptionsT]):
    """Result of a build attempt: either options or the error that stopped it."""

    def __init__(
        self,
        success: bool,
        options: Optional[OptionsT] = None,
        error: Optional[MissingRequiredConfigurationError] = None,
    ):
        self.success = success
        self.options = options
        self.error = error

    def unwrap(self) -> OptionsT:
        """Return the options or raise the captured error."""
        if not self.success:
            raise self.error
        return self.options


class OptionsBuilder(ABC, Generic[OptionsT]):
    """Accumulates raw option values and builds a validated options object.

    Subclasses declare ``REQUIRED_FIELDS`` as ``(attribute, label)`` pairs in
    the order they are checked, expose one setter per field, and derive the
    defaults of optional fields in ``_non_required_defaults``.
    """

    REQUIRED_FIELDS: ClassVar[tuple[tuple[str, str], ...]] = ()

    def __init__(self):
        self._values: dict[str, Any] = {}

    def _set(self, field_name: str, value: Any) -> None:
        self._values[field_name] = value

    def build(self) -> OptionsT:
        """Validate required fields, fill defaults and create the options.

        Raises:
            MissingRequiredConfigurationError: for the first required field,
                in declared order, that is unset or empty.
        """
        self._check_required_options()
        values = dict(self._values)
        for field_name, default in self._non_required_defaults(values).items():
            if values.get(field_name) is None:
                values[field_name] = default
        return self._create_options(values)

    def try_build(self) -> BuildResult[OptionsT]:
        """Build without raising, returning a tagged result."""
        try:
            return BuildResult(success=True, options=self.build())
        except MissingRequiredConfigurationError as e:
            return BuildResult(success=False, error=e)

    def _check_required_options(self) -> None:
        for field_name, label in self.REQUIRED_FIELDS:
            if not self._values.get(field_name):
                raise MissingRequiredConfigurationError(
                    field_name, message=f"no {label} has been provided"
                )

    @abstractmethod
    def _non_required_defaults(self, values: dict[str, Any]) -> dict[str, Any]:
        """Defaults for optional fields, derived from validated required ones."""
        pass

    @abstractmethod
    def _create_options(self, values: dict[str, Any]) -> OptionsT:
        pass
