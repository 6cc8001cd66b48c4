"""Per-form results of evaluation.

Result = DefinitionResult | ExprResult | CheckResult (| a parse error carried
through unchanged | ResourceError). One result per top-level form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Binding:
    """A successful definition. `value` is None for `define-struct`."""
    name: str
    value: Optional[Any] = None


@dataclass(frozen=True)
class BindingError:
    message: str
    name: str
    definition: Any = None


@dataclass(frozen=True)
class CheckSuccess:
    pass


@dataclass(frozen=True)
class CheckFailure:
    actual: Any
    expected: Any
    margin: Optional[Any] = None  # set for check-within


@dataclass(frozen=True)
class CheckExpectedError:
    error: Any


@dataclass(frozen=True)
class CheckErrorFailure:
    """check-error saw a value where it wanted an error, or the wrong error."""
    actual: Any
    expected_message: Optional[str] = None


@dataclass(frozen=True)
class ResourceError:
    message: str
    form: Any = None

