# src/ternplot/config/schema.py
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

Validator = Callable[[Any], None]


# ------------------------------- KeySpec -----------------------------------
@dataclass
class KeySpec:
    """
    Specification for a ternary setting used during validation.

    :param expected_type: Allowed type (or tuple of types) for the value.
    :param validator: Optional callable that receives the value and must raise
                      ``ValueError`` on invalid content.
    """
    expected_type: Union[type, Tuple[type, ...]]
    validator: Optional[Validator] = None

    def __post_init__(self) -> None:
        if self.validator is not None and not callable(self.validator):
            raise TypeError("KeySpec.validator must be callable or None")

    def check(self, key: str, value: Any) -> None:
        """
        Validate ``value`` for ``key``.

        :raises ValueError: On a type mismatch or when the validator rejects the value.
        """
        if not isinstance(value, self.expected_type):
            expected = self.expected_type
            names = (
                ", ".join(t.__name__ for t in expected)
                if isinstance(expected, tuple) else expected.__name__
            )
            raise ValueError(f"Setting '{key}' expects {names}; got {type(value).__name__}.")
        if self.validator is not None:
            try:
                self.validator(value)
            except ValueError as exc:
                raise ValueError(f"Setting '{key}': {exc}") from exc


# ----------------------------- Validators -----------------------------------
def make_choices_validator(choices: Iterable[Any]) -> Validator:
    """
    Build a validator that ensures every item of a list value is one of ``choices``.

    :param choices: Iterable of allowed values (compared using equality).
    :return: A callable that raises ``ValueError`` on the first disallowed item.
    """
    allowed = set(choices)

    def _validator(value: Any) -> None:
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            if item not in allowed:
                raise ValueError(f"value {item!r} not in allowed set {sorted(allowed)!r}")

    return _validator


def make_shape_validator(shape: Tuple[int, ...]) -> Validator:
    """Validator for nested numeric sequences of an exact ``shape``."""

    def _validator(value: Any) -> None:
        def walk(obj: Any, dims: Tuple[int, ...]) -> None:
            if not dims:
                if isinstance(obj, bool) or not isinstance(obj, numbers.Real):
                    raise ValueError(f"expected a number, got {obj!r}")
                return
            if not hasattr(obj, "__len__") or isinstance(obj, str) or len(obj) != dims[0]:
                raise ValueError(f"expected shape {shape}")
            for item in obj:
                walk(item, dims[1:])

        walk(value, shape)

    return _validator


def _positive(value: Any) -> None:
    if value <= 0:
        raise ValueError(f"must be positive, got {value!r}")


def _non_negative(value: Any) -> None:
    if value < 0:
        raise ValueError(f"must be non-negative, got {value!r}")


def _three_strings(value: Any) -> None:
    if len(value) != 3 or not all(isinstance(v, str) for v in value):
        raise ValueError("expected three strings")


def _tick_format(value: Any) -> None:
    try:
        if "{" in value:
            value.format(1.0)
        else:
            value % 1.0
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise ValueError(f"invalid number format {value!r}") from exc


LINK_FIELDS = ("title", "tick", "grid", "outline")
_Seq = (list, tuple)
_Num = numbers.Real

SETTINGS_SCHEMA: Dict[str, KeySpec] = {
    "wlimits": KeySpec(object, make_shape_validator((2, 3))),
    "usegridspace": KeySpec(bool),
    "gridspaceunit": KeySpec(_Num, _positive),
    "ticklinelength": KeySpec(_Num, _non_negative),
    "tick_fmt": KeySpec(str, _tick_format),
    "titlelabels": KeySpec(_Seq, _three_strings),
    "titlerotation": KeySpec(_Seq, make_shape_validator((3,))),
    "ternarypos": KeySpec(_Seq, make_shape_validator((4,))),
    "link_color": KeySpec(_Seq, make_choices_validator(LINK_FIELDS)),
    "titleshift": KeySpec(object, make_shape_validator((2, 3))),
    "tickshift": KeySpec(object, make_shape_validator((2, 3))),
}
