from __future__ import annotations
from typing import Any, ClassVar, Tuple


class ColorBase:
    """Common immutable storage for the scalar color value types.

    Subclasses normalize their channels in ``_normalize`` and the result is
    frozen: any assignment after ``__init__`` raises ``AttributeError``.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:         ClassVar[str]
    num_channels: ClassVar[int] = 3

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *channels: Any) -> None:
        if len(channels) == 1 and isinstance(channels[0], (tuple, list)):
            channels = tuple(channels[0])
        if len(channels) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(channels)}")

        # safe assignment; __setattr__ still allows it during init
        self._value = self._normalize(tuple(channels))

        # freeze instance: no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    @classmethod
    def _normalize(cls, channels: Tuple[Any, ...]) -> Tuple[Any, ...]:
        raise NotImplementedError

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._value)
        return f"{self.__class__.__name__}({args})"
