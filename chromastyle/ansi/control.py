"""Control codes: the commands a flattened output tree is made of."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .codes import SGR, sgr_parameters

ESC = "\x1b"
CSI = ESC + "["


@dataclass(frozen=True)
class Literal:
    """Text written to the terminal unchanged."""
    text: str

    @property
    def message(self) -> str:
        return self.text


@dataclass(frozen=True)
class SetGraphicsRendition:
    """One SGR escape sequence carrying any number of codes."""
    codes: Tuple[SGR, ...]

    def __init__(self, codes: Iterable[SGR]) -> None:
        object.__setattr__(self, "codes", tuple(codes))

    @property
    def message(self) -> str:
        return f"{CSI}{sgr_parameters(self.codes)}m"


ControlCode = Union[Literal, SetGraphicsRendition]

RESET = SetGraphicsRendition([SGR.RESET])


def render_codes(codes: Iterable[ControlCode]) -> str:
    """Map each control code to its message and concatenate."""
    return "".join(code.message for code in codes)
