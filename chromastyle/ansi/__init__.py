"""
Terminal escape codec
=====================

Turns an ordered list of SGR codes into the literal control sequence a
terminal expects. The mapping is fixed and deterministic:

- reset ``0``, bold ``1``, italic ``3``, underline ``4``
- basic text ``30+n``, bright text ``90+n``, 256-color ``38;5;n``,
  RGB ``38;2;r;g;b``
- background ``40+n``, bright ``100+n``, ``48;5;n``, ``48;2;r;g;b``

>>> from chromastyle.ansi import SGR, SetGraphicsRendition
>>> SetGraphicsRendition([SGR.BOLD, SGR.ITALIC]).message
'\\x1b[1;3m'
"""

from .palette import BasicPalette
from .codes import SGR, SGRKind, sgr_parameters
from .control import (
    CSI,
    ESC,
    RESET,
    ControlCode,
    Literal,
    SetGraphicsRendition,
    render_codes,
)

__all__ = [
    'BasicPalette',
    'SGR',
    'SGRKind',
    'sgr_parameters',
    'CSI',
    'ESC',
    'RESET',
    'ControlCode',
    'Literal',
    'SetGraphicsRendition',
    'render_codes',
]
