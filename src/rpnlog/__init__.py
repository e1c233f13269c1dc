"""
RPN Token Log Package

Collects the reverse polish notation ("polaca inversa") tokens emitted by
a compiler front-end, in the exact order they were produced.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Lexing or parsing
    - Operator precedence
    - Postfix evaluation
    - Code generation

Tokens are opaque text. This package stores and shows them, nothing else.
"""

from rpnlog.log import BANNER, OrderedStringLog

__version__ = "0.1.0"

__all__ = ["BANNER", "OrderedStringLog"]
