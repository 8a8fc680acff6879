"""Date Code Hub - encode and decode manufacturing date codes.

Usage:
    >>> from date_code_hub import generate_1990_code, parse_1990_code
    >>> generate_1990_code("SD", 1995, 3)
    'SD0935'
    >>> parse_1990_code("SD0935").year
    1995
"""

from date_code_hub.domain import *  # noqa: F401,F403
from date_code_hub.domain import __all__ as _domain_all

__version__ = "0.1.0"

__all__ = list(_domain_all)
