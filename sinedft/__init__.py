# -*- coding: utf-8 -*-
#
from .__about__ import (
    __author__,
    __author_email__,
    __license__,
    __version__,
    __status__,
)

from . import negligible, report, sampling, transform

__all__ = [
    "__author__",
    "__author_email__",
    "__license__",
    "__version__",
    "__status__",
    "negligible",
    "report",
    "sampling",
    "transform",
]
