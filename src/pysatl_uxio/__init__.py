"""
PySATL UxIO
===========

Ingestion of uncertain-valued variables from CSV files, summary statistics
over sample sets, and CSV/JSON emission of (possibly distribution-valued)
results.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .backends import *
from .backends import __all__ as _backends_all
from .errors import *
from .errors import __all__ as _errors_all
from .fileio import *
from .fileio import __all__ as _fileio_all
from .ingestion import *
from .ingestion import __all__ as _ingestion_all
from .options import *
from .options import __all__ as _options_all
from .output import *
from .output import __all__ as _output_all
from .parsing import *
from .parsing import __all__ as _parsing_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-uxio")
__all__ = [
    "__version__",
    *_backends_all,
    *_errors_all,
    *_fileio_all,
    *_ingestion_all,
    *_options_all,
    *_output_all,
    *_parsing_all,
    *_stats_all,
    *_types_all,
]

del _backends_all
del _errors_all
del _fileio_all
del _ingestion_all
del _options_all
del _output_all
del _parsing_all
del _stats_all
del _types_all
