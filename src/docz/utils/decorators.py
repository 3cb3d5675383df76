#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/utils/decorators.py
"""Utility decorators for docz parsers and renderers.

Heavy optional libraries (ebooklib, reportlab) are imported inside the methods
that need them; ``requires_dependencies`` checks them up front so the user gets
one DependencyError listing everything that is missing.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from docz.exceptions import DependencyError
from docz.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "pdf", "epub"), used in error messages
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version

    Examples
    --------
        >>> @requires_dependencies("pdf", [("reportlab", "reportlab", ">=4.0.0")])
        ... def render(self, node):
        ...     from reportlab.platypus import SimpleDocTemplate

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement and installed_version is not None:
                        version_mismatches.append((install_name, version_spec, installed_version))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing intro.md")

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (pdf)"):
        ...     data = renderer.render(doc)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug("%s completed in %.2fs", operation, elapsed)
    else:
        yield
