#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docz/utils/__init__.py
"""Shared helpers used by parsers, renderers and the build service."""
