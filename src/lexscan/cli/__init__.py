"""
lexscan Command-Line Interface
==============================

This package provides the ``lexscan`` command, a Click-based tool that
scans a source file and prints its token table.
"""

__all__ = ["lexscan"]
