"""Scan pipeline split by execution and finalize stages."""

from .workflow import ScannerPipelineMixin

__all__ = ["ScannerPipelineMixin"]
