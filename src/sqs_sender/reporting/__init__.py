"""
Module: reporting
Description: Mapping of send results to step outputs.
"""

from .outputs import OutputWriter, report_result

__all__ = ["OutputWriter", "report_result"]
