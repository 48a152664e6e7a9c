"""Workflows module."""
from .reporting import ReportingService

__all__ = ['ReportingService']
