"""Concurrency — async pool for batch file processing."""

from docalign.concurrency.pool import FilePool

__all__ = ["FilePool"]
