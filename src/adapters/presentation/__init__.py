"""Presentation adapters - Presenter implementations."""

from .console import LoggingPresenter

__all__ = ["LoggingPresenter"]
