"""
Workflow chains for building the watch page.
"""

from .watch_chain import WatchPageChain, run_watch_pipeline

__all__ = ["WatchPageChain", "run_watch_pipeline"]
