"""
Utility functions for the watch page builder.
"""

from .logging_utils import safe_log_text
from .error_utils import create_result_dict
from .duration_utils import parse_duration_to_seconds, format_duration

__all__ = ["safe_log_text", "create_result_dict", "parse_duration_to_seconds", "format_duration"]
