"""
Pipeline result helpers.
"""

from typing import Any, Dict, List, Optional


def create_result_dict(success: bool, errors: Optional[List[str]] = None, **kwargs) -> Dict[str, Any]:
    """
    Create a standardized pipeline result dictionary.

    Args:
        success: Whether the run rendered videos
        errors: Developer-facing error messages
        **kwargs: Additional counters to include in the result

    Returns:
        Standardized result dictionary
    """
    return {
        "success": success,
        "errors": list(errors or []),
        **kwargs
    }
