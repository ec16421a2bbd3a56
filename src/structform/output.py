"""
Output formatting for structform (JSON field listings and error markup).
"""

import json
from typing import Dict, Optional


def format_json_output(
    fields: Optional[Dict[str, str]],
    success: bool = True,
    error: Optional[str] = None
) -> str:
    """
    Format a resolved field mapping as JSON with a consistent envelope.

    Args:
        fields: Dictionary of field names to HTML input types
        success: Whether the fields were resolved successfully
        error: Error message if not successful

    Returns:
        JSON string with consistent schema:
        {
            "success": bool,
            "fields": {...},
            "error": string | null
        }
    """
    output = {
        'success': success,
        'fields': dict(sorted(fields.items())) if fields is not None else {},
        'error': error
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def format_error_html(action: str, error: Exception) -> str:
    """
    Format an error as an HTML heading, for output that is shown in a page.

    Args:
        action: What could not be done, e.g. 'obtain fields for type'
        error: The exception that stopped it

    Returns:
        HTML heading string
    """
    return f'<h1>cannot {action}: {error}</h1>'
