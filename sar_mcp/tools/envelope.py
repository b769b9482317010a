"""
Tool Result Envelope

Wraps a remote JSON payload in the MCP tool result shape: a pretty-printed
text rendering plus the untouched structured value.
"""

import json
from typing import Any


def json_tool_result(payload: Any) -> dict[str, Any]:
    """
    Build the {content, structuredContent} envelope for a payload.

    Args:
        payload: Parsed JSON returned by the remote API

    Returns:
        MCP tool result dict
    """
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return {
        "content": [
            {
                "type": "text",
                "text": text,
            }
        ],
        "structuredContent": payload,
    }
