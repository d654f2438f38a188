"""
Source text helpers for verified contract code.

Handles:
- Detection of Etherscan Standard JSON served in the SourceCode field
- Double-brace unwrapping ({{ ... }}) before decoding
- Path sanitization for files reconstructed from the sources mapping
- CR/LF normalization for terminal viewing
"""

import json
from typing import Any, Dict

def is_standard_json(source_code: str) -> bool:
    """
    Check if a SourceCode value is a Standard JSON bundle.
    Returns True if the first non-whitespace character is '{'.
    """
    return source_code.lstrip().startswith('{')

def decode_standard_json(source_code: str) -> Dict[str, Any]:
    """
    Decode a Standard JSON bundle into a dict.

    Etherscan wraps Standard JSON Input with double braces; the older
    multi-part format uses a single pair. Raises json.JSONDecodeError
    (a ValueError) on malformed text and ValueError if the decoded value
    is not an object.
    """
    text = source_code.strip()
    if text.startswith('{{') and text.endswith('}}'):
        text = text[1:-1]
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data

def sanitize_rel(rel: str) -> str:
    """
    Sanitize a path from Standard JSON sources:
    - Normalize backslashes to forward slashes
    - Strip Windows drive letters (C:/)
    - Strip leading absolute path slashes (e.g., /home/user/... or /Users/...)
    - Drop empty and '.' segments
    """
    rel = rel.replace('\\', '/')
    if ':' in rel[:3]:
        rel = rel.split(':', 1)[1]
    parts = [p for p in rel.split('/') if p not in ('', '.')]
    return '/'.join(parts)

def clean_crlf(text: str) -> str:
    """Normalize CRLF and lone CR line endings to LF"""
    return text.replace('\r\n', '\n').replace('\r', '\n')
