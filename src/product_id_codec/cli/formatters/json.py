"""JSON output formatter for CLI."""

import json
import sys
from enum import Enum as _Enum
from typing import Any, Dict, List, Optional, TextIO, Tuple

from ...codec import ParseResult


def _default_serializer(obj: Any) -> Any:
    """Serialize otherwise non-JSON-serializable objects.

    - Enum -> value (fallback to name)
    - Fallback -> str(obj)
    """
    if isinstance(obj, _Enum):
        return getattr(obj, "value", obj.name)
    return str(obj)


def format_json(data: Any, output: Optional[TextIO] = None, indent: int = 2) -> None:
    """Format data as JSON and write to output.

    Args:
        data: Data to format
        output: Output stream (defaults to stdout)
        indent: JSON indentation level
    """
    if output is None:
        output = sys.stdout

    json.dump(
        data,
        output,
        indent=indent,
        ensure_ascii=False,
        sort_keys=True,
        default=_default_serializer,
    )
    output.write("\n")


def format_ids_json(ids: List[str]) -> Dict[str, Any]:
    """Format generated identifiers for JSON output."""
    return {"ids": ids, "count": len(ids)}


def format_validation_json(results: List[Tuple[str, bool]]) -> Dict[str, Any]:
    """Format validation outcomes for JSON output.

    Args:
        results: (identifier, validity) pairs in input order, duplicates kept
    """
    return {
        "results": [{"id": product_id, "valid": valid} for product_id, valid in results],
        "all_valid": all(valid for _, valid in results),
    }


def format_parse_results_json(results: List[Tuple[str, ParseResult]]) -> Dict[str, Any]:
    """Format parse results for JSON output."""
    return {"results": [{"id": product_id, **result.to_dict()} for product_id, result in results]}


def format_config_paths_json(config_path: Optional[str], user_path: str, env_vars: Dict[str, Optional[str]]) -> Dict[str, Any]:
    """Format configuration file resolution for JSON output."""
    return {
        "active_config_file": config_path,
        "user_config_file": user_path,
        "environment": env_vars,
    }
