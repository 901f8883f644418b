import json
from typing import List


def format_results(results: List[str], output_format: str = "json") -> str:
    """
    Renders extraction results for the console.

    Args:
        results: The strings returned by an extraction.
        output_format: 'json' for a single-line JSON array ('[]' when empty),
            'lines' for one result per line.

    Returns:
        str: The text to print.
    """
    if output_format == "lines":
        return "\n".join(results)
    return json.dumps(results, ensure_ascii=False)
