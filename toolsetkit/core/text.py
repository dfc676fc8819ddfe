"""
Enclosed-text extraction.

vswhere's XML output is consumed by looking for literal tag pairs, not by
parsing a document. Nested tags with the same name are not supported.
"""

from typing import List, Optional

from toolsetkit.core.exceptions import VswhereOutputError


def find_all_enclosed(text: str, prefix: str, suffix: str) -> List[str]:
    """
    Find every substring enclosed by a prefix/suffix pair.

    Args:
        text: Text to search
        prefix: Opening delimiter (e.g., "<instance>")
        suffix: Closing delimiter (e.g., "</instance>")

    Returns:
        Enclosed substrings in order of appearance

    Example:
        >>> find_all_enclosed("<a>1</a><a>2</a>", "<a>", "</a>")
        ['1', '2']
    """
    results = []
    position = 0

    while True:
        start = text.find(prefix, position)
        if start == -1:
            break
        start += len(prefix)

        end = text.find(suffix, start)
        if end == -1:
            break

        results.append(text[start:end])
        position = end + len(suffix)

    return results


def find_at_most_one_enclosed(text: str, prefix: str, suffix: str) -> Optional[str]:
    """
    Find the single enclosed substring, if any.

    Raises:
        VswhereOutputError: If the pair appears more than once
    """
    found = find_all_enclosed(text, prefix, suffix)
    if len(found) > 1:
        raise VswhereOutputError(
            f"Expected at most one {prefix}...{suffix}, found {len(found)}"
        )
    return found[0] if found else None


def find_exactly_one_enclosed(text: str, prefix: str, suffix: str) -> str:
    """
    Find the enclosed substring that must appear exactly once.

    Raises:
        VswhereOutputError: If the pair is missing or appears more than once
    """
    found = find_all_enclosed(text, prefix, suffix)
    if len(found) != 1:
        raise VswhereOutputError(
            f"Expected exactly one {prefix}...{suffix}, found {len(found)}"
        )
    return found[0]
