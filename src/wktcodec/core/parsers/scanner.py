"""
Parenthesis-aware splitting of WKT bodies.

Composite WKT bodies nest parenthesized groups, so a plain ``str.split(",")``
would cut inside a member. ``split_top_level`` scans once, left to right,
tracking nesting depth and only splitting on commas at depth zero. It runs
in linear time with no backtracking.
"""

import logging
from typing import List

from wktcodec.core.errors import WKTSyntaxError

logger = logging.getLogger(__name__)

# Collections nested deeper than this are rejected before they can exhaust
# the interpreter stack.
MAX_NESTING_DEPTH = 100


def split_top_level(text: str, separator: str = ",", strict: bool = False) -> List[str]:
    """
    Split text on separators that sit outside any parentheses.

    Fragments are returned stripped of surrounding whitespace. Blank input
    yields an empty list.

    Args:
        text: Body text to split
        separator: Single separator character
        strict: Raise on unbalanced parentheses instead of tolerating them

    Returns:
        List of top-level fragments in source order

    Raises:
        WKTSyntaxError: In strict mode, if parentheses are unbalanced

    Examples:
        >>> split_top_level("(0 0,1 1),(2 2,3 3)")
        ['(0 0,1 1)', '(2 2,3 3)']

        >>> split_top_level("POINT(1 1), LINESTRING(0 0,1 1)")
        ['POINT(1 1)', 'LINESTRING(0 0,1 1)']
    """
    if not text or not text.strip():
        return []

    fragments: List[str] = []
    depth = 0
    start = 0

    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                if strict:
                    raise WKTSyntaxError(
                        "Unexpected closing parenthesis", text=text, position=index
                    )
                logger.debug(f"Unbalanced ')' at {index} in {text!r}")
                depth = 0
        elif char == separator and depth == 0:
            fragments.append(text[start:index].strip())
            start = index + 1

    if depth != 0:
        if strict:
            raise WKTSyntaxError(
                "Unclosed parenthesis", text=text, position=len(text)
            )
        logger.debug(f"{depth} unclosed '(' in {text!r}")

    fragments.append(text[start:].strip())
    return fragments


def strip_parens(fragment: str) -> str:
    """
    Remove one optional leading "(" and one optional trailing ")".

    Only a single layer is removed; deeper nesting is left in place.

    Args:
        fragment: Text fragment, possibly wrapped in parentheses

    Returns:
        Fragment without its outermost parenthesis layer

    Examples:
        >>> strip_parens(" (0 0,1 1) ")
        '0 0,1 1'

        >>> strip_parens("((0 0,1 1))")
        '(0 0,1 1)'
    """
    fragment = fragment.strip()
    if fragment.startswith("("):
        fragment = fragment[1:]
    if fragment.endswith(")"):
        fragment = fragment[:-1]
    return fragment.strip()


def nesting_depth(text: str) -> int:
    """
    Return the deepest parenthesis nesting level reached in text.

    Examples:
        >>> nesting_depth("GEOMETRYCOLLECTION(POINT(1 2))")
        2
    """
    depth = 0
    deepest = 0
    for char in text:
        if char == "(":
            depth += 1
            if depth > deepest:
                deepest = depth
        elif char == ")" and depth > 0:
            depth -= 1
    return deepest
