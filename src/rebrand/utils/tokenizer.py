# src/rebrand/utils/tokenizer.py
import re
from typing import Tuple

from rebrand.errors import InvalidNameError

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_-]+")
_WHITESPACE = re.compile(r"\s+")


def tokenize(name: str) -> Tuple[str, ...]:
    """
    Splits a free-form name into lowercase word tokens.

    "BeakerStack", "beaker-stack" and "BEAKER_STACK" all give
    ("beaker", "stack"). Raises InvalidNameError for anything that is not a
    non-empty string. A name made only of separators gives an empty tuple;
    callers that need at least one token must check for that themselves.
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Name must be a non-empty string")

    spaced = _CASE_BOUNDARY.sub(r"\1 \2", name)
    spaced = _SEPARATORS.sub(" ", spaced)
    spaced = _WHITESPACE.sub(" ", spaced).strip()

    return tuple(token.lower() for token in spaced.split(" ") if token)
