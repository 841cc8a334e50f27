# src/rebrand/core/replacer.py
import re
from typing import Iterable, List

from rebrand.models import ReplaceResult, ReplacementPair


def _apply_sequential(content: str, pairs: List[ReplacementPair]) -> ReplaceResult:
    updated = content
    total = 0
    for pair in pairs:
        count = updated.count(pair.source)
        if count:
            total += count
            updated = updated.replace(pair.source, pair.target)
    return ReplaceResult(updated, total)


def _apply_single_pass(content: str, pairs: List[ReplacementPair]) -> ReplaceResult:
    targets = {}
    for pair in pairs:
        targets.setdefault(pair.source, pair.target)

    # Longest alternative first so the widest variant wins at any position.
    alternatives = sorted(targets, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(source) for source in alternatives))

    updated, total = pattern.subn(lambda m: targets[m.group(0)], content)
    return ReplaceResult(updated, total)


def apply_plan(content: str, plan: Iterable[ReplacementPair], *, sequential: bool = False) -> ReplaceResult:
    """
    Applies a replacement plan to `content` and counts the substitutions.

    By default every source is matched in one left-to-right pass over the
    original text, so text inserted by one replacement is never matched
    again. With `sequential=True` the pairs are applied one after another to
    the running result, as plain str.replace calls; a later pair can then
    rewrite text an earlier pair inserted.
    """
    pairs = [pair for pair in plan if pair.source]
    if not pairs or not content:
        return ReplaceResult(content, 0)

    if sequential:
        return _apply_sequential(content, pairs)
    return _apply_single_pass(content, pairs)


def find_remaining(content: str, patterns: Iterable[str]) -> List[str]:
    """
    Returns the patterns that still occur literally in `content`.

    Empty and whitespace-only patterns are ignored and each pattern is
    reported at most once. The result order is not part of the contract.
    """
    found: List[str] = []
    for pattern in patterns:
        if not pattern or not pattern.strip():
            continue
        if pattern in content and pattern not in found:
            found.append(pattern)
    return found
