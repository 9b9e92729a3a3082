"""Detect prompts that restate the previous prompt of the same session.

A pair is a re-prompt when the first 50 characters of both prompts
(lower-cased) are longer than 10 characters and more than 60% of their
words overlap. False positives and negatives are expected; the thresholds
define the behaviour and are not tuned.
"""

import re
from typing import Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..models import PromptSession


_WHITESPACE = re.compile(r"\s+")


def _prefix_words(text: str, thresholds: ThresholdConfig):
    """Word set of the prefix, or None when the prefix is too short.

    Splitting on whitespace runs keeps the empty token produced by leading
    or trailing whitespace, so a blank prefix is one empty word.
    """
    prefix = text.lower()[: thresholds.reprompt_prefix_chars]
    if len(prefix) <= thresholds.reprompt_min_chars:
        return None
    return set(_WHITESPACE.split(prefix))


def word_overlap(a: set[str], b: set[str]) -> float:
    """Shared words relative to the larger word set."""
    larger = max(len(a), len(b))
    if larger == 0:
        return 0.0
    return len(a & b) / larger


def is_reprompt(
    previous: PromptSession,
    current: PromptSession,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> bool:
    """True when ``current`` looks like a restatement of ``previous``.

    Prompts from different sessions are never compared.
    """
    if previous.session_id != current.session_id:
        return False
    words_a = _prefix_words(previous.prompt_text, thresholds)
    words_b = _prefix_words(current.prompt_text, thresholds)
    if words_a is None or words_b is None:
        return False
    return word_overlap(words_a, words_b) > thresholds.reprompt_overlap


def count_reprompts(
    sessions: Sequence[PromptSession], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> int:
    """Number of adjacent prompt pairs, in the given order, that are re-prompts."""
    return sum(
        1
        for previous, current in zip(sessions, sessions[1:])
        if is_reprompt(previous, current, thresholds)
    )


def reprompt_rate(
    sessions: Sequence[PromptSession], thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> float:
    """Re-prompts per prompt (0.0 for no prompts).

    This is the canonical re-prompt rate; an upstream ``Analytics.reprompt_rate``
    is reported separately and never mixed in.
    """
    if not sessions:
        return 0.0
    return count_reprompts(sessions, thresholds) / len(sessions)
