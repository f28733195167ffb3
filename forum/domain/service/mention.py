"""Mention tokenizer.

Link constructs are located up front by bracket matching, then one
left-to-right pass over the body produces tagged spans. A mention is
"linked" when it sits inside a link construct, either a Markdown link
(``[label](target)`` or ``[label][ref]``) or an HTML anchor
(``<a ...>...</a>``). Linked mentions look like mentions but point at
arbitrary content, so they are never notified and their presence makes the
body invalid.
"""

import re

from forum.domain.value.common import ValueObject
from forum.domain.value.types import USERNAME_CHARS

_USERNAME_CHAR = re.compile(rf"[{USERNAME_CHARS}]")
_WORD_CHAR = re.compile(r"\w")
_ANCHOR_OPEN = re.compile(r"<a[\s>]", re.IGNORECASE)
_ANCHOR_CLOSE = re.compile(r"</a\s*>", re.IGNORECASE)


class MentionSpan(ValueObject):
    """An ``@username`` token found in a body."""

    username: str
    start: int
    end: int
    linked: bool


def _matching(text: str, opener: str, closer: str) -> dict[int, int]:
    """Map each opening bracket to the index of its closer, honouring nesting."""
    pairs: dict[int, int] = {}
    stack: list[int] = []
    for i, char in enumerate(text):
        if char == opener:
            stack.append(i)
        elif char == closer and stack:
            pairs[stack.pop()] = i
    return pairs


def _link_ends(text: str) -> dict[int, int]:
    """End index (exclusive) of every link construct, keyed by its start."""
    brackets = _matching(text, "[", "]")
    parens = _matching(text, "(", ")")
    ends: dict[int, int] = {}

    for start, label_end in brackets.items():
        follower = label_end + 1
        if follower >= len(text):
            continue
        if text[follower] == "(":
            target_end = parens.get(follower)
        elif text[follower] == "[":
            target_end = brackets.get(follower)
        else:
            continue
        if target_end is not None:
            ends[start] = target_end + 1

    # An anchor runs to the first closing tag at or after its start
    closes = iter(_ANCHOR_CLOSE.finditer(text))
    close = next(closes, None)
    for anchor in _ANCHOR_OPEN.finditer(text):
        while close is not None and close.start() < anchor.start():
            close = next(closes, None)
        if close is None:
            break
        ends[anchor.start()] = close.end()

    return ends


def tokenize_mentions(text: str) -> list[MentionSpan]:
    """Find every mention token in ``text`` and tag it as plain or linked.

    A token counts only when ``@`` starts the text or follows a non-word
    character, so e-mail addresses such as ``jane@example.com`` are skipped.
    """
    spans: list[MentionSpan] = []
    link_ends = _link_ends(text)
    link_until = -1
    i = 0

    while i < len(text):
        if i >= link_until:
            end = link_ends.get(i)
            if end is not None:
                link_until = end

        char = text[i]
        if char == "@" and (i == 0 or not _WORD_CHAR.match(text[i - 1])):
            j = i + 1
            while j < len(text) and _USERNAME_CHAR.match(text[j]):
                j += 1
            if j > i + 1:
                spans.append(
                    MentionSpan(
                        username=text[i + 1 : j],
                        start=i,
                        end=j,
                        linked=i < link_until,
                    )
                )
                i = j
                continue
        i += 1

    return spans


def extract_mentions(text: str) -> set[str]:
    """Usernames mentioned in plain text, excluding link-wrapped mentions."""
    return {span.username for span in tokenize_mentions(text) if not span.linked}


def contains_disguised_mention(text: str) -> bool:
    """Whether the text wraps a mention-like token in link syntax."""
    return any(span.linked for span in tokenize_mentions(text))
