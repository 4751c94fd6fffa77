"""Boundary trimming for URL candidates.

The scanner is greedy: it stops only at whitespace and HTML delimiters, so
a raw match may end with sentence punctuation or with the closing bracket of
text the URL was wrapped in. trim() moves the end back until the URL stands
on its own, repeating two rules until neither applies:

1. An unbalanced closing ``)`` or ``]`` at the end is dropped. Balance is
   counted within the match, so ``.../Culture_(Southern_States)`` keeps its
   parenthesis while ``(http://example.com)`` loses the outer one.
2. A trailing run of ``. , ; : ! ?`` is dropped, unless it is the whole
   fragment (``http://example.com/#!`` keeps its ``#!``).

Characters cut here are emitted as literal text right after the link.

Example:
    >>> from autolink.tokens import Candidate
    >>> trim(Candidate(start=0, end=20, raw="http://example.com).")).raw
    'http://example.com'

"""

from autolink.tokens import Candidate

_TRAILING_PUNCTUATION = ".,;:!?"

# closer -> opener
_BRACKET_PAIRS = {")": "(", "]": "["}


def trim(candidate: Candidate) -> Candidate:
    """Return the candidate with its end adjusted.

    The start never changes and the end only moves backwards. The host part
    of a match contains none of the trimmed characters, so the result always
    keeps at least ``scheme://host``.
    """
    url = candidate.raw
    while True:
        stripped = strip_trailing_punctuation(strip_unbalanced_closer(url))
        if stripped == url:
            break
        url = stripped
    return candidate.truncate(len(url))


def strip_unbalanced_closer(url: str) -> str:
    """Drop a final ``)`` or ``]`` that has no opener inside ``url``."""
    if not url:
        return url
    opener = _BRACKET_PAIRS.get(url[-1])
    if opener is not None and url.count(url[-1]) > url.count(opener):
        return url[:-1]
    return url


def strip_trailing_punctuation(url: str) -> str:
    """Drop trailing sentence punctuation.

    A fragment made only of punctuation (``#!``) is kept whole, since a
    bare ``#`` is never where a URL was meant to end.
    """
    stripped = url.rstrip(_TRAILING_PUNCTUATION)
    if stripped != url and stripped.endswith("#"):
        return url
    return stripped
