"""URL candidate scanner.

Finds URL-shaped substrings in text under a deliberately permissive grammar:

    scheme "://" host [":" port] [path/query/fragment]

- scheme: one of the configured schemes (http, https, ftp by default),
  not preceded by a word character
- host: dot-separated labels of ASCII letters, digits and hyphens; no
  top-level domain list, so ``bit.ly`` or ``some.sub.domain`` match
- path: any run of characters other than whitespace and ``< > "``; an
  apostrophe belongs to the path only when a letter or digit follows it,
  so ``http://a.com/it's`` is whole while ``href='http://a.com'`` ends
  at the quote

A match never crosses a newline or an HTML tag such as ``<br>``, so scanning
resumes cleanly on the far side. Trailing punctuation is left in the raw
match; the boundary module decides where the URL really ends.

Thread Safety:
Compiled patterns are cached per scheme set and are immutable.
scan() keeps no state between calls.

"""

import functools
import re
from collections.abc import Iterator

from autolink.config import DEFAULT_SCHEMES
from autolink.tokens import Candidate

_HOST = r"[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*"
_PORT = r"(?::[0-9]+)?"
_PATH = r"""(?:[^\s<>"']|'(?=[A-Za-z0-9]))*"""


@functools.lru_cache(maxsize=32)
def url_pattern(schemes: tuple[str, ...] = DEFAULT_SCHEMES) -> re.Pattern[str]:
    """Compile the URL pattern for a set of schemes.

    Longer schemes are tried first so ``https`` never loses to ``http``.
    """
    alternatives = "|".join(
        re.escape(scheme) for scheme in sorted(schemes, key=len, reverse=True)
    )
    return re.compile(
        rf"(?<![\w+.\-])(?:{alternatives})://{_HOST}{_PORT}{_PATH}",
        re.IGNORECASE,
    )


def scan(text: str, schemes: tuple[str, ...] = DEFAULT_SCHEMES) -> Iterator[Candidate]:
    """Yield URL candidates in document order.

    Candidates never overlap. Each call starts a fresh scan.

    Args:
        text: Input text
        schemes: Lower-case scheme names to recognize

    Yields:
        Untrimmed Candidate objects
    """
    for match in url_pattern(schemes).finditer(text):
        yield Candidate(start=match.start(), end=match.end(), raw=match.group())
