"""Pattern-based minifier for compiled output.

Purely textual: it knows nothing about CSS or JavaScript syntax. A
``/* ... */`` sequence inside a string literal is stripped like any other
comment, and newlines inside strings are lost.
"""

import re

# Applied in order.
_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[\n\r]+"), ""),  # line breaks
    (re.compile(r"/\*.*?\*/"), " "),  # block comments
    (re.compile(r" +"), " "),  # runs of spaces
    (re.compile(r": "), ":"),
    (re.compile(r" ;"), ";"),
    (re.compile(r" ?\{ ?"), "{"),
)


def compress(text: str) -> str:
    """Strip line breaks and block comments, then tighten spacing.

    ``compress("a:  1;\\n\\n  b: 2;")`` returns ``"a:1; b:2;"``.
    """
    for pattern, replacement in _RULES:
        text = pattern.sub(replacement, text)
    return text
