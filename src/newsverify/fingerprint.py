import hashlib
import re

# ECMAScript whitespace and line terminators. Python's own \s also takes in
# U+001C..U+001F and U+0085 and leaves out U+FEFF, which would change digests
# of records fingerprinted elsewhere.
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")


def normalize_content(content: str) -> str:
    """Lower-case, collapse whitespace runs to one space and trim."""
    return _WHITESPACE_RUN.sub(" ", content.lower()).strip(" ")


def fingerprint(content: str) -> str:
    """
    Canonical SHA-256 fingerprint of content.

    Case and whitespace differences collapse to the same value so that
    re-submissions of a verified article match its stored record.
    """
    normalized = normalize_content(content)
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
