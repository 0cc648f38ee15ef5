"""
Syntactic validation of ENS names.

Only the shape of the name is checked; nothing here resolves a name on chain.
A name is valid when two independent checks both pass:

1. its ASCII (punycode) form, lower-cased, matches the domain grammar below;
2. the input string itself has a period after its first character and a
   non-empty suffix after the last period.

The two disagree for names written with a non-ASCII full stop (mapped to
``.`` by the first check, invisible to the second); both must succeed.
"""

import re
from typing import Optional

# At least one label followed by a period, then a final label of two or more
# characters. Labels use a-z, 0-9 and interior hyphens only.
ENS_NAME_REGEX = re.compile(
    r"^(?:[a-z0-9](?:[-a-z0-9]*[a-z0-9])?\.)+[a-z0-9][-a-z0-9]*[a-z0-9]$"
)

# Full stop, ideographic full stop, fullwidth full stop, halfwidth ideographic full stop
LABEL_SEPARATORS = re.compile("[.。．｡]")

ACE_PREFIX = "xn--"
TLD_OFFSET = 1


def _label_to_ascii(label: str) -> str:
    if label.isascii():
        return label
    return ACE_PREFIX + label.encode("punycode").decode("ascii")


def to_ascii(domain: str) -> str:
    """
    Convert a domain to its ASCII form.

    Labels that are already ASCII are left untouched (no case folding, no
    validation); others are punycode-encoded with the ``xn--`` prefix.
    """
    labels = LABEL_SEPARATORS.sub(".", domain).split(".")
    return ".".join(_label_to_ascii(label) for label in labels)


def is_valid_ens_name(name: Optional[str]) -> bool:
    """
    Validates an ENS name.

    Args:
        name (Optional[str]): Candidate name such as ``vitalik.eth``.

    Returns:
        bool: True when the name is syntactically a domain with a TLD.
    """
    if not name:
        return False

    match = ENS_NAME_REGEX.fullmatch(to_ascii(name).lower())

    index = name.rfind(".")
    tld = name[index + TLD_OFFSET:].lower() if index >= TLD_OFFSET else ""
    return bool(match) and bool(tld)
