import re

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64

_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@" + _LABEL + r"(?:\." + _LABEL + r")*"
)


def is_valid_email(candidate: str) -> bool:
    """
    Check whether a signup email address is well formed.

    The address must pass every rule below; the structural checks reject the
    common typos that the pattern alone would let through.

    - non-empty, with no leading or trailing whitespace
    - at most 254 characters overall and 64 before the ``@``
    - exactly one ``@`` with a non-empty local part and domain
    - local part neither starts nor ends with ``.`` and has no ``..``
    - domain neither starts nor ends with ``-`` and contains a ``.``
    - local part uses RFC 5322 atom characters, domain is dot-separated
      alphanumeric labels with internal hyphens

    Args:
        candidate (str): Raw value submitted by the visitor.

    Returns:
        bool: True if the address is acceptable for a signup.

    Examples:
        >>> is_valid_email("a@b.com")
        True
        >>> is_valid_email("a@b")
        False
    """
    if not isinstance(candidate, str):
        return False

    parts = candidate.split("@")
    if len(parts) != 2:
        return False
    local_part, domain = parts

    return (
        bool(candidate)
        and candidate.strip() == candidate
        and len(candidate) <= MAX_EMAIL_LENGTH
        and 0 < len(local_part) <= MAX_LOCAL_PART_LENGTH
        and len(domain) > 0
        and not local_part.startswith(".")
        and not local_part.endswith(".")
        and ".." not in local_part
        and not domain.startswith("-")
        and not domain.endswith("-")
        and "." in domain
        and EMAIL_PATTERN.fullmatch(candidate) is not None
    )
