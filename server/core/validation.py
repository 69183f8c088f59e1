# server/core/validation.py

import re


RE_OCTET = re.compile(r"-?[0-9]+")
RE_WHITESPACE = re.compile(r"\s")


def validate_ip(ip: str) -> bool:
    """
    Checks that every dot-separated part of `ip` is a decimal integer in 0..255.

    The number of parts is not checked, so "1.2.3" and "1.2.3.4.5" pass.
    Parts other than ASCII digits with an optional leading "-" fail,
    including empty parts.
    """
    for part in ip.split("."):
        if not RE_OCTET.fullmatch(part):
            return False
        number = int(part)
        if number < 0 or number > 255:
            return False
    return True


def validate_hostname(host: str) -> bool:
    """
    A hostname is stored as one field of a space-separated line,
    so it must not contain any whitespace.
    """
    return not RE_WHITESPACE.search(host)
