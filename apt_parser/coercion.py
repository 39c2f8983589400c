"""
Conversion of raw field values to typed values.

All helpers accept None for an absent field and return None back,
so "absent" never turns into False, 0 or an empty list by accident.
"""
import logging
import re
from dataclasses import dataclass
from email.utils import parsedate_to_datetime

from .metadata_parser import ParseError

_UINT64_MAX = 2 ** 64 - 1
_signed_re = re.compile(r"^[+-]?[0-9]+$")
_unsigned_re = re.compile(r"^[0-9]+$")


class InvalidValueError(ParseError, ValueError):
    def __init__(self, key, value, message):
        self.key = key
        self.value = value
        super().__init__("%s: invalid value '%s': %s" % (key or "<value>", value, message))


@dataclass(frozen=True)
class ReleaseHash:
    """
    Single file entry of a 'Release' checksums field
    """
    filename: str
    hash: str
    size: int


def parse_boolean(raw):
    """
    'yes' / 'no' to True / False, anything else to None
    :param raw: raw value
    :type raw: str, None
    """
    if raw is None:
        return None

    _value = raw.strip().lower()

    if _value == "yes":
        return True

    if _value == "no":
        return False

    return None


def parse_list(raw, delimiter=None):
    """
    Split a list-field
    :param raw: raw value
    :type raw: str, None
    :param delimiter: separator, any whitespace if None
    :type delimiter: str, None
    :return: tuple of non-empty elements, None if the field is absent
    """
    if raw is None:
        return None

    if delimiter is None or not delimiter.strip():
        return tuple(raw.split())

    return tuple(filter(None, (_v.strip() for _v in raw.split(delimiter))))


def parse_integer(raw, signed=True, key=None):
    """
    Parse base-10 integer
    :param raw: raw value
    :type raw: str, None
    :param signed: allow a sign; unsigned values are limited to 64 bits
    :type signed: bool
    :param key: field name for error messages
    :type key: str
    """
    if raw is None:
        return None

    _value = raw.strip()

    if not (_signed_re if signed else _unsigned_re).match(_value):
        raise InvalidValueError(key, raw, "%s integer expected" % ("signed" if signed else "unsigned"))

    _result = int(_value, 10)

    if not signed and _result > _UINT64_MAX:
        raise InvalidValueError(key, raw, "value does not fit in 64 bits")

    return _result


def parse_hash_list(raw, key=None):
    """
    Parse 'Release' checksums field: whitespace-separated triplets
    of hash, size and filename
    :param raw: raw value
    :type raw: str, None
    :param key: field name for error messages
    :type key: str
    :return: tuple of ReleaseHash
    """
    if raw is None:
        return None

    _tokens = raw.split()
    _result = list()

    for _idx in range(0, len(_tokens), 3):
        _chunk = _tokens[_idx:_idx + 3]

        if len(_chunk) < 3:
            logging.debug("%s: incomplete trailing entry dropped: %s" % (key, _chunk))
            break

        _hash, _size, _filename = _chunk
        _result.append(ReleaseHash(
            filename=_filename,
            hash=_hash,
            size=parse_integer(_size, signed=False, key=key)))

    return tuple(_result)


def parse_date(raw):
    """
    Parse RFC 2822 date ('Sat, 15 Jan 2022 22:01:06 UTC')
    :param raw: raw value
    :type raw: str, None
    :return: datetime, or None if absent or not parseable
    """
    if not raw or not raw.strip():
        return None

    try:
        return parsedate_to_datetime(raw.strip())
    except (TypeError, ValueError, IndexError, OverflowError):
        logging.warning("Unable to parse date '%s', ignored" % raw)
        return None
