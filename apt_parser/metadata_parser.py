import logging
from collections.abc import Mapping

_PGP_MESSAGE_START = "-----BEGIN PGP SIGNED MESSAGE-----"
_PGP_SIGNATURE_START = "-----BEGIN PGP SIGNATURE-----"


class ParseError(Exception):
    """
    Base class for everything raised while parsing APT metadata
    """
    pass


class MalformedInputError(ParseError):
    def __init__(self, message):
        super().__init__("Malformed input: %s" % message)


class RawDocument(Mapping):
    """
    Ordered read-only mapping of field name to raw value,
    as found in a single control-file paragraph
    """
    __slots__ = ("_fields",)

    def __init__(self, fields=None):
        """
        :param fields: field values in source order
        :type fields: dict
        """
        self._fields = dict(fields or {})

    def __getitem__(self, key):
        return self._fields[key]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return "RawDocument(%r)" % self._fields


def decode_text(raw):
    """
    Normalize raw input to text
    :param raw: document contents
    :type raw: str, bytes
    :return: text with unix line endings and without NUL characters
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as _e:
            raise MalformedInputError("not a UTF-8 document (%s)" % _e) from _e

    if not isinstance(raw, str):
        raise TypeError("Document should be str or bytes, but %s found" % type(raw))

    return raw.replace("\r\n", "\n").replace("\0", "")


def _commit(fields, key, lines):
    """
    Store an accumulated value, joining repeated keys with a newline
    """
    _value = "\n".join(lines).strip()

    if key in fields:
        logging.debug("Duplicate key '%s', appending value" % key)
        fields[key] = fields[key] + "\n" + _value
        return

    fields[key] = _value


def parse_kv(raw):
    """
    Tokenize a single paragraph of a control-file-like document.
    Never fails on text input: lines which can not be interpreted are skipped.
    :param raw: document contents
    :type raw: str, bytes
    :return: parsed fields
    :rtype: RawDocument
    """
    _fields = dict()
    _key = None
    _lines = list()

    for _ln in decode_text(raw).split("\n"):
        if not _ln.strip():
            if _key is not None:
                _commit(_fields, _key, _lines)

            _key = None
            continue

        if _ln[:1] in (" ", "\t"):
            if _key is None:
                logging.debug("Continuation line without a key skipped: '%s'" % _ln)
                continue

            _content = _ln[1:].rstrip()

            # a lone dot stands for an empty line inside a folded value
            if _content.strip() == ".":
                _content = ""

            _lines.append(_content)
            continue

        if ":" not in _ln:
            logging.debug("Line without a separator skipped: '%s'" % _ln)
            continue

        if _key is not None:
            _commit(_fields, _key, _lines)

        _key, _value = _ln.split(":", 1)
        _key = _key.strip()

        if not _key:
            logging.debug("Line with an empty key skipped: '%s'" % _ln)
            _key = None
            continue

        _lines = [_value.strip()]

    if _key is not None:
        _commit(_fields, _key, _lines)

    return RawDocument(_fields)


def split_paragraphs(raw):
    """
    Split a multi-paragraph document (e.g. 'Packages') on blank lines
    :param raw: document contents
    :type raw: str, bytes
    :return: non-empty paragraphs in source order
    :rtype: list[str]
    """
    _result = list()
    _current = list()

    for _ln in decode_text(raw).split("\n"):
        if _ln.strip():
            _current.append(_ln)
            continue

        if _current:
            _result.append("\n".join(_current))
            _current = list()

    if _current:
        _result.append("\n".join(_current))

    logging.debug("Document split to %d paragraph(s)" % len(_result))
    return _result


def strip_pgp_signature(raw):
    """
    Extract signed payload from a clear-signed document ('InRelease').
    Signature is not verified.
    :param raw: document contents
    :type raw: str, bytes
    :return: payload text, or the text itself if no signature envelope found
    """
    _text = decode_text(raw)
    _lines = _text.split("\n")

    if not any(_ln.startswith(_PGP_MESSAGE_START) for _ln in _lines):
        return _text

    _result = list()
    _pgp_start = False
    _headers = False

    for _ln in _lines:
        if not _pgp_start:
            _pgp_start = _ln.startswith(_PGP_MESSAGE_START)
            _headers = _pgp_start
            continue

        if _headers:
            # armor headers ('Hash: SHA512') end with an empty line
            if not _ln.strip():
                _headers = False

            continue

        if _ln.startswith(_PGP_SIGNATURE_START):
            break

        if _ln.startswith("- "):
            _ln = _ln[2:]

        _result.append(_ln)

    logging.debug("PGP envelope removed, %d line(s) of payload left" % len(_result))
    return "\n".join(_result)


def unparse(document):
    """
    Render fields back to control-file text
    :param document: fields to render
    :type document: RawDocument, dict
    :return: text, one paragraph
    """
    _result = list()

    for _key, _value in document.items():
        _first, *_rest = _value.split("\n")
        _result.append(("%s: %s" % (_key, _first)).rstrip())

        for _ln in _rest:
            _result.append(" " + _ln if _ln.strip() else " .")

    return "\n".join(_result) + "\n"
