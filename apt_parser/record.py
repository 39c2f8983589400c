import logging
from dataclasses import dataclass, field, fields

from .metadata_parser import ParseError, RawDocument, parse_kv
from .options import DEFAULT_OPTIONS


class MissingRequiredFieldError(ParseError):
    def __init__(self, kind, key):
        self.kind = kind
        self.key = key
        super().__init__("%s: key '%s' is required, but it is absent or empty" % (kind, key))


@dataclass(frozen=True)
class RepoRecord(object):
    """
    Base for typed records.
    Documented fields are exposed as attributes, all fields
    (documented or not) as raw strings via 'get'.
    """
    raw: RawDocument = field(repr=False, compare=False)

    kind = "Record"
    required_fields = ()

    @staticmethod
    def require_field(raw, key, kind):
        """
        Return required field value
        :param raw: parsed fields
        :type raw: RawDocument
        :param key: field name
        :type key: str
        :param kind: record kind for error message
        :type kind: str
        """
        _value = raw.get(key)

        if _value is None or not _value.strip():
            raise MissingRequiredFieldError(kind, key)

        return _value

    @classmethod
    def validate(cls, raw, options=None):
        """
        Check all required fields are present
        :param raw: parsed fields
        :type raw: RawDocument
        :param options: parser options
        :type options: ParserOptions
        """
        if (options or DEFAULT_OPTIONS).skip_validation:
            logging.debug("%s: validation skipped" % cls.kind)
            return

        for _key in cls.required_fields:
            cls.require_field(raw, _key, cls.kind)

    @classmethod
    def from_string(cls, text, options=None):
        """
        Parse text and build the record
        :param text: record contents
        :type text: str, bytes
        :param options: parser options
        :type options: ParserOptions
        """
        return cls.from_raw(parse_kv(text), options)

    @classmethod
    def from_raw(cls, raw, options=None):
        """
        Build the record from already parsed fields
        :param raw: parsed fields, copied if not a RawDocument
        :type raw: RawDocument, dict
        :param options: parser options
        :type options: ParserOptions
        """
        if not isinstance(raw, RawDocument):
            raw = RawDocument(raw)

        cls.validate(raw, options)
        return cls(raw=raw, **cls._typed_fields(raw))

    @classmethod
    def _typed_fields(cls, raw):
        """
        Compute typed attributes from raw fields, to be overriden
        :return: dict of attribute name to value
        """
        return dict()

    def get(self, key, default=None):
        """
        Raw value of any field
        """
        return self.raw.get(key, default)

    def keys(self):
        return self.raw.keys()

    def __contains__(self, key):
        return key in self.raw

    def to_dict(self):
        """
        Typed attributes as a dictionary
        """
        _result = dict()

        for _fld in fields(self):
            if _fld.name == "raw":
                continue

            _result[_fld.name] = getattr(self, _fld.name)

        return _result
