import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .coercion import parse_integer
from .control import Control
from .metadata_parser import ParseError, split_paragraphs


class PackagesError(ParseError):
    def __init__(self, errors):
        """
        :param errors: failed paragraphs
        :type errors: list of (int, ParseError)
        """
        self.errors = errors
        super().__init__("%d package record(s) failed to parse:\n - %s" %
                (len(errors), "\n - ".join("#%d: %s" % (_idx, _err) for _idx, _err in errors)))


@dataclass(frozen=True)
class Package(Control):
    """
    Single record of a 'Packages' index
    """
    filename: Optional[str]
    size: Optional[int]
    md5sum: Optional[str]
    sha1: Optional[str]
    sha256: Optional[str]
    sha512: Optional[str]
    description_md5: Optional[str]

    kind = "Package"
    signed_installed_size = False

    @classmethod
    def _typed_fields(cls, raw):
        _result = super()._typed_fields(raw)
        _result.update(
            filename=raw.get("Filename"),
            size=parse_integer(raw.get("Size"), signed=False, key="Size"),
            md5sum=raw.get("MD5sum"),
            sha1=raw.get("SHA1"),
            sha256=raw.get("SHA256"),
            sha512=raw.get("SHA512"),
            description_md5=raw.get("Description-md5"))

        return _result


class Packages(Sequence):
    """
    All records of a 'Packages' index, in source order
    """
    def __init__(self, packages):
        """
        :param packages: parsed records
        :type packages: list of Package
        """
        self._packages = tuple(packages)

    @classmethod
    def from_string(cls, text, options=None):
        """
        Parse whole 'Packages' contents.
        All records are tried, failures are reported together.
        :param text: file contents
        :type text: str, bytes
        :param options: parser options
        :type options: ParserOptions
        """
        _packages = list()
        _errors = list()

        for _idx, _chunk in enumerate(split_paragraphs(text)):
            try:
                _packages.append(Package.from_string(_chunk, options))
            except ParseError as _e:
                logging.debug("Record #%d failed: %s" % (_idx, _e))
                _errors.append((_idx, _e))

        if _errors:
            raise PackagesError(_errors)

        logging.debug("Parsed %d package record(s)" % len(_packages))
        return cls(_packages)

    def __getitem__(self, index):
        return self._packages[index]

    def __len__(self):
        return len(self._packages)

    def __repr__(self):
        return "Packages(%d records)" % len(self._packages)
