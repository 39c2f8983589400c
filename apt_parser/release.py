import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .coercion import ReleaseHash, parse_boolean, parse_date, parse_hash_list, parse_list
from .metadata_parser import parse_kv, strip_pgp_signature
from .record import RepoRecord

# checksums field name ==> attribute name
HASH_FIELDS = {
    "MD5Sum": "md5sum",
    "SHA1": "sha1",
    "SHA256": "sha256",
    "SHA512": "sha512",
}


@dataclass(frozen=True)
class Release(RepoRecord):
    """
    'Release' (or 'InRelease') file of a repository distribution.
    See https://wiki.debian.org/DebianRepository/Format#A.22Release.22_files
    """
    architectures: Tuple[str, ...]
    no_support_for_architecture_all: Optional[bool]
    description: Optional[str]
    origin: Optional[str]
    label: Optional[str]
    suite: Optional[str]
    codename: Optional[str]
    version: Optional[str]
    date: Optional[datetime]
    valid_until: Optional[datetime]
    components: Tuple[str, ...]
    md5sum: Optional[Tuple[ReleaseHash, ...]]
    sha1: Optional[Tuple[ReleaseHash, ...]]
    sha256: Optional[Tuple[ReleaseHash, ...]]
    sha512: Optional[Tuple[ReleaseHash, ...]]
    not_automatic: Optional[bool]
    but_automatic_upgrades: Optional[bool]
    acquire_by_hash: Optional[bool]
    signed_by: Optional[Tuple[str, ...]]
    packages_require_authorization: Optional[bool]

    kind = "Release"
    required_fields = ("Architectures", "Components")

    @classmethod
    def from_string(cls, text, options=None):
        """
        Parse 'Release' contents. Clear-signed 'InRelease' contents
        are accepted too, the signature is dropped without verification.
        """
        return cls.from_raw(parse_kv(strip_pgp_signature(text)), options)

    @classmethod
    def _typed_fields(cls, raw):
        _hashes = dict()

        for _key, _attr in HASH_FIELDS.items():
            _hashes[_attr] = parse_hash_list(raw.get(_key), key=_key)

            if _hashes[_attr] is not None:
                logging.debug("%s: %d file(s) listed" % (_key, len(_hashes[_attr])))

        return dict(
            architectures=parse_list(raw.get("Architectures")) or (),
            no_support_for_architecture_all=parse_boolean(raw.get("No-Support-for-Architecture-all")),
            description=raw.get("Description"),
            origin=raw.get("Origin"),
            label=raw.get("Label"),
            # either suite or codename is mandatory, none is enforced
            suite=raw.get("Suite"),
            codename=raw.get("Codename"),
            version=raw.get("Version"),
            date=parse_date(raw.get("Date")),
            valid_until=parse_date(raw.get("Valid-Until")),
            components=parse_list(raw.get("Components")) or (),
            not_automatic=parse_boolean(raw.get("NotAutomatic")),
            but_automatic_upgrades=parse_boolean(raw.get("ButAutomaticUpgrades")),
            acquire_by_hash=parse_boolean(raw.get("Acquire-By-Hash")),
            signed_by=parse_list(raw.get("Signed-By"), ","),
            packages_require_authorization=parse_boolean(raw.get("Packages-Require-Authorization")),
            **_hashes)

    def get_subfiles(self):
        """
        Return dictionary of all files listed, with size and hashes
        """
        _result = dict()

        for _key, _attr in HASH_FIELDS.items():
            for _entry in getattr(self, _attr) or ():
                _fdata = _result.setdefault(_entry.filename, {"Size": _entry.size})

                if _fdata["Size"] != _entry.size:
                    raise ValueError("Sizes not match for '%s': %d != %d" %
                            (_entry.filename, _fdata["Size"], _entry.size))

                _fdata[_key] = _entry.hash

        return _result
