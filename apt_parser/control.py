from dataclasses import dataclass
from typing import Optional, Tuple

from .coercion import parse_boolean, parse_integer, parse_list
from .record import RepoRecord

# relationship field name ==> attribute name
RELATION_FIELDS = {
    "Depends": "depends",
    "Pre-Depends": "pre_depends",
    "Recommends": "recommends",
    "Suggests": "suggests",
    "Replaces": "replaces",
    "Enhances": "enhances",
    "Breaks": "breaks",
    "Conflicts": "conflicts",
    "Provides": "provides",
}

# plain text field name ==> attribute name
TEXT_FIELDS = {
    "Package": "package",
    "Source": "source",
    "Version": "version",
    "Section": "section",
    "Priority": "priority",
    "Architecture": "architecture",
    "Maintainer": "maintainer",
    "Description": "description",
    "Homepage": "homepage",
    "Built-Using": "built_using",
    "Package-Type": "package_type",
}


@dataclass(frozen=True)
class Control(RepoRecord):
    """
    Binary package 'control' file
    See https://www.debian.org/doc/debian-policy/ch-controlfields.html
    """
    package: Optional[str]
    source: Optional[str]
    version: Optional[str]
    section: Optional[str]
    priority: Optional[str]
    architecture: Optional[str]
    essential: Optional[bool]
    depends: Optional[Tuple[str, ...]]
    pre_depends: Optional[Tuple[str, ...]]
    recommends: Optional[Tuple[str, ...]]
    suggests: Optional[Tuple[str, ...]]
    replaces: Optional[Tuple[str, ...]]
    enhances: Optional[Tuple[str, ...]]
    breaks: Optional[Tuple[str, ...]]
    conflicts: Optional[Tuple[str, ...]]
    provides: Optional[Tuple[str, ...]]
    installed_size: Optional[int]
    maintainer: Optional[str]
    description: Optional[str]
    homepage: Optional[str]
    built_using: Optional[str]
    package_type: Optional[str]
    tags: Optional[Tuple[str, ...]]

    kind = "Control"
    required_fields = ("Package", "Version", "Architecture")
    signed_installed_size = True

    @classmethod
    def _typed_fields(cls, raw):
        _result = dict()

        for _key, _attr in TEXT_FIELDS.items():
            _result[_attr] = raw.get(_key)

        # dependency alternatives ('a | b') are kept as a single element
        for _key, _attr in RELATION_FIELDS.items():
            _result[_attr] = parse_list(raw.get(_key), ",")

        _result["essential"] = parse_boolean(raw.get("Essential"))
        _result["installed_size"] = parse_integer(
                raw.get("Installed-Size"),
                signed=cls.signed_installed_size,
                key="Installed-Size")
        _result["tags"] = parse_list(raw.get("Tag"), ",")

        return _result
