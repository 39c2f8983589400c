from .coercion import InvalidValueError, ReleaseHash
from .control import Control
from .metadata_parser import MalformedInputError, ParseError, RawDocument, parse_kv
from .options import ParserOptions
from .packages import Package, Packages, PackagesError
from .record import MissingRequiredFieldError
from .release import Release
