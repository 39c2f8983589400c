#! /usr/bin/env python3

import argparse
import dataclasses
import datetime
import json
import logging
import sys

from .control import Control
from .options import ParserOptions
from .packages import Packages
from .release import Release
from .repofile import load_text

_KINDS = {
    "release": Release,
    "control": Control,
    "packages": Packages,
}


def _json_default(value):
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)

    if isinstance(value, datetime.datetime):
        return value.isoformat()

    raise TypeError("Object of type %s is not JSON serializable" % type(value))


def main(argv=None):
    """
    Parse APT metadata file and print its typed fields as JSON
    """
    _ap = argparse.ArgumentParser(description="Parse APT Release, control and Packages files")
    _ap.add_argument("kind", choices=sorted(_KINDS.keys()), help="Kind of the document")
    _ap.add_argument("source", help="Local path or http(s) URL, compressed files are unpacked")
    _ap.add_argument("--log-level", dest="log_level", type=int, default=50, help="Logging level")
    _ap.add_argument("-c", "--config", dest="config_fl", default=None, help="JSON parser options")
    _ap.add_argument("--skip-validation", dest="skip_validation", default=False, action='store_true',
            help="Do not fail on absent required fields")
    _ag = _ap.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s: %(levelname)s: %(filename)s: %(funcName)s: %(lineno)d: %(message)s",
        level=_ag.log_level)
    logging.info("Log level is set to %d" % _ag.log_level)

    _options = ParserOptions.from_file(_ag.config_fl) if _ag.config_fl else ParserOptions()

    if _ag.skip_validation:
        _options = ParserOptions(skip_validation=True)

    logging.info("Loading '%s' as %s" % (_ag.source, _ag.kind))
    _parsed = _KINDS[_ag.kind].from_string(load_text(_ag.source), _options)

    if isinstance(_parsed, Packages):
        _result = [_pkg.to_dict() for _pkg in _parsed]
    else:
        _result = _parsed.to_dict()

    json.dump(_result, sys.stdout, default=_json_default, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
