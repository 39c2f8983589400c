import json
import logging


class ParserOptions(object):
    """
    Options for building typed records
    """
    _known = {
        "skip_validation": bool,
    }

    def __init__(self, skip_validation=False):
        """
        :param skip_validation: treat required fields as optional
        :type skip_validation: bool
        """
        if not isinstance(skip_validation, bool):
            raise TypeError("'skip_validation' value is to be '%s', but '%s' found" %
                    (bool, type(skip_validation)))

        self._skip_validation = skip_validation

    @property
    def skip_validation(self):
        return self._skip_validation

    @classmethod
    def from_dict(cls, cfg):
        """
        Build options from a dictionary, all keys are optional
        :param cfg: options
        :type cfg: dict
        """
        if not isinstance(cfg, dict):
            raise TypeError("Options should be a dictionary, but %s found" % type(cfg))

        for _key in cfg.keys():
            if _key not in cls._known:
                raise ValueError("Unknown option '%s'" % _key)

        for _key, _type in cls._known.items():
            if _key not in cfg:
                logging.debug("Option '%s' not given, default is used" % _key)
                continue

            if not isinstance(cfg.get(_key), _type):
                raise TypeError("'%s' value is to be '%s', but '%s' found" % (_key, _type, type(cfg.get(_key))))

        return cls(**cfg)

    @classmethod
    def from_file(cls, path):
        """
        Load options from JSON file
        :param path: path to JSON
        :type path: str
        """
        logging.debug("Loading parser options from '%s'" % path)

        with open(path) as _fl_in:
            return cls.from_dict(json.load(_fl_in))

    def __repr__(self):
        return "ParserOptions(skip_validation=%r)" % self._skip_validation


DEFAULT_OPTIONS = ParserOptions()
