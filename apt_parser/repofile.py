import bz2
import gzip
import logging
import lzma
import posixpath
from urllib.parse import urlparse

import requests

from .metadata_parser import decode_text

# extension ==> decompressor
_DECOMPRESSORS = {
    ".gz": gzip.decompress,
    ".bz2": bz2.decompress,
    ".xz": lzma.decompress,
    ".lzma": lzma.decompress,
}


class HttpError(Exception):
    def __init__(self, url, code, message="Request failed"):
        """
        :param url: requested URL
        :type url: str
        :param code: HTTP status code
        :type code: int
        """
        self.url = url
        self.code = code
        super().__init__("%s: '%s' returned HTTP %d" % (message, url, code))


def decompress(data, name):
    """
    Unpack data according to the file name extension
    :param data: file contents
    :type data: bytes
    :param name: file name or URL
    :type name: str
    """
    _ext = posixpath.splitext(urlparse(name).path)[1]
    _decompressor = _DECOMPRESSORS.get(_ext)

    if not _decompressor:
        logging.debug("No decompression for '%s'" % name)
        return data

    logging.debug("Unpacking '%s' as '%s'" % (name, _ext))
    return _decompressor(data)


def fetch(url, absent_ok=False, session=None):
    """
    Download a remote file
    :param url: remote URL
    :type url: str
    :param absent_ok: return None instead of raising if file is absent in remote
    :type absent_ok: bool
    :param session: session to reuse
    :type session: requests.Session
    :return: unpacked contents
    :rtype: bytes
    """
    _web = session or requests.Session()
    _rsp = _web.get(url, stream=True)

    try:
        if _rsp.status_code != 200:
            if absent_ok:
                logging.debug("File '%s' not found, skipped" % url)
                return None

            raise HttpError(url, _rsp.status_code)

        logging.info("Downloaded '%s'" % url)
        return decompress(_rsp.content, url)
    finally:
        _rsp.close()


def read_local(path):
    """
    Read a local file, unpacking it if needed
    :param path: local path
    :type path: str
    :rtype: bytes
    """
    logging.debug("Reading '%s'" % path)

    with open(path, "rb") as _fl:
        return decompress(_fl.read(), path)


def load_text(location, session=None):
    """
    Load document text from URL or local path
    :param location: http(s) URL or local path
    :type location: str
    """
    if urlparse(location).scheme in ("http", "https"):
        return decode_text(fetch(location, session=session))

    return decode_text(read_local(location))
