import pytest

from apt_parser.control import Control
from apt_parser.options import ParserOptions
from apt_parser.packages import Package, Packages, PackagesError
from apt_parser.record import MissingRequiredFieldError

JAMMY_PACKAGES = """\
Package: accountsservice
Architecture: amd64
Version: 0.6.55-3ubuntu2
Priority: optional
Section: gnome
Origin: Ubuntu
Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>
Original-Maintainer: Debian freedesktop.org maintainers <pkg-freedesktop-maintainers@lists.alioth.debian.org>
Bugs: https://bugs.launchpad.net/ubuntu/+filebug
Installed-Size: 484
Depends: dbus (>= 1.9.18), libaccountsservice0 (= 0.6.55-3ubuntu2), libc6 (>= 2.34), libglib2.0-0 (>= 2.44), libpolkit-gobject-1-0 (>= 0.99)
Recommends: default-logind | logind
Suggests: gnome-control-center
Filename: pool/main/a/accountsservice/accountsservice_0.6.55-3ubuntu2_amd64.deb
Size: 66304
MD5sum: d1dc884f3b039c09d9aaa317d6614582
SHA1: f0c2c870146d05b8d53cd805527e942ca793ce38
SHA256: 9823e2e330e3ca986440eb5117574c29c1247efc4e8e23cd3b936013dff493b1
SHA512: 9d816378feaa1cb1135212b416321059b86ee622eccfd3e395b863e5b2ea976244c2b2c016b44f5bf6a30f18cd04406c0193f0da13ca296aac0212975f763bd7
Homepage: https://www.freedesktop.org/wiki/Software/AccountsService/
Description: query and manipulate user account information
Task: ubuntu-desktop-minimal, ubuntu-desktop
Description-md5: 8aeed0a03c7cd494f0c4b8d977483d7e

Package: acl
Architecture: amd64
Version: 2.3.1-1
Priority: optional
Section: utils
Installed-Size: 192
Depends: libacl1 (= 2.3.1-1), libc6 (>= 2.34)
Filename: pool/main/a/acl/acl_2.3.1-1_amd64.deb
Size: 39520
SHA256: 5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4d5e6f
Description: access control list - utilities
 This package contains the getfacl and setfacl utilities.
 .
 POSIX ACLs give finer control over permissions.

Package: adduser
Architecture: all
Version: 3.118ubuntu5
Essential: yes
Filename: pool/main/a/adduser/adduser_3.118ubuntu5_all.deb
Size: 155892
"""


class TestJammy(object):

    @pytest.fixture
    def packages(self):
        return Packages.from_string(JAMMY_PACKAGES)

    def test_length_and_order(self, packages):
        assert len(packages) == 3
        assert [_pkg.package for _pkg in packages] == ["accountsservice", "acl", "adduser"]
        assert packages[-1].package == "adduser"
        assert [_pkg.package for _pkg in packages[1:]] == ["acl", "adduser"]

    def test_types(self, packages):
        for _pkg in packages:
            assert isinstance(_pkg, Package)
            assert isinstance(_pkg, Control)

    def test_first(self, packages):
        _pkg = packages[0]
        assert _pkg.version == "0.6.55-3ubuntu2"
        assert _pkg.section == "gnome"
        assert _pkg.priority == "optional"
        assert _pkg.architecture == "amd64"
        assert _pkg.depends == (
            "dbus (>= 1.9.18)",
            "libaccountsservice0 (= 0.6.55-3ubuntu2)",
            "libc6 (>= 2.34)",
            "libglib2.0-0 (>= 2.44)",
            "libpolkit-gobject-1-0 (>= 0.99)",
        )
        assert _pkg.recommends == ("default-logind | logind",)
        assert _pkg.suggests == ("gnome-control-center",)
        assert _pkg.installed_size == 484
        assert _pkg.filename == "pool/main/a/accountsservice/accountsservice_0.6.55-3ubuntu2_amd64.deb"
        assert _pkg.size == 66304
        assert _pkg.md5sum == "d1dc884f3b039c09d9aaa317d6614582"
        assert _pkg.sha1 == "f0c2c870146d05b8d53cd805527e942ca793ce38"
        assert _pkg.sha256 == "9823e2e330e3ca986440eb5117574c29c1247efc4e8e23cd3b936013dff493b1"
        assert _pkg.sha512.startswith("9d816378feaa")
        assert _pkg.description == "query and manipulate user account information"
        assert _pkg.description_md5 == "8aeed0a03c7cd494f0c4b8d977483d7e"
        assert _pkg.homepage == "https://www.freedesktop.org/wiki/Software/AccountsService/"

    def test_raw(self, packages):
        _pkg = packages[0]
        assert _pkg.get("Origin") == "Ubuntu"
        assert _pkg.get("Bugs") == "https://bugs.launchpad.net/ubuntu/+filebug"
        assert _pkg.get("Task") == "ubuntu-desktop-minimal, ubuntu-desktop"
        assert _pkg.get("Size") == "66304"

    def test_folded_description(self, packages):
        assert packages[1].description == (
            "access control list - utilities\n"
            "This package contains the getfacl and setfacl utilities.\n"
            "\n"
            "POSIX ACLs give finer control over permissions.")
        assert packages[1].md5sum is None

    def test_essential(self, packages):
        assert packages[2].essential is True
        assert packages[2].depends is None
        assert packages[0].essential is None


def test_empty():
    assert len(Packages.from_string("")) == 0
    assert len(Packages.from_string("\n\n  \n")) == 0


def test_single_package():
    _pkg = Package.from_string("Package: foo\nVersion: 1\nArchitecture: all\nSize: 10\n")
    assert _pkg.size == 10
    assert _pkg.filename is None
    assert _pkg.installed_size is None


def test_unsigned_installed_size():
    with pytest.raises(ValueError):
        Package.from_string("Package: foo\nVersion: 1\nArchitecture: all\nInstalled-Size: -1\n")


def test_errors_collected():
    _text = "Package: a\nVersion: 1\nArchitecture: all\n\nPackage: b\nArchitecture: all\n\nVersion: 3\n"

    with pytest.raises(PackagesError) as _exc:
        Packages.from_string(_text)

    _errors = _exc.value.errors
    assert [_idx for _idx, _err in _errors] == [1, 2]
    assert all(isinstance(_err, MissingRequiredFieldError) for _idx, _err in _errors)
    assert _errors[0][1].key == "Version"
    assert _errors[0][1].kind == "Package"
    assert _errors[1][1].key == "Package"


def test_skip_validation():
    _text = "Package: a\nVersion: 1\nArchitecture: all\n\nPackage: b\nArchitecture: all\n"
    _packages = Packages.from_string(_text, ParserOptions(skip_validation=True))
    assert len(_packages) == 2
    assert _packages[1].version is None


def test_crlf():
    _packages = Packages.from_string("Package: a\r\nVersion: 1\r\nArchitecture: all\r\n\r\nPackage: b\r\nVersion: 2\r\nArchitecture: all\r\n")
    assert [_pkg.version for _pkg in _packages] == ["1", "2"]
