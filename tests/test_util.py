import getpass
import socket
import sys
import time
from unittest import mock

from pwpulse.util import (
    get_binary_name,
    get_fqdn,
    get_host_name,
    get_user_name,
    msleep,
    path_get_filename,
)


def test_path_get_filename():
    assert path_get_filename("/usr/lib/libfoo.so") == "libfoo.so"
    assert path_get_filename("plain") == "plain"
    assert path_get_filename("dir/") == ""
    assert path_get_filename(None) is None


def test_msleep_waits():
    start = time.monotonic()
    result = msleep(20)
    elapsed = time.monotonic() - start
    assert (result or 0) == 0
    assert elapsed >= 0.015


def test_host_name_and_fqdn():
    with mock.patch.object(socket, "gethostname", return_value="box"):
        assert get_host_name() == "box"
        assert get_fqdn() == "box"


def test_user_name():
    with mock.patch.object(getpass, "getuser", return_value="alice"):
        assert get_user_name() == "alice"
    with mock.patch.object(getpass, "getuser", side_effect=OSError):
        assert get_user_name() == "unknown"


def test_binary_name(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/usr/bin/player"])
    assert get_binary_name() == "player"