import dataclasses

import pytest

from corosync.hostname import Hostname


def test_holds_data():
    assert Hostname("example.com").data == "example.com"


def test_default_is_empty():
    assert Hostname().data == ""


def test_equality_and_hash():
    assert Hostname("example.com") == Hostname("example.com")
    assert len({Hostname("example.com"), Hostname("example.com")}) == 1


def test_ordering_follows_text():
    names = [Hostname("b.example.com"), Hostname("a.example.com")]
    assert sorted(names) == [Hostname("a.example.com"), Hostname("b.example.com")]
    assert Hostname("a") < Hostname("b")


def test_frozen():
    host = Hostname("example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        host.data = "other.example.com"
    assert host.data == "example.com"