"""Tests for the package's public surface."""
import feelslike


def test_public_names_resolve():
    for name in feelslike.__all__:
        assert getattr(feelslike, name) is not None


def test_no_stale_aliases():
    assert "ColouredText" not in feelslike.__all__
    assert not hasattr(feelslike, "ColouredText")
