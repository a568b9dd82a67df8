"""
Tests for package-level metadata.
"""

import importlib.metadata

import mcq_toolkit


class TestVersion:
    """Tests for version lookup."""

    def test_installed_version(self, monkeypatch):
        """The version comes from the installed distribution metadata."""
        monkeypatch.setattr(importlib.metadata, "version", lambda name: "1.2.3")

        assert mcq_toolkit._get_version() == "1.2.3"

    def test_not_installed_falls_back(self, monkeypatch):
        """A source tree without installed metadata reports 0.0.0."""
        def missing(name):
            raise importlib.metadata.PackageNotFoundError(name)

        monkeypatch.setattr(importlib.metadata, "version", missing)

        assert mcq_toolkit._get_version() == "0.0.0"

    def test_version_exported(self):
        assert "__version__" in mcq_toolkit.__all__
        assert isinstance(mcq_toolkit.__version__, str)
