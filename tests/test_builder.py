"""Unit tests for CorpusBuilder."""

import os
from pathlib import Path

import pytest

from corpus import Corpus, CorpusBuilder, RootKind, RootLocation, builder
from corpus.exceptions import NoHomeDirError


class TestBuild:
    """Tests for CorpusBuilder.build."""

    def test_defaults(self):
        """Test that an empty builder maps everything onto itself."""
        corpus = builder().build()

        assert isinstance(builder(), CorpusBuilder)
        assert corpus == Corpus(Path("/"), Path("/"), None)

    def test_with_name(self):
        corpus = builder().with_root("/usr").relative_to("/usr").with_name("local").build()

        assert corpus.corpus_root == Path("/usr/local")
        assert corpus.anchor_path == Path("/usr")

    def test_with_name_and_extension(self):
        corpus = (
            builder()
            .with_root("/home/.config")
            .relative_to("/home")
            .with_name("foo")
            .with_extension("toml")
            .build()
        )

        assert corpus.to_corpus_path("/home/bar/baz.toml") == Path("/home/.config/foo/bar/baz.toml")
        assert corpus.to_source_path("/home/.config/foo/bar/baz.toml") == Path("/home/bar/baz")

    def test_extension_leading_dot(self):
        assert builder().with_extension(".toml").build().extension == "toml"

    def test_empty_extension(self):
        assert builder().with_extension("").build().extension is None

    def test_with_root_location(self):
        corpus = builder().with_root(RootLocation(RootKind.RAW, Path("/srv"))).build()
        assert corpus.corpus_root == Path("/srv")

    def test_relative_anchor_is_absolutized(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        corpus = builder().relative_to("projects").build()

        assert corpus.anchor_path == Path(os.getcwd()) / "projects"

    def test_nearest_with_name(self):
        corpus = builder().with_root("/usr").relative_to("/usr").with_name("local").build()
        existing = {Path("/usr/local")}

        result = corpus.find_nearest("/usr/local/bin/foo", exists=lambda p: p in existing)

        assert result == Path("/usr/local")


class TestHome:
    """Tests for home-relative builders."""

    def test_relative_to_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        corpus = builder().relative_to_home().build()

        assert corpus.anchor_path == tmp_path

    def test_xdg_config_relative_to_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        corpus = builder().with_root("xdg-config").relative_to_home().with_name("sauce").build()

        result = corpus.to_corpus_path(tmp_path / "code" / "app")

        assert result == tmp_path / ".config" / "sauce" / "code" / "app"

    def test_relative_to_home_without_home(self, monkeypatch):
        def fail():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", staticmethod(fail))

        with pytest.raises(NoHomeDirError):
            builder().relative_to_home()
