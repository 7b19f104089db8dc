"""
Tests for BiomeInitializer — idempotent biome.json plugin registration.
"""

import json

import pytest

from hcnc.services.biome import (
    BIOME_SCHEMA,
    HCNC_PLUGINS,
    BiomeConfigError,
    BiomeInitializer,
    default_biome_config,
)


class TestCreate:
    """No biome.json yet."""

    def test_creates_default_config(self, project_factory):
        result = BiomeInitializer(project_factory.root).init()

        assert result.created
        assert result.added == 2
        assert result.changed
        assert project_factory.read_biome() == default_biome_config()

    def test_default_shape(self):
        config = default_biome_config()
        assert config["$schema"] == BIOME_SCHEMA
        assert config["linter"] == {"enabled": True, "rules": {"recommended": True}}
        assert config["plugins"] == [
            "./node_modules/@hikasami/naming/rules/hcnc-jsx.grit",
            "./node_modules/@hikasami/naming/rules/hcnc-css.grit",
        ]

    def test_file_format(self, project_factory):
        BiomeInitializer(project_factory.root).init()
        text = (project_factory.root / "biome.json").read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert text.startswith('{\n  "$schema"')


class TestUpdate:
    """Existing biome.json."""

    def test_appends_missing_plugins(self, project_factory):
        project_factory.write_biome({
            "formatter": {"enabled": False},
            "plugins": ["./custom.grit", HCNC_PLUGINS[0]],
        })

        result = BiomeInitializer(project_factory.root).init()

        assert not result.created
        assert result.added == 1
        config = project_factory.read_biome()
        assert config["plugins"] == ["./custom.grit", HCNC_PLUGINS[0], HCNC_PLUGINS[1]]
        assert config["formatter"] == {"enabled": False}

    def test_adds_plugins_key(self, project_factory):
        project_factory.write_biome({"linter": {"enabled": True}})
        result = BiomeInitializer(project_factory.root).init()
        assert result.added == 2
        assert project_factory.read_biome()["plugins"] == list(HCNC_PLUGINS)

    def test_idempotent(self, project_factory):
        BiomeInitializer(project_factory.root).init()
        path = project_factory.root / "biome.json"
        before = path.read_text(encoding="utf-8")

        result = BiomeInitializer(project_factory.root).init()

        assert not result.changed
        assert path.read_text(encoding="utf-8") == before

    def test_custom_plugin_list(self, project_factory):
        result = BiomeInitializer(project_factory.root, plugins=["./a.grit"]).init()
        assert result.added == 1
        assert project_factory.read_biome()["plugins"] == ["./a.grit"]


class TestErrors:
    """Malformed existing files are never overwritten."""

    @pytest.mark.parametrize("content,fragment", [
        ("{not json", "Error updating"),
        ("[1, 2]", "must contain a JSON object"),
        (json.dumps({"plugins": "x.grit"}), "must be a list"),
    ])
    def test_rejects(self, project_factory, content, fragment):
        path = project_factory.add_file("biome.json", content)

        with pytest.raises(BiomeConfigError, match=fragment):
            BiomeInitializer(project_factory.root).init()

        assert path.read_text(encoding="utf-8") == content
