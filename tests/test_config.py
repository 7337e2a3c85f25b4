"""
Tests for settings loading — sitebundle.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from sitebundle.core.config.loader import ConfigError, find_settings_file, load_settings
from sitebundle.core.use_cases.config_check import check_settings


@pytest.fixture
def valid_settings_yml(tmp_path: Path) -> Path:
    """Create a valid sitebundle.yml in a temp directory."""
    content = textwrap.dedent("""\
        out_dir: dist
        mode: development
        sites:
          - name: main
            packages:
              - "@frontity/mars-theme"
              - name: "@frontity/wp-source"
                state:
                  source:
                    url: https://example.com
          - name: amp
            mode: amp
            packages:
              - "@frontity/mars-theme"
    """)
    path = tmp_path / "sitebundle.yml"
    path.write_text(content)
    return path


@pytest.fixture
def single_site_yml(tmp_path: Path) -> Path:
    """Create a sitebundle.yml holding one site at top level."""
    content = textwrap.dedent("""\
        name: blog
        packages:
          - theme
    """)
    path = tmp_path / "sitebundle.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_load_valid_settings(self, valid_settings_yml: Path):
        settings = load_settings(valid_settings_yml)
        assert settings.mode == "development"
        assert len(settings.sites) == 2

    def test_package_entries_normalized(self, valid_settings_yml: Path):
        settings = load_settings(valid_settings_yml)
        main = settings.sites[0]
        assert main.name == "main"
        assert main.packages == ("@frontity/mars-theme", "@frontity/wp-source")
        assert main.mode == "default"

    def test_site_mode(self, valid_settings_yml: Path):
        amp = load_settings(valid_settings_yml).sites[1]
        assert amp.name == "amp"
        assert amp.mode == "amp"

    def test_paths_resolved_against_settings_dir(self, valid_settings_yml: Path):
        settings = load_settings(valid_settings_yml)
        base = valid_settings_yml.parent.resolve()
        assert settings.out_dir == str(base / "dist")
        assert settings.package_root == str(base / "node_modules")

    def test_defaults(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text("sites: []\n")
        settings = load_settings(path)
        assert settings.mode == "production"
        assert settings.runtime == "@frontity/core"
        assert settings.out_dir.endswith("build")

    def test_single_site_at_top_level(self, single_site_yml: Path):
        settings = load_settings(single_site_yml)
        assert [s.name for s in settings.sites] == ["blog"]
        assert settings.sites[0].packages == ("theme",)
        assert settings.mode == "production"

    def test_sites_as_mapping(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text("sites:\n  name: solo\n  mode: amp\n  packages: [a]\n")
        settings = load_settings(path)
        assert settings.sites[0].mode == "amp"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text("- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_package_entry_without_name_raises(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text("sites:\n  - name: x\n    packages:\n      - state: {}\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_auto_search_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        with pytest.raises(ConfigError, match=r"No sitebundle\.yml found"):
            load_settings(None)


class TestFindSettingsFile:
    """Tests for find_settings_file()."""

    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "sitebundle.yml").write_text("sites: []\n")
        result = find_settings_file(tmp_path)
        assert result is not None
        assert result.name == "sitebundle.yml"

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "sitebundle.yml").write_text("sites: []\n")
        subdir = tmp_path / "packages" / "theme"
        subdir.mkdir(parents=True)
        result = find_settings_file(subdir)
        assert result is not None
        assert result.parent == tmp_path.resolve()

    def test_not_found_returns_none(self, tmp_path: Path):
        subdir = tmp_path / "deep" / "nested"
        subdir.mkdir(parents=True)
        assert find_settings_file(subdir) is None


class TestCheckSettings:
    """Tests for check_settings()."""

    def _write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "sitebundle.yml"
        path.write_text(textwrap.dedent(content))
        (tmp_path / "node_modules").mkdir(exist_ok=True)
        return path

    def test_valid(self, tmp_path: Path):
        path = self._write(tmp_path, """\
            sites:
              - name: main
                packages: [theme]
        """)
        result = check_settings(path)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_duplicate_site_names(self, tmp_path: Path):
        path = self._write(tmp_path, """\
            sites:
              - name: main
                packages: [a]
              - name: main
                packages: [b]
        """)
        result = check_settings(path)
        assert not result.valid
        assert any("Duplicate site names: main" in e for e in result.errors)

    @pytest.mark.parametrize("bad", ["a/b", "..", "."])
    def test_unusable_site_name(self, tmp_path: Path, bad: str):
        path = self._write(tmp_path, f"sites:\n  - name: '{bad}'\n    packages: [a]\n")
        result = check_settings(path)
        assert not result.valid

    def test_warnings(self, tmp_path: Path):
        path = tmp_path / "sitebundle.yml"
        path.write_text("sites:\n  - name: empty\n")
        result = check_settings(path)
        assert result.valid
        assert any("has no packages" in w for w in result.warnings)
        assert any("Package root does not exist" in w for w in result.warnings)

    def test_invalid_file(self, tmp_path: Path):
        path = self._write(tmp_path, "- nope\n")
        result = check_settings(path)
        assert not result.valid
        assert result.to_dict()["site_count"] == 0
