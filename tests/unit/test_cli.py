"""Unit tests for the md-video-embed command line interface."""

import argparse
import io
import json

import pytest

from md_video_embed.cli import create_parser, discover_config_file, load_config_file, main, merge_cli_overrides
from md_video_embed.constants import EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, EXIT_SUCCESS
from md_video_embed.exceptions import ConfigFileError

VIDEO_MARKDOWN = "```video-embed source=youtube\ntest123\ntitle=Demo\n```\n"


def namespace(**kwargs) -> argparse.Namespace:
    defaults = {"youtube_mode": None, "use_default_css": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Test configuration file loading."""

    def test_toml(self, tmp_path) -> None:
        """Test TOML tables become provider options."""
        path = tmp_path / "config.toml"
        path.write_text('[youtube]\nmode = "embedlite"\nuse_default_css = true\n', encoding="utf-8")

        assert load_config_file(path) == {"youtube": {"mode": "embedlite", "use_default_css": True}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path, suffix: str) -> None:
        """Test YAML configuration files."""
        path = tmp_path / f"config{suffix}"
        path.write_text("youtube:\n  consent_message: See [policy](/privacy)\n", encoding="utf-8")

        assert load_config_file(path) == {"youtube": {"consent_message": "See [policy](/privacy)"}}

    def test_empty_yaml(self, tmp_path) -> None:
        """Test an empty YAML file gives no options."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_json(self, tmp_path) -> None:
        """Test JSON configuration files."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"youtube": {"mode": "local"}}), encoding="utf-8")

        assert load_config_file(str(path)) == {"youtube": {"mode": "local"}}

    def test_missing_file(self, tmp_path) -> None:
        """Test a missing file raises ConfigFileError."""
        with pytest.raises(ConfigFileError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_unsupported_extension(self, tmp_path) -> None:
        """Test unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[youtube]\n", encoding="utf-8")

        with pytest.raises(ConfigFileError, match="Unsupported config file format"):
            load_config_file(path)

    def test_invalid_toml(self, tmp_path) -> None:
        """Test parse errors keep the original exception."""
        path = tmp_path / "config.toml"
        path.write_text("[youtube\n", encoding="utf-8")

        with pytest.raises(ConfigFileError) as exc_info:
            load_config_file(path)

        assert exc_info.value.original_error is not None
        assert exc_info.value.file_path == str(path)

    def test_non_mapping(self, tmp_path) -> None:
        """Test top-level values other than mappings are rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigFileError, match="must contain a mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestDiscoverConfigFile:
    """Test configuration discovery."""

    def test_none_found(self, tmp_path) -> None:
        """Test an empty directory has no configuration."""
        assert discover_config_file(tmp_path) is None

    def test_priority_order(self, tmp_path) -> None:
        """Test TOML is preferred over YAML and JSON."""
        (tmp_path / ".md-video-embed.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".md-video-embed.yaml").write_text("{}", encoding="utf-8")
        (tmp_path / ".md-video-embed.toml").write_text("", encoding="utf-8")

        assert discover_config_file(tmp_path) == tmp_path / ".md-video-embed.toml"

    def test_uses_cwd(self, tmp_path, monkeypatch) -> None:
        """Test the working directory is searched by default."""
        (tmp_path / ".md-video-embed.yml").write_text("{}", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert discover_config_file() == tmp_path / ".md-video-embed.yml"


@pytest.mark.unit
@pytest.mark.cli
class TestMergeCliOverrides:
    """Test command line overrides."""

    def test_no_overrides(self) -> None:
        """Test file configuration is returned as-is."""
        config = {"youtube": {"mode": "local"}}

        assert merge_cli_overrides(config, namespace()) == config

    def test_overrides_applied(self) -> None:
        """Test flags override file values without mutating them."""
        config = {"youtube": {"mode": "local", "button_text": "Go"}}

        merged = merge_cli_overrides(config, namespace(youtube_mode="embedlite", use_default_css=True))

        assert merged == {"youtube": {"mode": "embedlite", "button_text": "Go", "use_default_css": True}}
        assert config == {"youtube": {"mode": "local", "button_text": "Go"}}

    def test_overrides_without_file(self) -> None:
        """Test flags create the youtube table when missing."""
        merged = merge_cli_overrides({}, namespace(youtube_mode="embedlite"))

        assert merged == {"youtube": {"mode": "embedlite"}}

    def test_malformed_table_left_for_validation(self) -> None:
        """Test a non-mapping youtube entry is not overridden."""
        merged = merge_cli_overrides({"youtube": "bad"}, namespace(youtube_mode="embedlite"))

        assert merged == {"youtube": "bad"}


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test the main entry point."""

    def test_parser_defaults(self) -> None:
        """Test default argument values."""
        parsed = create_parser().parse_args(["doc.md"])

        assert parsed.input == "doc.md"
        assert parsed.output is None
        assert parsed.log_level == "WARNING"
        assert parsed.standalone is False

    def test_version(self, capsys) -> None:
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "md-video-embed" in capsys.readouterr().out

    def test_convert_file_to_stdout(self, tmp_path, monkeypatch, capsys) -> None:
        """Test converting a file prints HTML."""
        monkeypatch.chdir(tmp_path)
        source = tmp_path / "doc.md"
        source.write_text(VIDEO_MARKDOWN, encoding="utf-8")

        assert main([str(source)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert 'data-video-embed-id="test123"' in out
        assert "<script>" in out

    def test_convert_stdin_to_file(self, tmp_path, monkeypatch) -> None:
        """Test reading stdin and writing an output file."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.stdin", io.StringIO(VIDEO_MARKDOWN))
        target = tmp_path / "out.html"

        assert main(["-", "-o", str(target), "--youtube-mode", "embedlite"]) == EXIT_SUCCESS

        html = target.read_text(encoding="utf-8")
        assert "embedlite.com/embed/test123" in html
        assert "<script>" not in html

    def test_discovered_config(self, tmp_path, monkeypatch, capsys) -> None:
        """Test a configuration file in the working directory is used."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".md-video-embed.toml").write_text("[youtube]\nuse_default_css = true\n", encoding="utf-8")
        (tmp_path / "doc.md").write_text(VIDEO_MARKDOWN, encoding="utf-8")

        assert main(["doc.md"]) == EXIT_SUCCESS
        assert "<style>" in capsys.readouterr().out

    def test_standalone(self, tmp_path, monkeypatch, capsys) -> None:
        """Test --standalone wraps the output."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "doc.md").write_text("# Hi\n", encoding="utf-8")

        assert main(["doc.md", "--standalone", "--title", "Page"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert "<title>Page</title>" in out

    def test_invalid_provider_config(self, tmp_path, monkeypatch, capsys) -> None:
        """Test rejected provider options exit with the configuration code."""
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"youtube": {"mode": "invalid"}}), encoding="utf-8")
        (tmp_path / "doc.md").write_text(VIDEO_MARKDOWN, encoding="utf-8")

        assert main(["doc.md", "--config", str(config)]) == EXIT_CONFIG_ERROR
        assert "Invalid configuration for youtube" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, monkeypatch, capsys) -> None:
        """Test an explicit missing configuration file is a configuration error."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "doc.md").write_text(VIDEO_MARKDOWN, encoding="utf-8")

        assert main(["doc.md", "--config", "missing.toml"]) == EXIT_CONFIG_ERROR

    def test_missing_input(self, tmp_path, monkeypatch, capsys) -> None:
        """Test a missing input file exits with the input error code."""
        monkeypatch.chdir(tmp_path)

        assert main(["missing.md"]) == EXIT_INPUT_ERROR
        assert "Error reading input" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path, monkeypatch) -> None:
        """Test output errors exit with the input error code."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "doc.md").write_text("x\n", encoding="utf-8")

        assert main(["doc.md", "-o", str(tmp_path / "no" / "such" / "dir.html")]) == EXIT_INPUT_ERROR
