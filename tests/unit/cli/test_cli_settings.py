"""Unit tests for CLI configuration loading and the argument parser."""

import argparse
import json

import pytest

from doccompare.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from doccompare.cli.config import (
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)
from doccompare.constants import CONFIG_ENV_VAR
from doccompare.exceptions import (
    DependencyError,
    DocCompareError,
    IdenticalInputsError,
    MalformedFileError,
    SourceNotFoundError,
    TypeMismatchError,
    UnsupportedKindError,
)


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_toml(self, temp_dir):
        """Test a dedicated TOML config."""
        path = temp_dir / ".doccompare.toml"
        path.write_text('strategy = "positional"\nrich = true\npdf_pages = [1, 2]\n', encoding="utf-8")
        assert load_config_file(path) == {"strategy": "positional", "rich": True, "pdf_pages": [1, 2]}

    def test_yaml(self, temp_dir):
        """Test a dedicated YAML config."""
        path = temp_dir / ".doccompare.yaml"
        path.write_text("strategy: positional\nformat: json\n", encoding="utf-8")
        assert load_config_file(path) == {"strategy": "positional", "format": "json"}

    def test_empty_yaml(self, temp_dir):
        """Test an empty YAML file is an empty config."""
        path = temp_dir / ".doccompare.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, temp_dir):
        """Test a dedicated JSON config."""
        path = temp_dir / ".doccompare.json"
        path.write_text(json.dumps({"log_level": "INFO"}), encoding="utf-8")
        assert load_config_file(path) == {"log_level": "INFO"}

    def test_pyproject_section(self, temp_dir):
        """Test the [tool.doccompare] section of pyproject.toml."""
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.doccompare]\nformat = "json"\n', encoding="utf-8")
        assert load_config_file(path) == {"format": "json"}

    def test_pyproject_without_section(self, temp_dir):
        """Test a pyproject.toml without the section is empty."""
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.toml", "strategy = "),
            ("bad.json", "{not json"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- a\n- b\n"),
            ("config.ini", "[section]"),
        ],
    )
    def test_invalid_files(self, temp_dir, name, content):
        """Test unreadable or unsupported config files."""
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(path)

    def test_missing_file(self, temp_dir):
        """Test a missing config file."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(temp_dir / "nope.toml")


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Tests for config discovery and priority."""

    def test_found_in_parent_directory(self, temp_dir):
        """Test discovery walks up from a nested directory."""
        config = temp_dir / ".doccompare.toml"
        config.write_text('strategy = "positional"\n', encoding="utf-8")
        nested = temp_dir / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_pyproject_needs_section(self, temp_dir):
        """Test a pyproject.toml without [tool.doccompare] is skipped."""
        (temp_dir / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        inner = temp_dir / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text('[tool.doccompare]\nrich = true\n', encoding="utf-8")
        assert find_config_in_parents(inner) == (inner / "pyproject.toml").resolve()

    def test_explicit_path_filters_unknown_keys(self, temp_dir):
        """Test only recognized keys are kept."""
        config = temp_dir / "custom.toml"
        config.write_text('strategy = "positional"\nunrelated = 1\n', encoding="utf-8")
        assert load_config_with_priority(str(config)) == {"strategy": "positional"}

    def test_environment_variable(self, temp_dir, monkeypatch):
        """Test the environment variable names the config file."""
        config = temp_dir / "env.json"
        config.write_text(json.dumps({"format": "json"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert load_config_with_priority() == {"format": "json"}

    def test_explicit_beats_environment(self, temp_dir, monkeypatch):
        """Test --config wins over the environment variable."""
        env_config = temp_dir / "env.json"
        env_config.write_text(json.dumps({"format": "json"}), encoding="utf-8")
        explicit = temp_dir / "explicit.json"
        explicit.write_text(json.dumps({"format": "text"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_config))
        assert load_config_with_priority(str(explicit)) == {"format": "text"}

    def test_no_config(self, temp_dir, monkeypatch):
        """Test --no-config ignores the environment variable."""
        config = temp_dir / "env.json"
        config.write_text(json.dumps({"format": "json"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert load_config_with_priority(no_config=True) == {}

    @pytest.mark.parametrize("raw,expected", [("false", False), ("Yes", True), ("0", False), (True, True)])
    def test_boolean_keys_are_coerced(self, temp_dir, raw, expected):
        """Test boolean keys accept the usual string spellings."""
        config = temp_dir / "flags.json"
        config.write_text(json.dumps({"rich": raw, "log_changes": raw}), encoding="utf-8")
        assert load_config_with_priority(str(config)) == {"rich": expected, "log_changes": expected}

    @pytest.mark.parametrize("raw", ["maybe", 1, None])
    def test_invalid_boolean_value(self, temp_dir, raw):
        """Test unrecognized boolean values are rejected."""
        config = temp_dir / "flags.json"
        config.write_text(json.dumps({"rich": raw}), encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="must be a boolean"):
            load_config_with_priority(str(config))

    def test_merge_configs(self):
        """Test override values win and nested tables merge."""
        merged = merge_configs({"strategy": "resync", "extra": {"a": 1}}, {"strategy": "positional", "extra": {"b": 2}})
        assert merged == {"strategy": "positional", "extra": {"a": 1, "b": 2}}


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Tests for create_parser()."""

    def test_defaults_are_none_for_configurable_options(self):
        """Test config-backed options default to None."""
        args = create_parser().parse_args(["a.txt", "b.txt"])
        assert args.original == "a.txt"
        assert args.modified == "b.txt"
        assert args.strategy is None
        assert args.format is None
        assert args.rich is None
        assert args.log_changes is None
        assert args.max_attempts == 3

    def test_paths_are_optional(self):
        """Test paths may be omitted for interactive use."""
        args = create_parser().parse_args(["--interactive"])
        assert args.original is None
        assert args.interactive is True

    def test_pdf_pages(self):
        """Test the page list parser."""
        args = create_parser().parse_args(["a.pdf", "b.pdf", "--pdf-pages", "1,3"])
        assert args.pdf_pages == [1, 3]

    @pytest.mark.parametrize("value", ["0", "a,b", ","])
    def test_invalid_pdf_pages(self, value):
        """Test bad page lists are rejected by argparse."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["a.pdf", "b.pdf", "--pdf-pages", value])

    def test_log_level_case_insensitive(self):
        """Test --log-level accepts lowercase names."""
        assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("pdf", [("pymupdf", "")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (IdenticalInputsError("a.txt"), EXIT_VALIDATION_ERROR),
            (SourceNotFoundError("a.txt"), EXIT_FILE_ERROR),
            (MalformedFileError("bad", file_path="a.pdf"), EXIT_FILE_ERROR),
            (TypeMismatchError(".txt", ".pdf"), EXIT_FORMAT_ERROR),
            (UnsupportedKindError(".md"), EXIT_FORMAT_ERROR),
            (DocCompareError("other"), EXIT_ERROR),
            (RuntimeError("other"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        """Test each error family maps to its exit code."""
        assert get_exit_code_for_exception(exception) == code
