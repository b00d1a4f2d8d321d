"""Unit tests for the formatter configuration and settings file discovery."""

import pytest

from hongdown.cli.config import discover_config, find_config_in_parents
from hongdown.exceptions import ConfigParseError, ConfigReadError, ConfigValidationError
from hongdown.options.config import (
    CodeBlockConfig,
    Config,
    HeadingConfig,
    ListConfig,
    OrderedListConfig,
)


@pytest.mark.unit
class TestConfigDefaults:
    """Test the built-in house style."""

    def test_defaults(self):
        config = Config()
        assert config.line_width == 80
        assert config.heading.setext_h1 and config.heading.setext_h2
        assert config.list.unordered_marker == "-"
        assert (config.list.leading_spaces, config.list.trailing_spaces, config.list.indent_width) == (1, 2, 4)
        assert (config.ordered_list.odd_level_marker, config.ordered_list.even_level_marker) == (".", ")")
        assert config.code_block.fence_char == "~"
        assert config.code_block.min_fence_length == 4
        assert config.code_block.space_after_fence
        assert config.code_block.default_language == "text"

    def test_marker_for_depth(self):
        ordered = OrderedListConfig()
        assert [ordered.marker_for_depth(d) for d in (1, 2, 3, 4)] == [".", ")", ".", ")"]

    def test_create_updated(self):
        config = Config().create_updated(line_width=100)
        assert config.line_width == 100
        assert config.list == ListConfig()

    def test_to_dict_round_trip(self):
        config = Config(list=ListConfig(unordered_marker="+"), code_block=CodeBlockConfig(fence_char="`"))
        assert Config.from_dict(config.to_dict()) == config


@pytest.mark.unit
class TestConfigValidation:
    """Test value validation on construction."""

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: ListConfig(unordered_marker="x"),
            lambda: ListConfig(indent_width=-1),
            lambda: ListConfig(leading_spaces=-2),
            lambda: OrderedListConfig(odd_level_marker="-"),
            lambda: CodeBlockConfig(fence_char="="),
            lambda: CodeBlockConfig(min_fence_length=0),
            lambda: Config(line_width=0),
        ],
    )
    def test_invalid_values(self, factory):
        with pytest.raises(ConfigValidationError):
            factory()

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ListConfig(trailing_spaces=-1)

    @pytest.mark.parametrize(
        "factory,field_name",
        [
            (lambda: HeadingConfig(setext_h1="no"), "heading.setext_h1"),
            (lambda: HeadingConfig(setext_h2=1), "heading.setext_h2"),
            (lambda: CodeBlockConfig(space_after_fence="false"), "code_block.space_after_fence"),
            (lambda: CodeBlockConfig(default_language=None), "code_block.default_language"),
            (lambda: CodeBlockConfig(min_fence_length=True), "code_block.min_fence_length"),
            (lambda: ListConfig(indent_width="4"), "list.indent_width"),
            (lambda: Config(line_width=80.0), "line_width"),
            (lambda: Config(heading={"setext_h1": False}), "heading"),
        ],
    )
    def test_wrong_types_rejected(self, factory, field_name):
        with pytest.raises(ConfigValidationError) as exc_info:
            factory()
        assert exc_info.value.field_name == field_name

    def test_validation_error_names_field(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            ListConfig(indent_width=-1)
        assert exc_info.value.field_name == "list.indent_width"


@pytest.mark.unit
class TestConfigFromToml:
    """Test parsing settings files."""

    def test_empty(self):
        assert Config.from_toml("") == Config()

    def test_partial(self):
        config = Config.from_toml('line_width = 100\n[list]\nunordered_marker = "*"\n')
        assert config.line_width == 100
        assert config.list.unordered_marker == "*"
        assert config.list.indent_width == 4
        assert config.heading == HeadingConfig()

    def test_all_sections(self):
        text = (
            "[heading]\nsetext_h1 = false\n"
            "[ordered_list]\nodd_level_marker = ')'\n"
            "[code_block]\nfence_char = '`'\nmin_fence_length = 3\nspace_after_fence = false\n"
            "default_language = ''\n"
        )
        config = Config.from_toml(text)
        assert not config.heading.setext_h1
        assert config.ordered_list.odd_level_marker == ")"
        assert config.code_block == CodeBlockConfig(
            fence_char="`", min_fence_length=3, space_after_fence=False, default_language=""
        )

    def test_invalid_toml(self):
        with pytest.raises(ConfigParseError) as exc_info:
            Config.from_toml("line_width = = 3", path="bad.toml")
        assert exc_info.value.file_path == "bad.toml"
        assert "bad.toml" in str(exc_info.value)

    @pytest.mark.parametrize(
        "text",
        [
            "unknown = 1",
            "[list]\nbogus = 1",
            "[list]\nindent_width = '4'",
            "[list]\nindent_width = true",
            "[heading]\nsetext_h1 = 1",
            "list = 3",
            "[code_block]\nfence_char = '#'",
            "line_width = -5",
        ],
    )
    def test_invalid_settings(self, text):
        with pytest.raises(ConfigParseError):
            Config.from_toml(text)

    def test_unknown_key_named_in_message(self):
        with pytest.raises(ConfigParseError) as exc_info:
            Config.from_toml("[list]\nbogus = 1")
        assert "list.bogus" in exc_info.value.diagnostic


@pytest.mark.unit
class TestConfigFromFile:
    """Test loading settings files from disk."""

    def test_from_file(self, tmp_path):
        path = tmp_path / ".hongdown.toml"
        path.write_text("[code_block]\ndefault_language = 'sh'\n", encoding="utf-8")
        assert Config.from_file(path).code_block.default_language == "sh"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigReadError) as exc_info:
            Config.from_file(tmp_path / "nope.toml")
        assert isinstance(exc_info.value.original_error, OSError)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test settings file discovery through parent directories."""

    def test_found_in_start_dir(self, tmp_path):
        config_file = tmp_path / ".hongdown.toml"
        config_file.write_text("line_width = 70\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config_file.resolve()

    def test_found_in_ancestor(self, tmp_path):
        config_file = tmp_path / ".hongdown.toml"
        config_file.write_text("line_width = 70\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config_file.resolve()

    def test_nearest_wins(self, tmp_path):
        (tmp_path / ".hongdown.toml").write_text("line_width = 70\n", encoding="utf-8")
        nested = tmp_path / "sub"
        nested.mkdir()
        (nested / ".hongdown.toml").write_text("line_width = 60\n", encoding="utf-8")
        path, config = discover_config(nested)
        assert path == (nested / ".hongdown.toml").resolve()
        assert config.line_width == 60

    def test_directory_named_like_config_ignored(self, tmp_path):
        (tmp_path / ".hongdown.toml").mkdir()
        found = find_config_in_parents(tmp_path)
        assert found is None or found.parent != tmp_path.resolve()

    def test_defaults_when_missing(self, tmp_path, monkeypatch):
        monkeypatch.setattr("hongdown.cli.config.find_config_in_parents", lambda start_dir=None: None)
        assert discover_config(tmp_path) is None

    def test_uses_cwd_by_default(self, isolated_cwd):
        (isolated_cwd / ".hongdown.toml").write_text("line_width = 90\n", encoding="utf-8")
        assert find_config_in_parents() == (isolated_cwd / ".hongdown.toml").resolve()

    def test_invalid_discovered_file(self, tmp_path):
        (tmp_path / ".hongdown.toml").write_text("[list]\nunordered_marker = 'x'\n", encoding="utf-8")
        with pytest.raises(ConfigParseError):
            discover_config(tmp_path)
