"""
Tests for scalar configuration.
"""

import pytest

from colscalar import (
    Int8Scalar,
    ScalarConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)


class TestScalarConfig:
    """Test defaults and validation."""

    def test_defaults(self) -> None:
        config = ScalarConfig()
        assert config.null_token == "null"
        assert config.binary_uppercase is True
        assert config.default_integer_type == "int64"
        assert config.default_float_type == "double"
        config.validate()

    @pytest.mark.parametrize("token", ["", "  ", "0", "-128", "1.5", "1e5", "true", "NaN", "-inf"])
    def test_colliding_null_token_rejected(self, token: str) -> None:
        with pytest.raises(ValueError, match="null_token"):
            ScalarConfig(null_token=token).validate()

    @pytest.mark.parametrize("token", ["null", "NULL", "<NA>", "None"])
    def test_valid_null_tokens(self, token: str) -> None:
        ScalarConfig(null_token=token).validate()

    def test_default_integer_type_family(self) -> None:
        with pytest.raises(ValueError, match="default_integer_type"):
            ScalarConfig(default_integer_type="double").validate()

    def test_default_float_type_family(self) -> None:
        with pytest.raises(ValueError, match="default_float_type"):
            ScalarConfig(default_float_type="int8").validate()

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ScalarConfig().null_token = "x"


class TestActiveConfig:
    """Test process-wide configuration."""

    def test_set_overrides(self) -> None:
        set_config(null_token="<NA>")
        assert get_config().null_token == "<NA>"
        assert str(Int8Scalar()) == "<NA>"

    def test_set_invalid_keeps_previous(self) -> None:
        with pytest.raises(ValueError):
            set_config(null_token="0")
        assert get_config().null_token == "null"

    def test_set_whole_config(self) -> None:
        set_config(ScalarConfig(binary_uppercase=False))
        assert get_config().binary_uppercase is False

    def test_reset(self) -> None:
        set_config(null_token="<NA>")
        reset_config()
        assert get_config() == ScalarConfig()


class TestLoadConfig:
    """Test YAML loading."""

    def test_load(self, tmp_path) -> None:
        path = tmp_path / "scalars.yaml"
        path.write_text("null_token: NA\nbinary_uppercase: false\n")
        config = load_config(str(path))
        assert config.null_token == "NA"
        assert config.binary_uppercase is False
        assert config.default_integer_type == "int64"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == ScalarConfig()

    def test_non_mapping_rejected(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))

    def test_unknown_keys_ignored(self, tmp_path, caplog) -> None:
        path = tmp_path / "extra.yaml"
        path.write_text("null_token: NA\ncolour: blue\n")
        with caplog.at_level("WARNING"):
            config = load_config(str(path))
        assert config.null_token == "NA"
        assert "colour" in caplog.text

    def test_invalid_values_rejected(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("null_token: '42'\n")
        with pytest.raises(ValueError):
            load_config(str(path))


def test_unknown_default_type_is_value_error():
    """Unknown type names surface as ValueError from validate()."""
    with pytest.raises(ValueError, match="Invalid default type"):
        ScalarConfig(default_integer_type="int7").validate()


@pytest.mark.parametrize("token", ["AB", "ab", "00", "DEADBEEF"])
def test_hex_null_token_rejected(token):
    """Even-length hex tokens would read as a binary rendering."""
    with pytest.raises(ValueError, match="collides"):
        ScalarConfig(null_token=token).validate()


@pytest.mark.parametrize("token", ["ABC", "A", "NA"])
def test_non_binary_hex_like_tokens_allowed(token):
    ScalarConfig(null_token=token).validate()


def test_malformed_yaml_is_value_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("null_token: [NA\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(str(path))
