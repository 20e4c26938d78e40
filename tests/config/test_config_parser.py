"""Unit tests for configuration parser."""

import pytest
from pathlib import Path

from ultralightkit.config.parser import (
    UltralightKitConfig,
    parse_config,
    parse_config_data,
)
from ultralightkit.core.exceptions import ConfigError
from ultralightkit.core.platform import Platform
from ultralightkit.sdk.categories import AssetCategory


@pytest.mark.unit
def test_parse_sample_config(sample_config_yaml):
    """Test parsing a complete configuration file."""
    # Act
    config = parse_config(sample_config_yaml)

    # Assert
    base = sample_config_yaml.parent
    request = config.request
    assert request.version == "1.3.0"
    assert request.platform is Platform.LINUX
    assert request.out_dir == base / "build"
    assert config.timeout == 60.0
    assert request.headers.wanted
    assert request.headers.out_dir is None
    assert request.resources.wanted
    assert request.resources.out_dir == base / "assets" / "resources"
    assert not request.binaries.wanted
    assert not request.libs.wanted
    assert request.wanted_categories() == [
        AssetCategory.HEADERS,
        AssetCategory.RESOURCES,
    ]


@pytest.mark.unit
def test_parse_empty_file(tmp_path):
    """Test an empty file yields defaults."""
    config_file = tmp_path / "ultralight.yaml"
    config_file.write_text("")

    config = parse_config(config_file)

    assert config == UltralightKitConfig()
    assert config.request.wanted_categories() == []


@pytest.mark.unit
def test_missing_file(tmp_path):
    """Test a missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        parse_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_unreadable_path(tmp_path):
    """Test a path that cannot be read as a file raises ConfigError."""
    with pytest.raises(ConfigError, match="Cannot read"):
        parse_config(tmp_path)


@pytest.mark.unit
def test_invalid_yaml(tmp_path):
    """Test invalid YAML raises ConfigError."""
    config_file = tmp_path / "ultralight.yaml"
    config_file.write_text("categories: [unclosed")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config(config_file)


@pytest.mark.unit
def test_non_mapping_root(tmp_path):
    """Test a list root raises ConfigError."""
    config_file = tmp_path / "ultralight.yaml"
    config_file.write_text("- headers\n- binaries\n")

    with pytest.raises(ConfigError, match="mapping"):
        parse_config(config_file)


@pytest.mark.unit
def test_numeric_version_coerced():
    """Test an unquoted version number becomes a string."""
    config = parse_config_data({"version": 1.3})
    assert config.request.version == "1.3"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["mac", "Darwin", "win"])
def test_platform_aliases(name):
    """Test platform aliases are accepted."""
    config = parse_config_data({"platform": name})
    assert config.request.platform is not None


@pytest.mark.unit
def test_unknown_platform():
    """Test an unknown platform raises ConfigError."""
    with pytest.raises(ConfigError, match="amiga"):
        parse_config_data({"platform": "amiga"})


@pytest.mark.unit
@pytest.mark.parametrize("timeout", [0, -5, "fast", True])
def test_invalid_timeout(timeout):
    """Test non-positive and non-numeric timeouts are rejected."""
    with pytest.raises(ConfigError, match="timeout"):
        parse_config_data({"timeout": timeout})


@pytest.mark.unit
def test_unknown_category():
    """Test unknown category names are rejected."""
    with pytest.raises(ConfigError, match="Unknown category: docs"):
        parse_config_data({"categories": {"docs": True}})


@pytest.mark.unit
def test_categories_must_be_mapping():
    """Test a list of categories is rejected."""
    with pytest.raises(ConfigError, match="dictionary"):
        parse_config_data({"categories": ["headers"]})


@pytest.mark.unit
def test_category_mapping_defaults_to_wanted(tmp_path):
    """Test a category mapping without 'wanted' is wanted."""
    config = parse_config_data(
        {"categories": {"libs": {"out_dir": "win/lib"}}}, base_dir=tmp_path
    )

    assert config.request.libs.wanted
    assert config.request.libs.out_dir == tmp_path / "win" / "lib"


@pytest.mark.unit
def test_category_explicitly_unwanted():
    """Test a category mapping can opt out."""
    config = parse_config_data(
        {"categories": {"binaries": {"wanted": False, "out_dir": "/abs/bin"}}}
    )

    assert not config.request.binaries.wanted
    assert config.request.binaries.out_dir == Path("/abs/bin")


@pytest.mark.unit
@pytest.mark.parametrize("value", ["yes-please", 3, ["a"]])
def test_invalid_category_value(value):
    """Test category entries must be booleans or mappings."""
    with pytest.raises(ConfigError, match="categories.headers"):
        parse_config_data({"categories": {"headers": value}})


@pytest.mark.unit
def test_invalid_path():
    """Test an empty path string is rejected."""
    with pytest.raises(ConfigError, match="path"):
        parse_config_data({"out_dir": ""})
