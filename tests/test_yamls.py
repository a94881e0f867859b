import pytest

from classnull.files.yamls import load_settings, save_settings


DEFAULTS = {"min_level": "debug", "timestamps": True}


def test_save_then_load(tmp_path):
    """Test that saved settings are read back over defaults."""
    save_settings(tmp_path / "log", {"min_level": "error"})
    assert (tmp_path / "log.yaml").is_file()
    settings = load_settings(tmp_path / "log", DEFAULTS)
    assert settings == {"min_level": "error", "timestamps": True}


def test_missing_file_returns_copy_of_defaults(tmp_path):
    """Test that defaults are returned unchanged and not shared."""
    settings = load_settings(tmp_path / "missing.yaml", DEFAULTS)
    assert settings == DEFAULTS
    assert settings is not DEFAULTS


def test_empty_file_returns_defaults(tmp_path):
    """Test that an empty document leaves defaults untouched."""
    (tmp_path / "empty.yaml").write_text("")
    assert load_settings(tmp_path / "empty.yaml", DEFAULTS) == DEFAULTS


def test_unknown_keys_warn(tmp_path):
    """Test that unrecognized keys are dropped with a warning."""
    (tmp_path / "log.yaml").write_text("min_level: info\ncolour: red\n")
    with pytest.warns(UserWarning, match="colour"):
        settings = load_settings(tmp_path / "log.yaml", DEFAULTS)
    assert settings == {"min_level": "info", "timestamps": True}


def test_non_mapping_raises(tmp_path):
    """Test that a yaml list is rejected."""
    (tmp_path / "log.yaml").write_text("- debug\n- info\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_settings(tmp_path / "log.yaml", DEFAULTS)
