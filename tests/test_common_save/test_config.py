import pytest
from pathlib import Path
from pydantic import ValidationError
from common_save.config import CommonSaveConfig, parse_target_indexes, parse_bool
from common_save.storage import StorageMode

@pytest.mark.parametrize("text, expected", [
    ("1,2", [1, 2]),
    ("1,x,3", [1, 3]),
    (" 4 , 5 ,6 ", [4, 5, 6]),
    ("7,,8,", [7, 8]),
    ("a,b", []),
    ("10,-2,2.5,11", [10, 11]),
    ("", []),
    (None, []),
])
def test_parse_target_indexes(text, expected):
    assert parse_target_indexes(text) == expected

def test_parse_keeps_order():
    assert parse_target_indexes("30,2,15") == [30, 2, 15]

def test_parse_keeps_repeated_indexes():
    assert parse_target_indexes("3,1,3") == [3, 1, 3]

def test_invalid_token_logged(caplog):
    parse_target_indexes("1,x,3")
    assert "'x'" in caplog.text

@pytest.mark.parametrize("text, expected", [
    ("true", True),
    ("TRUE", True),
    (" true ", True),
    ("false", False),
    ("yes", False),
    ("", False),
    (True, True),
])
def test_parse_bool(text, expected):
    assert parse_bool(text) is expected

def test_defaults():
    config = CommonSaveConfig.from_parameters({})
    assert config.target_switches == []
    assert config.target_variables == []
    assert config.is_auto is True
    assert config.storage_mode is StorageMode.FILE
    assert config.save_dir == Path("save")

def test_from_none():
    assert CommonSaveConfig.from_parameters(None) == CommonSaveConfig()

def test_from_parameters():
    config = CommonSaveConfig.from_parameters({
        "Target Switches": "1,x,3",
        "Target Variables": "5",
        "Is Auto": "false",
        "Storage Mode": "web",
        "Save Directory": "data/save",
    })
    assert config.target_switches == [1, 3]
    assert config.target_variables == [5]
    assert config.is_auto is False
    assert config.storage_mode is StorageMode.WEB
    assert config.save_dir == Path("data/save")

def test_blank_save_directory_uses_default():
    config = CommonSaveConfig.from_parameters({"Save Directory": "  "})
    assert config.save_dir == Path("save")

def test_unknown_storage_mode_falls_back_to_file():
    config = CommonSaveConfig.from_parameters({"Storage Mode": "cloud"})
    assert config.storage_mode is StorageMode.FILE

def test_typed_construction():
    config = CommonSaveConfig(target_switches=[1, 2], is_auto=False)
    assert config.target_switches == [1, 2]
    assert config.is_auto is False

def test_config_is_frozen():
    config = CommonSaveConfig()
    with pytest.raises(ValidationError):
        config.is_auto = False

@pytest.mark.parametrize("value, expected", [
    (5, [5]),
    (["1", "x", 3], [1, 3]),
    ((4, -1), [4]),
    (2.5, []),
    ({"a": 1}, []),
])
def test_non_string_indexes_never_fail(value, expected):
    config = CommonSaveConfig.from_parameters({"Target Switches": value, "Target Variables": value})
    assert config.target_switches == expected
    assert config.target_variables == expected

def test_non_string_parameters_use_defaults():
    config = CommonSaveConfig.from_parameters({
        "Is Auto": 1,
        "Storage Mode": 3,
        "Save Directory": ["save"],
    })
    assert config.is_auto is False
    assert config.storage_mode is StorageMode.FILE
    assert config.save_dir == Path("save")
