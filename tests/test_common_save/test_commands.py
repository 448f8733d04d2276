import pytest
from common_save.commands import CommonSaveCommand

TRACKED = {"Target Switches": "1"}

def test_save_and_load_commands(make_manager, switches):
    manager = make_manager(TRACKED)
    command = CommonSaveCommand(manager)
    switches.set_value(1, True)

    assert command("CommonSave", ["save"]) is True
    switches.set_value(1, False)
    assert command("CommonSave", ["load"]) is True
    assert switches.value(1) is True

def test_exists_is_query_only(make_manager, switches):
    manager = make_manager(TRACKED)
    command = CommonSaveCommand(manager)

    assert command("CommonSave", ["exists"]) is False
    manager.save()
    switches.set_value(1, True)

    assert command("CommonSave", ["exists"]) is True
    assert switches.value(1) is True

def test_remove_command(make_manager):
    manager = make_manager(TRACKED)
    command = CommonSaveCommand(manager)
    manager.save()

    command("CommonSave", ["remove"])

    assert manager.exists() is False

@pytest.mark.parametrize("name, args", [
    ("CommonSave", ["reset"]),
    ("CommonSave", []),
    ("OtherPlugin", ["save"]),
])
def test_ignored_commands(make_manager, name, args):
    manager = make_manager(TRACKED)
    command = CommonSaveCommand(manager)

    assert command(name, args) is None
    assert manager.exists() is False
