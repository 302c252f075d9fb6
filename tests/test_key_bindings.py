"""Tests for KeyBindings"""

import json
import logging

from src.fpview.input.input_commands import InputCommand
from src.fpview.input.key_bindings import KeyBindings


def test_default_bindings(key_bindings, keys):
    """Test WASD, arrows and system keys map to their commands"""
    assert key_bindings.get_command(keys.W) == InputCommand.MOVE_FORWARD
    assert key_bindings.get_command(keys.UP) == InputCommand.MOVE_FORWARD
    assert key_bindings.get_command(keys.LEFT_SHIFT) == InputCommand.MOVE_DOWN
    assert key_bindings.get_command(keys.SEMICOLON) == InputCommand.RIG_AXIS_6_NEGATIVE
    assert key_bindings.get_command(keys.Q) == InputCommand.TOGGLE_CONTROL_MODE
    assert key_bindings.get_command(12345) is None

    assert sorted(key_bindings.get_keys_for_command(InputCommand.MOVE_LEFT)) == sorted([keys.A, keys.LEFT])


def test_missing_key_codes_are_skipped(tmp_path):
    """Test keys the backend has no code for are left unbound"""

    class SparseKeys:
        W = 1

    bindings = KeyBindings(SparseKeys, config_path=tmp_path / "kb.json", load=False)

    assert bindings.keyboard_bindings == {1: InputCommand.MOVE_FORWARD}
    assert bindings.get_keys_for_command(InputCommand.MOVE_BACKWARD) == []


def test_rebind_replaces_all_keys(key_bindings, keys):
    """Test rebinding removes every previous key of the command"""
    key_bindings.rebind_key(InputCommand.MOVE_FORWARD, 500)

    assert key_bindings.get_keys_for_command(InputCommand.MOVE_FORWARD) == [500]
    assert key_bindings.get_command(keys.W) is None
    assert key_bindings.get_command(keys.UP) is None


def test_add_and_remove_binding(key_bindings, keys):
    """Test adding an extra key and removing one"""
    key_bindings.add_binding(InputCommand.MOVE_UP, 600)
    assert sorted(key_bindings.get_keys_for_command(InputCommand.MOVE_UP)) == sorted([keys.SPACE, 600])

    key_bindings.remove_binding(keys.SPACE)
    key_bindings.remove_binding(99999)  # unbound, no error
    assert key_bindings.get_keys_for_command(InputCommand.MOVE_UP) == [600]


def test_clear_bindings_for_command(key_bindings):
    """Test clearing unbinds every key of a command"""
    key_bindings.clear_bindings_for_command(InputCommand.MOVE_RIGHT)
    assert key_bindings.get_keys_for_command(InputCommand.MOVE_RIGHT) == []


def test_save_and_load(tmp_path, keys):
    """Test bindings survive a save/load cycle"""
    path = tmp_path / "kb.json"
    bindings = KeyBindings(keys, config_path=path, load=False)
    bindings.rebind_key(InputCommand.MOVE_FORWARD, 700)
    bindings.save_bindings()

    data = json.loads(path.read_text())
    assert data["keyboard"]["700"] == "MOVE_FORWARD"

    reloaded = KeyBindings(keys, config_path=path)
    assert reloaded.get_command(700) == InputCommand.MOVE_FORWARD
    assert reloaded.get_command(keys.W) is None


def test_load_missing_file(key_bindings):
    """Test loading a missing file keeps defaults"""
    assert key_bindings.load_bindings() is False
    assert key_bindings.get_keys_for_command(InputCommand.MOVE_FORWARD)


def test_load_corrupt_file(tmp_path, keys, caplog):
    """Test an unreadable file is logged and ignored"""
    path = tmp_path / "kb.json"
    path.write_text("{not json")

    with caplog.at_level(logging.ERROR):
        bindings = KeyBindings(keys, config_path=path)

    assert bindings.get_command(keys.W) == InputCommand.MOVE_FORWARD
    assert any("Error loading key bindings" in r.message for r in caplog.records)


def test_import_skips_invalid_entries(key_bindings, caplog):
    """Test bad key codes or command names are skipped with a warning"""
    with caplog.at_level(logging.WARNING):
        key_bindings.import_bindings({
            "keyboard": {
                "10": "MOVE_LEFT",
                "abc": "MOVE_RIGHT",
                "11": "NOT_A_COMMAND",
            }
        })

    assert key_bindings.keyboard_bindings == {10: InputCommand.MOVE_LEFT}
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_reset_to_defaults(key_bindings, keys):
    """Test reset restores the default table"""
    key_bindings.clear_bindings_for_command(InputCommand.MOVE_FORWARD)
    key_bindings.reset_to_defaults()

    assert key_bindings.get_command(keys.W) == InputCommand.MOVE_FORWARD
