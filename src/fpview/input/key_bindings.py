"""
Key Bindings

Manages rebindable key→command mappings with save/load support.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from moderngl_window.context.base.keys import BaseKeys

from ..config.settings import KEY_BINDINGS_PATH
from .input_commands import InputCommand

logger = logging.getLogger(__name__)


class KeyBindings:
    """
    Manages key bindings with save/load support.

    Features:
    - Default bindings
    - Rebindable keys
    - Save/load to JSON
    - Multiple keys per command
    """

    # Key attribute name on the window's key table → command
    DEFAULT_BINDINGS = (
        # Camera movement (WASD + arrows, Space/Shift for vertical)
        ("W", InputCommand.MOVE_FORWARD),
        ("UP", InputCommand.MOVE_FORWARD),
        ("S", InputCommand.MOVE_BACKWARD),
        ("DOWN", InputCommand.MOVE_BACKWARD),
        ("A", InputCommand.MOVE_LEFT),
        ("LEFT", InputCommand.MOVE_LEFT),
        ("D", InputCommand.MOVE_RIGHT),
        ("RIGHT", InputCommand.MOVE_RIGHT),
        ("SPACE", InputCommand.MOVE_UP),
        ("LEFT_SHIFT", InputCommand.MOVE_DOWN),

        # Articulated rig joints
        ("T", InputCommand.RIG_AXIS_1_POSITIVE),
        ("G", InputCommand.RIG_AXIS_1_NEGATIVE),
        ("Y", InputCommand.RIG_AXIS_2_POSITIVE),
        ("H", InputCommand.RIG_AXIS_2_NEGATIVE),
        ("U", InputCommand.RIG_AXIS_3_POSITIVE),
        ("J", InputCommand.RIG_AXIS_3_NEGATIVE),
        ("I", InputCommand.RIG_AXIS_4_POSITIVE),
        ("K", InputCommand.RIG_AXIS_4_NEGATIVE),
        ("O", InputCommand.RIG_AXIS_5_POSITIVE),
        ("L", InputCommand.RIG_AXIS_5_NEGATIVE),
        ("P", InputCommand.RIG_AXIS_6_POSITIVE),
        ("SEMICOLON", InputCommand.RIG_AXIS_6_NEGATIVE),

        # System
        ("Q", InputCommand.TOGGLE_CONTROL_MODE),
        ("ESCAPE", InputCommand.RELEASE_POINTER),
    )

    def __init__(self, keys: BaseKeys, config_path: Optional[Path] = None, load: bool = True):
        """
        Initialize key bindings.

        Args:
            keys: Key table of the active window backend
            config_path: Path to save bindings JSON (default: KEY_BINDINGS_PATH)
            load: Load user bindings from config_path if it exists
        """
        self.keys = keys
        self.config_path = Path(config_path) if config_path is not None else KEY_BINDINGS_PATH

        # Key code → Command mappings
        self.keyboard_bindings: Dict[int, InputCommand] = {}

        # Reverse lookup: Command → Keys (for UI display)
        self.command_to_keys: Dict[InputCommand, List[int]] = {}

        self._set_default_bindings()

        if load:
            self.load_bindings()

        self._update_command_to_keys()

    def _set_default_bindings(self):
        """Set default key bindings"""
        for key_name, command in self.DEFAULT_BINDINGS:
            key = getattr(self.keys, key_name, None)
            if key is None:
                # Backend has no code for this key
                logger.debug("No key code for %s, %s left unbound", key_name, command.name)
                continue
            self.keyboard_bindings[key] = command

    def _update_command_to_keys(self):
        """Update reverse lookup (command → keys)"""
        self.command_to_keys.clear()
        for key, command in self.keyboard_bindings.items():
            self.command_to_keys.setdefault(command, []).append(key)

    def get_command(self, key: int) -> Optional[InputCommand]:
        """
        Get command for a key.

        Args:
            key: Key code

        Returns:
            InputCommand if bound, None otherwise
        """
        return self.keyboard_bindings.get(key)

    def get_keys_for_command(self, command: InputCommand) -> List[int]:
        """Get all key codes bound to a command."""
        return self.command_to_keys.get(command, [])

    def rebind_key(self, command: InputCommand, new_key: int):
        """
        Rebind a command to a new key.

        This replaces every current binding of the command.

        Args:
            command: Command to rebind
            new_key: New key code
        """
        old_keys = [k for k, cmd in self.keyboard_bindings.items() if cmd == command]
        for old_key in old_keys:
            del self.keyboard_bindings[old_key]

        self.keyboard_bindings[new_key] = command
        self._update_command_to_keys()

    def add_binding(self, command: InputCommand, key: int):
        """Add an additional key for a command (multiple keys per command are allowed)."""
        self.keyboard_bindings[key] = command
        self._update_command_to_keys()

    def remove_binding(self, key: int):
        if key in self.keyboard_bindings:
            del self.keyboard_bindings[key]
            self._update_command_to_keys()

    def clear_bindings_for_command(self, command: InputCommand):
        self.keyboard_bindings = {
            k: cmd for k, cmd in self.keyboard_bindings.items()
            if cmd != command
        }
        self._update_command_to_keys()

    def save_bindings(self):
        """Save bindings to JSON file"""
        with open(self.config_path, 'w') as f:
            json.dump(self.export_bindings(), f, indent=2)

    def load_bindings(self) -> bool:
        """
        Load bindings from JSON file.

        Returns:
            True if loaded successfully, False if the file doesn't exist or is unreadable
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading key bindings from %s: %s", self.config_path, e)
            return False

        self.import_bindings(data)
        return True

    def reset_to_defaults(self):
        """Reset all bindings to defaults"""
        self.keyboard_bindings.clear()
        self._set_default_bindings()
        self._update_command_to_keys()

    def export_bindings(self) -> Dict:
        """
        Export bindings as a JSON-compatible dictionary.

        Returns:
            Dict with keyboard bindings (key code as string → command name)
        """
        return {
            "keyboard": {str(k): v.name for k, v in self.keyboard_bindings.items()},
        }

    def import_bindings(self, data: Dict):
        """
        Import bindings from a dictionary, replacing the current ones.

        Invalid entries are skipped with a warning.

        Args:
            data: Dict with a 'keyboard' key
        """
        self.keyboard_bindings.clear()

        for key_str, command_name in data.get("keyboard", {}).items():
            try:
                self.keyboard_bindings[int(key_str)] = InputCommand[command_name]
            except (ValueError, KeyError) as e:
                logger.warning("Invalid binding %s→%s: %s", key_str, command_name, e)

        self._update_command_to_keys()
