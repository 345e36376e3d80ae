"""User-edited preferences: the *config*.

Alloy never writes the config. Every table and every field is optional, and
unset values stay ``None`` so that the component consuming them can apply its
own built-in behaviour.

Example TOML configuration:
    [bindings]
    img_next = ["Right", "D"]
    img_prev = ["Left", "A"]

    [[commands]]
    input = ["e"]
    program = "gimp"
    args = ["${img}"]
    envs = [{ name = "GIMP_THEME", value = "dark" }]

    [updates]
    check_updates = false

    [title]
    displayed_folders = 1
    show_program_name = true

    [image]
    antialiasing = "never"

    [window]
    start_maximized = true
    theme = "dark"
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, StrictBool, StrictStr

from alloy.core.domain.cache import Theme
from alloy.core.domain.title import format_file_path
from alloy.core.shared.typing import I32, U32

PROGRAM_NAME_SUFFIX = " : A L L O Y"


class EnvVar(BaseModel):
    """Environment variable override for an external command."""

    name: StrictStr
    value: StrictStr


class Command(BaseModel):
    """External program launched for matching input identifiers."""

    input: list[StrictStr] = Field(description="Identifiers that trigger the command.")
    program: StrictStr
    args: list[StrictStr] | None = None
    envs: list[EnvVar] | None = None

    def environment(self) -> dict[str, str]:
        """Return the overrides as a mapping, later entries winning."""
        return {env.name: env.value for env in self.envs or []}


class ConfigImageSection(BaseModel):
    """Image rendering preferences."""

    antialiasing: StrictStr | None = None


class ConfigWindowSection(BaseModel):
    """Window preferences applied at start-up."""

    start_fullscreen: StrictBool | None = None
    start_maximized: StrictBool | None = None
    show_bottom_bar: StrictBool | None = None
    theme: Theme | None = None
    use_last_window_area: StrictBool | None = None
    win_w: U32 | None = None
    win_h: U32 | None = None
    win_x: I32 | None = None
    win_y: I32 | None = None


class ConfigUpdateSection(BaseModel):
    """Update-check preferences."""

    check_updates: StrictBool = True


class TitleSection(BaseModel):
    """Window title preferences."""

    displayed_folders: U32 | None = None
    show_program_name: StrictBool | None = None

    def format_file_path(self, file_path: str | os.PathLike[str]) -> str:
        """Shorten *file_path* according to ``displayed_folders``."""
        return format_file_path(file_path, self.displayed_folders)

    def format_program_name(self) -> str:
        """Suffix appended to the title, empty when disabled."""
        if self.show_program_name is False:
            return ""
        return PROGRAM_NAME_SUFFIX


class Configuration(BaseModel):
    """Top-level configuration document with one model per TOML table.

    ``bindings`` maps an action name to the key combinations that trigger it.
    """

    bindings: dict[str, list[StrictStr]] | None = None
    commands: list[Command] | None = None
    updates: ConfigUpdateSection | None = None
    title: TitleSection | None = None
    image: ConfigImageSection | None = None
    window: ConfigWindowSection | None = None

    @property
    def update_checks_enabled(self) -> bool:
        """Whether update checks are allowed (the default)."""
        return self.updates is None or self.updates.check_updates

    def bindings_for(self, action: str) -> list[str]:
        """Key combinations bound to *action*, empty when unbound."""
        if self.bindings is None:
            return []
        return list(self.bindings.get(action, []))

    def commands_for(self, identifier: str) -> list[Command]:
        """Commands triggered by *identifier*, in file order."""
        return [command for command in self.commands or [] if identifier in command.input]


__all__ = [
    "PROGRAM_NAME_SUFFIX",
    "Command",
    "ConfigImageSection",
    "ConfigUpdateSection",
    "ConfigWindowSection",
    "Configuration",
    "EnvVar",
    "TitleSection",
]
