"""State shared by the tbxcli command handlers."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from tbxcli.config import TbxcliConfig
from tbxcli.defaults import DefaultsStore
from tbxcli.options import PromptFn, write_line


@dataclass
class CliContext:
    """Everything a command handler needs for one invocation."""

    options: dict[str, str]
    commands: list[str]
    store: DefaultsStore
    prompt: PromptFn
    config: TbxcliConfig = field(default_factory=TbxcliConfig)
    workdir: Path = field(default_factory=Path.cwd)
    echo: Callable[[str], None] = write_line

    def subcommand(self) -> str | None:
        """Get the second command token, if any."""
        return self.commands[1] if len(self.commands) > 1 else None
