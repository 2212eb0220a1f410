import os
import traceback
from endstone.plugin import Plugin
from endstone.command import Command, CommandSender

from endstone_rulez.commands import (
    preloaded_commands,
    preloaded_permissions,
    preloaded_handlers
)

from endstone_rulez.utils.config_util import prepare_data_folder

def hide_paths(tb: str) -> str:
    """Replace file paths in a traceback with <hidden>/<basename>."""
    cleaned_lines = []
    for line in tb.splitlines():
        if 'File "' in line:
            path_start = line.find('"') + 1
            path_end = line.find('"', path_start)
            file_path = line[path_start:path_end]
            line = line.replace(file_path, f"<hidden>/{os.path.basename(file_path)}")
        cleaned_lines.append(line)
    return "\n".join(cleaned_lines)

class Rulez(Plugin):
    api_version = "0.9"
    authors = ["PrimeStrat"]
    name = "rulez"
    description = "Shows the server rules from an editable rules.txt."

    commands = preloaded_commands
    permissions = preloaded_permissions
    handlers = preloaded_handlers

    def __init__(self):
        super().__init__()
        self.rules_path = None

    def on_load(self):
        # Commands and permissions are registered by the server from the class attributes,
        # a failure there stops the plugin from loading
        self.rules_path = prepare_data_folder(self.data_folder)
        self.logger.info("Rulez plugin loaded")

    def on_command(self, sender: CommandSender, command: Command, args: list[str]) -> bool:
        """Route a command to its preloaded handler"""
        handler_func = self.handlers.get(command.name)
        if handler_func is None:
            sender.send_message(f"Command '{command.name}' not found")
            return False

        try:
            return handler_func(self, sender, args)
        except Exception as e:
            tb = hide_paths(traceback.format_exc())
            sender.send_message(
                f"§c========\n"
                f"§6This command generated an error -> please report it with the error below!\n"
                f"§c========\n\n"
                f"§e{e}\n\n"
                f"§eCommand Usage: §b{command.name} + {args}\n\n"
                f"§e{tb}\n§r"
            )

            if sender.name != "Server":
                self.logger.error(f"/{command.name} {args} failed:\n{tb}")

            return False
