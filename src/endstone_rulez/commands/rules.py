import threading

from endstone_rulez.utils.command_util import create_command
from endstone_rulez.utils.config_util import read_rules, RULES_UNREADABLE

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from endstone.command import CommandSender
    from endstone_rulez.rulez import Rulez

PERMISSION_NODE = "rulez.command.rules"

# Register command
command, permission = create_command(
    "rules",
    "Shows the server rules.",
    ["/rules"],
    [PERMISSION_NODE],
    "op",
    permission_description="Allows players to view server rules"
)

def handler(self: "Rulez", sender: "CommandSender", args: list[str]) -> bool:
    # File I/O happens off the main thread, the reply is queued back onto the server tick
    threading.Thread(target=reply_with_rules, args=(self, sender), name="RulesReply", daemon=True).start()
    return True

def reply_with_rules(self: "Rulez", sender: "CommandSender"):
    """Read rules.txt fresh from disk and queue it (or the fallback notice) for the sender."""
    content = read_rules(self.rules_path)
    if content is None:
        self.logger.warning(f"Could not read {self.rules_path}, sending fallback to {sender.name}")
        content = RULES_UNREADABLE

    self.server.scheduler.run_task(self, lambda: deliver(sender, content), 0)

def deliver(sender: "CommandSender", message: str):
    # Players can leave between the command and the next tick
    if not getattr(sender, "is_valid", True):
        return

    sender.send_message(message)
