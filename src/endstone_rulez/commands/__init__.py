import importlib
import pkgutil
import os

from collections import defaultdict

import endstone_rulez

# Global storage for preloaded commands
preloaded_commands = {}
preloaded_permissions = {}
preloaded_handlers = {}

def preload_commands():
    """Preload all command modules before Rulez is instantiated."""
    global preloaded_commands, preloaded_permissions, preloaded_handlers

    commands_base_path = os.path.join(os.path.dirname(endstone_rulez.__file__), 'commands')

    grouped_commands = defaultdict(list)

    print("[Rulez] Registering commands...")

    for root, _, _ in os.walk(commands_base_path):
        rel_path = os.path.relpath(root, commands_base_path)
        package_path = rel_path.replace(os.sep, ".") if rel_path != "." else ""

        for _, module_name, _ in pkgutil.iter_modules([root]):
            module_import_path = f"endstone_rulez.commands{('.' + package_path) if package_path else ''}.{module_name}"
            module = importlib.import_module(module_import_path)

            if hasattr(module, 'command') and hasattr(module, 'handler'):
                for cmd, details in module.command.items():
                    preloaded_commands[cmd] = details
                    preloaded_handlers[cmd] = module.handler
                    grouped_commands[package_path].append((cmd, details.get('description', 'No description')))

                if hasattr(module, 'permission'):
                    for perm, details in module.permission.items():
                        preloaded_permissions[perm] = details

    # Print grouped commands
    for category, commands in grouped_commands.items():
        clean_category = category.replace("_", " ") if category else "Root"
        print(f"\n[{clean_category}]")
        for cmd, desc in commands:
            print(f"✓ {cmd} - {desc}")

    print("\n")

# Run preload automatically when this file is imported
preload_commands()
print(f"[Rulez] Loaded {len(preloaded_commands)} commands")

__all__ = ["preloaded_commands", "preloaded_permissions", "preloaded_handlers"]
