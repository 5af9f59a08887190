# shellkit/commands/__init__.py
"""
Built-in command sets for shellkit.

Call `register_internal_commands(app)` while wiring the shell. It is skipped
entirely when the shell is started with `--disableInternalCommands`. Each
registration is guarded so one broken set does not stop the others.
"""
from __future__ import annotations

from typing import List

import cmd2

from shellkit.utils.logger import setup_logger

logger = setup_logger(__name__)

INTERNAL_COMMAND_MODULES = (
    "shellkit.commands.essential",
    "shellkit.commands.script",
)


def register_internal_commands(app: cmd2.Cmd) -> List[str]:
    """
    Register all built-in command sets on `app`.

    Returns the module paths that registered successfully.
    """
    registered: List[str] = []

    def safe_register(modpath: str, func: str = "register") -> None:
        try:
            mod = __import__(modpath, fromlist=[func])
            getattr(mod, func)(app)
            registered.append(modpath)
        except Exception as e:
            logger.warning("Skipping command module %s: %s", modpath, e)
            app.perror(f"[warn] Skipping command module {modpath}: {e}")

    for modpath in INTERNAL_COMMAND_MODULES:
        safe_register(modpath)
    return registered
