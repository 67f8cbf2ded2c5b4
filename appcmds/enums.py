from enum import Enum, auto

#Error hooks shared between a command and its sub commands
HOOK_NAMES = (
    "on_middlewares_error",
    "on_run_error",
    "on_options_error",
    "on_internal_error",
    "on_after_run",
    "on_bot_permissions_fail",
    "on_permissions_fail",
)

#Command kinds
class CommandKind(Enum):

    COMMAND = auto()
    SUB_COMMAND = auto()
    CONTEXT_MENU = auto()
    OTHER = auto()

def classify(obj) -> CommandKind:

    """
    Return the CommandKind of an instantiated command file export.
    Anything that isn't one of the command classes is CommandKind.OTHER.
    """

    #imported here since abcs depends on this module for HOOK_NAMES
    from .abcs import Command, SubCommand, ContextMenuCommand

    if isinstance(obj, ContextMenuCommand):
        return CommandKind.CONTEXT_MENU
    if isinstance(obj, SubCommand):
        return CommandKind.SUB_COMMAND
    if isinstance(obj, Command):
        return CommandKind.COMMAND
    return CommandKind.OTHER
