import logging
from pathlib import Path
from typing import Optional

import discord

from .enums import HOOK_NAMES
from .errors import ReloadError
from .options import Option

class BaseCommand():

    """
    Common base of Command, SubCommand and ContextMenuCommand.
    This class is not meant to be subclassed directly, use one of the variants instead.
    """

    #Error hooks. Override them with methods in a subclass.
    #Sub commands that leave a hook at None inherit the hook of their parent command on load.
    on_middlewares_error = None
    on_run_error = None
    on_options_error = None
    on_internal_error = None
    on_after_run = None
    on_bot_permissions_fail = None
    on_permissions_fail = None

    def __init__(self):

        self.logger = logging.getLogger("Uninitialized Command")
        self._file_path = None

        #System internal information
        self.name = ""
        self.middlewares = []

        self.setup() #parse command attributes of subclasses

        self.logger = logging.getLogger("Command "+self.name)

        self._validate()

    def setup(self):

        """
        Setup method. Override this to customize command attributes.
        """

        pass

    def _validate(self):

        #If we don't do this, a command may never be registered without it being noticed at dev time
        if " " in self.name or not self.name:
            raise ValueError("Command names may not include whitespaces and must not be empty.")
        self.name = self.name.lower()

    async def run(self, context):

        """
        Command body. Called with the interaction context when the command is executed.
        """

        return

    @property
    def file_path(self) -> Optional[Path]:

        """
        Path of the file this command was loaded from. Can only be set once.
        """

        return self._file_path

    @file_path.setter
    def file_path(self, path):

        path = Path(path)
        if self._file_path is not None and self._file_path != path:
            raise AttributeError("file_path of %s is already set to %s" % (self.name, self._file_path))
        self._file_path = path

    def hooks(self) -> dict:

        """
        Return a mapping of all error hook names to their current values.
        """

        return {name: getattr(self, name) for name in HOOK_NAMES}

    async def reload(self):

        """
        Re-import the file this command was loaded from and rebuild this
        instance from the freshly loaded class, running setup() again.

        Sub commands that were loaded from their own files are reloaded first
        and stay attached. Inherited hooks, middlewares and localizations are
        not restored here, the command handler links the command again.
        Raises ReloadError on failure.
        """

        if self.file_path is None:
            raise ReloadError("%s was not loaded from a file." % self.name)

        linked = [i for i in getattr(self, "options", None) or [] if isinstance(i, SubCommand) and i.file_path is not None]
        for sub_command in linked:
            await sub_command.reload()

        from .loader import load_module, resolve_export

        try:
            export = resolve_export(load_module(self.file_path))
        except Exception as e:
            raise ReloadError("Reloading %s from %s failed: %s" % (self.name, self.file_path, e)) from e

        for variant in (ContextMenuCommand, SubCommand, Command):
            if isinstance(self, variant):
                break
        if not (isinstance(export, type) and issubclass(export, variant)):
            raise ReloadError("%s no longer exports a %s class." % (self.file_path, variant.__name__))

        try:
            fresh = export()
        except Exception as e:
            raise ReloadError("Reloading %s from %s failed: %s" % (self.name, self.file_path, e)) from e

        self.logger.debug("Reloading from %s" % self.file_path)

        state = dict(vars(fresh))
        state["_file_path"] = self._file_path
        if linked:
            state["options"] = list(state.get("options") or []) + linked

        self.__class__ = export
        vars(self).clear()
        vars(self).update(state)

    def __repr__(self):

        return "<%s name=%r>" % (self.__class__.__name__, self.name)

class Command(BaseCommand):

    """
    Base class for all slash commands.
    This class needs to be subclassed to implement actual functionality.

    Translation keys for name and description go into locales, e.g.
    {"name": "ping.name", "description": "ping.description"}.
    Keys for sub command groups go into group_locales, e.g.
    {"admin": {"name": "ping.admin", "description": "ping.admin.desc", "default_description": "Admin tools"}}.
    If autoload is True, sub commands are picked up from the files next to this command.
    """

    def __init__(self):

        self.description = ""
        self.options = None
        self.autoload = False
        self.permissions = None
        self.nsfw = False

        #raw translation keys
        self.locales = None
        self.group_locales = None

        #resolved on load
        self.name_localizations = None
        self.description_localizations = None
        self.groups = None

        super().__init__()

    def add_option(self, option):

        """
        Add an option or sub command to this command.
        """

        assert isinstance(option, (Option, SubCommand))
        if self.options is None:
            self.options = []
        self.options.append(option)

    def sub_commands(self) -> list:

        return [i for i in self.options or [] if isinstance(i, SubCommand)]

    def _group_payload(self, group: str) -> dict:

        meta = (self.group_locales or {}).get(group, {})
        data = {
            "type": discord.AppCommandOptionType.subcommand_group.value,
            "name": group,
            "description": meta.get("default_description") or group,
            "options": []
            }
        resolved = (self.groups or {}).get(group)
        if resolved:
            #later pairs override earlier ones with the same locale code
            if resolved["name"]:
                data["name_localizations"] = dict(resolved["name"])
            if resolved["description"]:
                data["description_localizations"] = dict(resolved["description"])
        return data

    def to_dict(self) -> dict:

        """
        Return the registration payload for this command.
        Sub commands with a group are nested in a sub command group option.
        """

        options = []
        grouped = {}
        for option in self.options or []:
            group = getattr(option, "group", None)
            if isinstance(option, SubCommand) and group:
                if group not in grouped:
                    grouped[group] = self._group_payload(group)
                    options.append(grouped[group])
                grouped[group]["options"].append(option.to_dict())
            else:
                options.append(option.to_dict())

        data = {
            "type": discord.AppCommandType.chat_input.value,
            "name": self.name,
            "description": self.description,
            "options": options,
            "nsfw": self.nsfw
            }
        if self.permissions is not None:
            data["default_member_permissions"] = str(self.permissions.value)
        if self.name_localizations:
            data["name_localizations"] = dict(self.name_localizations)
        if self.description_localizations:
            data["description_localizations"] = dict(self.description_localizations)
        return data

class SubCommand(BaseCommand):

    """
    Base class for sub commands.
    Sub commands are either added to a Command explicitly or picked up by
    commands with autoload enabled. Set group to nest it in a sub command group.
    """

    def __init__(self):

        self.description = ""
        self.options = []
        self.group = None

        self.locales = None
        self.name_localizations = None
        self.description_localizations = None

        super().__init__()

    def add_option(self, option: Option):

        assert isinstance(option, Option)
        self.options.append(option)

    def to_dict(self) -> dict:

        data = {
            "type": discord.AppCommandOptionType.subcommand.value,
            "name": self.name,
            "description": self.description,
            "options": [i.to_dict() for i in self.options or []]
            }
        if self.name_localizations:
            data["name_localizations"] = dict(self.name_localizations)
        if self.description_localizations:
            data["description_localizations"] = dict(self.description_localizations)
        return data

class ContextMenuCommand(BaseCommand):

    """
    Base class for user and message context menu commands.
    """

    def __init__(self):

        self.type = discord.AppCommandType.message
        self.permissions = None
        self.nsfw = False

        super().__init__()

    def _validate(self):

        #context menu names are displayed as is, whitespaces are fine
        if not self.name:
            raise ValueError("Context menu command names must not be empty.")
        if self.type not in (discord.AppCommandType.user, discord.AppCommandType.message):
            raise ValueError("Context menu commands must be of type user or message, not %s." % (self.type,))

    def to_dict(self) -> dict:

        data = {
            "type": self.type.value,
            "name": self.name,
            "nsfw": self.nsfw
            }
        if self.permissions is not None:
            data["default_member_permissions"] = str(self.permissions.value)
        return data
