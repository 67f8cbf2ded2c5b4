import inspect
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from .abcs import Command, SubCommand, ContextMenuCommand
from .enums import CommandKind, HOOK_NAMES, classify
from .errors import NotConstructibleError
from .langs import LangsHandler
from .loader import DEFAULT_FILE_PATTERN, LoadedFile, get_files, load_files_with_keys, pattern_filter
from .locales import parse_command_locales

def construct(loaded: Optional[LoadedFile]) -> Tuple[object, Optional[Exception]]:

    """
    Try to instantiate the export of a loaded file.
    Returns (instance, None) on success and (None, error) on failure.
    """

    try:
        if loaded is None:
            raise LookupError("File was not discovered by the current load pass.")
        if not isinstance(loaded.file, type):
            raise NotConstructibleError(loaded.path, loaded.file)
        return loaded.file(), None
    except Exception as e:
        return None, e

def link_sub_command(command: Command, sub_command: SubCommand):

    """
    Let sub_command inherit middlewares and error hooks from command.

    Middlewares of the parent run first. Hooks the sub command doesn't declare
    are replaced by the parent's hook, bound to the parent. This is a snapshot,
    changing the parent's hooks later doesn't affect the sub command.
    """

    sub_command.middlewares = list(command.middlewares or []) + list(sub_command.middlewares or [])
    for name in HOOK_NAMES:
        if getattr(sub_command, name) is None:
            setattr(sub_command, name, getattr(command, name))

class BaseHandler():

    """
    Shared file discovery for handlers loading user code from a directory.
    file_filter decides which files are considered, it defaults to python
    source and bytecode files.
    """

    logger = logging.getLogger("appcmds.BaseHandler")

    def __init__(self, logger: Optional[logging.Logger] = None, file_pattern: str = DEFAULT_FILE_PATTERN):

        if logger is not None:
            self.logger = logger
        self.file_filter = pattern_filter(file_pattern)
        self._callback = None

    def set_callback(self, callback: Optional[Callable]):

        """
        Register a function called with every loaded top level command.
        callback may be a coroutine function.
        """

        self._callback = callback

    async def _run_callback(self, instance):

        if self._callback is None:
            return
        result = self._callback(instance)
        if inspect.isawaitable(result):
            await result

    async def get_files(self, directory) -> List[Path]:

        return await get_files(directory, self.file_filter)

    async def load_files_with_keys(self, paths) -> List[LoadedFile]:

        return await load_files_with_keys(paths)

    def _display_path(self, path: Path) -> str:

        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)

class CommandHandler(BaseHandler):

    """
    Loads commands from a directory and keeps track of them.

    values holds all top level commands (Command and ContextMenuCommand) of the
    last successful load() call.
    """

    logger = logging.getLogger("appcmds.CommandHandler")

    def __init__(self, langs: Optional[LangsHandler] = None, logger: Optional[logging.Logger] = None, file_pattern: str = DEFAULT_FILE_PATTERN):

        super().__init__(logger, file_pattern)
        self.langs = langs if langs is not None else LangsHandler()
        self.values: List[Union[Command, ContextMenuCommand]] = []

    async def reload(self, resolve: Union[str, Command, ContextMenuCommand]):

        """
        Reload a single command, given by name or instance.
        Returns None if no command with that name is loaded.
        """

        if isinstance(resolve, str):
            for command in self.values:
                if command.name == resolve:
                    resolve = command
                    break
            else:
                return None

        result = await resolve.reload()
        #the rebuilt command lost its linkage and localizations
        if isinstance(resolve, Command):
            self._link(resolve)
        return result

    async def reload_all(self, stop_if_fail=True):

        """
        Reload all loaded commands in order.
        If stop_if_fail is True, the first error aborts and is raised.
        Otherwise errors are logged and the remaining commands are still reloaded.
        """

        for command in list(self.values):
            try:
                await self.reload(command.name)
            except Exception as e:
                if stop_if_fail:
                    raise
                self.logger.debug("Reloading command %s failed: %s" % (command.name, e))

    async def load(self, directory) -> list:

        """
        Load all commands from directory.
        Per file problems are logged and skipped. Raises CommandLoadError if
        the directory can't be listed or a file can't be imported, in which
        case values is left untouched.
        """

        result = [i for i in await self.load_files_with_keys(await self.get_files(directory)) if i.file is not None]
        by_path = {i.path: i for i in result}
        values = []

        for loaded in result:
            instance, error = construct(loaded)
            if error is not None:
                if isinstance(error, NotConstructibleError):
                    self.logger.warning("%s doesn't export a command class. Define exactly one command class in the file or set `command = <Command>`." % self._display_path(loaded.path))
                else:
                    self.logger.warning("Initializing command failed (source: %s): %s" % (loaded, error))
                continue

            kind = classify(instance)
            if kind is CommandKind.CONTEXT_MENU:
                instance.file_path = loaded.path
                values.append(instance)
                await self._run_callback(instance)
                continue
            if kind is not CommandKind.COMMAND:
                continue

            instance.file_path = loaded.path
            if instance.options is None:
                instance.options = []

            if instance.autoload:
                await self._autoload(instance, by_path)

            values.append(instance)
            self._link(instance)

            self.logger.debug("Registering command %s..." % instance.name)
            await self._run_callback(instance)

        self.values = values
        self.logger.info("%i command(s) loaded from %s" % (len(values), directory))
        return self.values

    def _link(self, command: Command):

        """
        Propagate middlewares and hooks to the sub commands of command and
        resolve the locales of command and its sub commands.
        """

        if command.options is None:
            command.options = []
        sub_commands = [i for i in command.options or [] if isinstance(i, SubCommand)]
        for sub_command in sub_commands:
            link_sub_command(command, sub_command)

        parse_command_locales(command, self.langs)
        for sub_command in sub_commands:
            parse_command_locales(sub_command, self.langs)

    async def _autoload(self, command: Command, by_path: dict):

        for path in await self.get_files(command.file_path.parent):
            if path == command.file_path:
                continue
            sub_command, error = construct(by_path.get(path))
            if error is not None:
                self.logger.debug("Skipping %s for autoload of %s: %s" % (path, command.name, error))
                continue
            if isinstance(sub_command, SubCommand):
                sub_command.file_path = path
                command.options.append(sub_command)
