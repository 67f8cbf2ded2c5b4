import logging
import os
import re
import importlib.util
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .errors import CommandLoadError

logger = logging.getLogger("appcmds.loader")

#Name of the module attribute that explicitly selects the exported command
EXPORT_NAME = "command"

#Accepts source and compiled modules, rejects private modules and .pyi stubs
DEFAULT_FILE_PATTERN = r"^(?!_)[^.].*\.pyc?$"

class LoadedFile():

    """
    A discovered command file and the value it exports (None if it exports nothing).
    """

    def __init__(self, path: Path, file):

        self.path = path
        self.file = file

    def __repr__(self):

        return "<LoadedFile path=%s file=%r>" % (self.path, self.file)

def pattern_filter(pattern: str) -> Callable[[Path], bool]:

    """
    Build a file filter matching file names against a regular expression.
    """

    regex = re.compile(pattern)
    return lambda path: regex.match(path.name) is not None

def load_module(path):

    """
    Handles boilerplate code for importing a module from a file.
    Returns initialized module.
    Raises ImportError on failure.
    """

    path = Path(path)
    spec = importlib.util.spec_from_file_location("command_%s" % path.stem, path)
    if spec is None or spec.loader is None:
        raise ImportError("Unable to load spec for module %s" % path)
    m = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(m)
    return m

def resolve_export(module):

    """
    Return the value a command module exports.

    A module-level `command` attribute wins, unless it is a function or class
    imported from elsewhere that isn't a command class (e.g. a decorator
    named command). Otherwise the last public command class defined in the
    module itself is used. Returns None if the module exports nothing.
    """

    from .abcs import BaseCommand

    if hasattr(module, EXPORT_NAME):
        export = getattr(module, EXPORT_NAME)
        if isinstance(export, type) and issubclass(export, BaseCommand):
            return export
        if not callable(export) or getattr(export, "__module__", None) == module.__name__:
            return export
        logger.debug("Ignoring imported %s attribute %r of %s" % (EXPORT_NAME, export, module.__name__))

    found = None
    for name, thing in vars(module).items():
        if name.startswith("_") or not isinstance(thing, type):
            continue
        #classes imported from elsewhere (e.g. the base classes) don't count
        if issubclass(thing, BaseCommand) and thing.__module__ == module.__name__:
            found = thing
    return found

async def get_files(directory, file_filter: Optional[Callable[[Path], bool]] = None) -> List[Path]:

    """
    List all files below directory, recursively and in a stable order.
    Hidden and private directories (including __pycache__) are skipped.
    Raises CommandLoadError if directory doesn't exist.
    """

    directory = Path(directory)
    if not directory.is_dir():
        raise CommandLoadError("Command directory %s does not exist." % directory)

    files = []
    for root, dirs, names in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if not d.startswith((".", "_")))
        for name in sorted(names):
            path = (Path(root) / name).resolve()
            if file_filter is None or file_filter(path):
                files.append(path)
    logger.debug("%i file(s) found in %s" % (len(files), directory))
    return files

async def load_files_with_keys(paths: Iterable[Path]) -> List[LoadedFile]:

    """
    Import every file in paths and resolve its export.
    Raises CommandLoadError if a file can't be imported.
    """

    result = []
    for path in paths:
        try:
            module = load_module(path)
        except Exception as e:
            raise CommandLoadError("Unable to import command file %s: %s" % (path, e)) from e
        result.append(LoadedFile(path, resolve_export(module)))
    return result
