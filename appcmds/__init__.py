"""
Application command subsystem

Discovers slash and context menu commands in a directory, links sub commands
to their parents and resolves localized names and descriptions.
"""

from .abcs import BaseCommand, Command, SubCommand, ContextMenuCommand
from .options import *
from .enums import CommandKind, classify
from .errors import *
from .langs import LangsHandler
from .locales import PLATFORM_LOCALES, expand_locale, parse_command_locales
from .handler import CommandHandler, BaseHandler
from .config import ConfigManager, VersionError
