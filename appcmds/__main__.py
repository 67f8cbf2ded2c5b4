#Command subsystem developer tool
#
#Loads a command directory the same way the bot does and prints the
#registration payload of every command, including resolved localizations.

import argparse
import asyncio
import json
import logging
import logging.config
import os
import sys

from .config import ConfigManager
from .handler import CommandHandler
from .langs import LangsHandler
from .loader import DEFAULT_FILE_PATTERN

DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "form_default": {
            "format": "[%(asctime)s][%(name)s][%(levelname)s]: %(message)s",
            "datefmt": None
            }
        },
    "filters": {
        },
    "handlers": {
        "hand_console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "form_default",
            "stream": "ext://sys.stderr"
            },
        "hand_default": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": "DEBUG",
            "formatter": "form_default",
            "filename": "logs/appcmds.log",
            "when": "midnight",
            "backupCount": 10,
            "interval": 1
            }
        },
    "loggers": {
        },
    "root": {
        "handlers": ["hand_console", "hand_default"],
        "level": "DEBUG"
        }
    }

def setup_logging(path="config/logging.json"):

    """
    Configure logging from the json file at path, creating a default config if there is none.
    """

    os.makedirs("logs", exist_ok=True)
    if not os.path.isfile(path):
        #Do print() logging here since our logger is not configured yet
        print("[SETUP] WARNING: Logging configuration not found. Creating default config...", file=sys.stderr)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w") as f:
            json.dump(DEFAULT_LOGGING_CONFIG, f, indent=4)

    with open(path, "r") as f:
        logging.config.dictConfig(json.load(f))

def build_handler(config: ConfigManager, langs_dir=None) -> CommandHandler:

    """
    Create a CommandHandler (and its locale table) from a config.
    """

    langs = LangsHandler(aliases=config.getAliases())
    langs_dir = langs_dir or config.getElementText("langs.path", "")
    if langs_dir:
        langs.load(langs_dir)
    return CommandHandler(langs, file_pattern=config.getElementText("commands.filter", DEFAULT_FILE_PATTERN))

async def dump(handler: CommandHandler, directory) -> list:

    commands = await handler.load(directory)
    return [command.to_dict() for command in commands]

def main(argv=None):

    parser = argparse.ArgumentParser(prog="appcmds", description="Load a command directory and print the resulting command payloads.")
    parser.add_argument("directory", nargs="?", help="command directory (default: commands.path from the config)")
    parser.add_argument("--config", default="config/appcmds.xml", help="path to the xml config file")
    parser.add_argument("--langs", help="locale directory (default: langs.path from the config)")
    parser.add_argument("--logging", default="config/logging.json", help="path to the logging config")
    args = parser.parse_args(argv)

    setup_logging(args.logging)

    config = ConfigManager(args.config)
    directory = args.directory or config.getElementText("commands.path", "commands")
    handler = build_handler(config, args.langs)

    print(json.dumps(asyncio.run(dump(handler, directory)), indent=4, ensure_ascii=False))
    return 0

if __name__ == "__main__":

    sys.exit(main())
