import textwrap
from pathlib import Path

def write(directory, name: str, source: str) -> Path:

    """
    Write a (dedented) python source file below directory and return its resolved path.
    """

    path = Path(directory) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source), encoding="utf-8")
    return path.resolve()

PING = """
from appcmds import Command

class Ping(Command):

    def setup(self):

        self.name = "ping"
        self.description = "pong"
        self.locales = {"name": "ping.name", "description": "ping.description"}
"""

ADMIN = """
from appcmds import Command

async def check_admin(context):
    return True

class Admin(Command):

    def setup(self):

        self.name = "admin"
        self.description = "Admin tools"
        self.autoload = True
        self.middlewares = [check_admin]
        self.group_locales = {"users": {"name": "admin.users", "description": "admin.users_desc", "default_description": "User tools"}}

    async def on_run_error(self, context, error):
        return ("admin", self.name)

    async def on_permissions_fail(self, context, missing):
        return ("admin", missing)
"""

BAN = """
from appcmds import SubCommand, UserOption

async def log_ban(context):
    return True

class Ban(SubCommand):

    def setup(self):

        self.name = "ban"
        self.description = "Ban a user"
        self.group = "users"
        self.middlewares = [log_ban]
        self.locales = {"name": "admin.ban"}
        self.add_option(UserOption("user", "The user", required=True, locales={"name": "admin.user"}))

    async def on_options_error(self, context, error):
        return ("ban", self.name)
"""

KICK = """
from appcmds import SubCommand

class Kick(SubCommand):

    def setup(self):

        self.name = "kick"
        self.description = "Kick a user"
"""

REPORT = """
import discord
from appcmds import ContextMenuCommand

class Report(ContextMenuCommand):

    def setup(self):

        self.name = "Report message"
        self.type = discord.AppCommandType.message
"""
