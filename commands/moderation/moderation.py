import discord
from appcmds import Command

async def guild_only(context):

    return context.guild_id is not None

class Moderation(Command):

    def setup(self):

        self.name = "moderation"
        self.description = "Moderation tools"
        self.autoload = True #picks up the sub commands in this directory
        self.permissions = discord.Permissions(moderate_members=True)
        self.middlewares = [guild_only]
        self.locales = {"name": "moderation.name", "description": "moderation.description"}
        self.group_locales = {"members": {"name": "moderation.members.name", "description": "moderation.members.description", "default_description": "Member moderation"}}

    async def on_run_error(self, context, error):

        self.logger.exception("Moderation command failed: ")
        await context.respond("Something went wrong.")
