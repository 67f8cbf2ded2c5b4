import discord
from appcmds import ContextMenuCommand

class Report(ContextMenuCommand):

    def setup(self):

        self.name = "Report message"
        self.type = discord.AppCommandType.message

    async def run(self, context):

        await context.respond("Thanks, the moderators have been notified.")
