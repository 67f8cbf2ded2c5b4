from appcmds import SubCommand, IntegerOption

class Purge(SubCommand):

    def setup(self):

        self.name = "purge"
        self.description = "Delete recent messages"
        self.add_option(IntegerOption("count", "Number of messages", required=True))

    async def run(self, context):

        await context.respond("Messages deleted.")
