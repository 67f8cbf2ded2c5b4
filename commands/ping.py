from appcmds import Command

class Ping(Command):

    def setup(self):

        self.name = "ping"
        self.description = "A simple ping command"
        self.locales = {"name": "ping.name", "description": "ping.description"}

    async def run(self, context):

        await context.respond("pong")
