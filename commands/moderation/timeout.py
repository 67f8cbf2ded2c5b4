from appcmds import SubCommand, UserOption, IntegerOption

class Timeout(SubCommand):

    def setup(self):

        self.name = "timeout"
        self.description = "Time out a member"
        self.group = "members"
        self.locales = {"name": "moderation.timeout.name", "description": "moderation.timeout.description"}
        self.add_option(UserOption("member", "Member to time out", required=True, locales={"name": "moderation.timeout.member"}))
        self.add_option(IntegerOption("minutes", "Duration in minutes"))

    async def run(self, context):

        await context.respond("Member timed out.")
