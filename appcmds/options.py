from typing import Optional, Dict

import discord

class Option():

    """
    A plain (non sub command) option of a slash command.

    locales is an optional translation key bundle of the form
    {"name": <key>, "description": <key>}. The resolved strings are
    stored in name_localizations and description_localizations once the
    owning command has been loaded.
    """

    type = discord.AppCommandOptionType.string

    def __init__(self, name: str, description: str, required=False, locales: Optional[Dict[str, str]] = None):

        self.name = name.lower()
        self.description = description
        self.required = required
        self.locales = locales

        self.name_localizations = None
        self.description_localizations = None

    def to_dict(self) -> dict:

        """
        Return the registration payload for this option.
        """

        data = {
            "type": self.type.value,
            "name": self.name,
            "description": self.description,
            "required": self.required
            }
        if self.name_localizations:
            data["name_localizations"] = dict(self.name_localizations)
        if self.description_localizations:
            data["description_localizations"] = dict(self.description_localizations)
        return data

    def __repr__(self):

        return "<%s name=%r>" % (self.__class__.__name__, self.name)

class StringOption(Option):

    type = discord.AppCommandOptionType.string

class IntegerOption(Option):

    type = discord.AppCommandOptionType.integer

class NumberOption(Option):

    type = discord.AppCommandOptionType.number

class BooleanOption(Option):

    type = discord.AppCommandOptionType.boolean

class UserOption(Option):

    type = discord.AppCommandOptionType.user

class ChannelOption(Option):

    type = discord.AppCommandOptionType.channel

class RoleOption(Option):

    type = discord.AppCommandOptionType.role
