"""
Locale resolution for loaded commands.

Locale identifiers in the locale table are chosen by the bot author, the
platform only accepts the codes in discord.Locale. Each identifier is expanded
into platform codes using the alias table; an identifier that is itself a
platform code also populates that code.
"""

from typing import List

import discord

from .abcs import Command, SubCommand
from .langs import LangsHandler

PLATFORM_LOCALES = frozenset(locale.value for locale in discord.Locale)

def expand_locale(langs: LangsHandler, locale: str) -> List[str]:

    """
    Return the platform locale codes populated by locale.
    The result may contain the same code twice.
    """

    #copy, the alias table must not grow with every call
    codes = list(langs.get_aliases(locale))
    if locale in PLATFORM_LOCALES:
        codes.append(locale)
    return codes

def _localize(entity, bundle: dict, langs: LangsHandler):

    entity.name_localizations = {}
    entity.description_localizations = {}

    for locale in langs.values:
        codes = expand_locale(langs, locale)

        if bundle.get("name"):
            value = langs.get_key(locale, bundle["name"])
            if value:
                for code in codes:
                    entity.name_localizations[code] = value

        if bundle.get("description"):
            value = langs.get_key(locale, bundle["description"])
            if value:
                for code in codes:
                    entity.description_localizations[code] = value

def _localize_groups(command: Command, langs: LangsHandler):

    command.groups = {}
    for locale in langs.values:
        codes = expand_locale(langs, locale)
        for group, keys in command.group_locales.items():
            entry = command.groups.setdefault(group, {
                "default_description": keys.get("default_description"),
                "name": [],
                "description": []
                })

            if keys.get("name"):
                value = langs.get_key(locale, keys["name"])
                if value:
                    entry["name"].extend((code, value) for code in codes)

            if keys.get("description"):
                value = langs.get_key(locale, keys["description"])
                if value:
                    entry["description"].extend((code, value) for code in codes)

def parse_command_locales(command, langs: LangsHandler):

    """
    Resolve the translation keys of a Command or SubCommand in place.

    Fills name_localizations and description_localizations of the command
    (if it declares locales) and of its plain options (if they declare
    locales), and the groups table of a Command declaring group_locales.
    """

    if command.locales:
        _localize(command, command.locales, langs)

    for option in command.options or []:
        if isinstance(option, SubCommand) or not option.locales:
            continue
        _localize(option, option.locales, langs)

    if isinstance(command, Command) and command.group_locales:
        _localize_groups(command, langs)
