import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

class LangsHandler():

    """
    Locale table.

    values maps a locale identifier (free form, e.g. "en" or "es-ES") to a
    nested dictionary of translations. Keys are looked up using a dotted path,
    so "ping.name" refers to values[locale]["ping"]["name"].

    aliases is a list of (locale identifier, [platform locale codes]) pairs
    telling the command handler which platform locales a locale identifier
    should populate.
    """

    logger = logging.getLogger("appcmds.LangsHandler")

    def __init__(self, values: Optional[Dict[str, dict]] = None, aliases=None):

        self.values = dict(values or {})
        self.aliases: List[Tuple[str, List[str]]] = []
        if aliases:
            self.set_aliases(aliases)

    def set_aliases(self, aliases):

        """
        Set the alias table.
        aliases is either a mapping of locale identifier to platform codes or a sequence of pairs.
        """

        if isinstance(aliases, Mapping):
            aliases = aliases.items()
        self.aliases = [(locale, list(codes)) for locale, codes in aliases]

    def get_aliases(self, locale: str) -> Sequence[str]:

        """
        Return the platform codes of the first alias entry for locale, or an empty tuple.
        """

        for name, codes in self.aliases:
            if name == locale:
                return codes
        return ()

    def get_key(self, locale: str, key: str) -> Optional[str]:

        """
        Look up key in the translations of locale.
        Returns None if the locale, or any part of the key path, doesn't exist
        or if the value isn't a string.
        """

        value = self.values.get(locale)
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        if isinstance(value, str):
            return value
        return None

    def load(self, directory) -> int:

        """
        Load all <locale>.json files from directory into values.
        Files that can't be parsed are skipped.
        Returns the number of locales loaded.
        """

        directory = Path(directory)
        if not directory.is_dir():
            self.logger.warning("Locale directory %s does not exist." % directory)
            return 0

        loaded = 0
        for path in sorted(directory.glob("*.json")):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                self.logger.warning("Unable to load locale file %s: %s" % (path, e))
                continue
            if not isinstance(data, dict):
                self.logger.warning("Locale file %s does not contain an object." % path)
                continue
            self.values[path.stem] = data
            loaded += 1
            self.logger.debug("Loaded locale %s" % path.stem)

        self.logger.info("%i locale(s) loaded from %s" % (loaded, directory))
        return loaded
