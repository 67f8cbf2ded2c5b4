#Config manager for the command subsystem

from xml.etree import ElementTree as ET #we use etree xml documents to store config information
import logging
from pathlib import Path
from typing import Dict, List

DEFAULT_CONFIG_PATH = "config/appcmds.xml"
ROOT_TAG = "appcmds"

class VersionError(Exception):

    """
    This exception is thrown if the config file version doesn't match the version specified by the application.
    """

    pass

class ConfigManager():

    """
    This class represents an xml configuration file.
    Values are accessed using dotted paths instead of nested elements, so
    "commands.path" refers to the <path> element inside <commands>.

    Example:

        <appcmds version="1">
            <commands>
                <path>commands</path>
                <filter>^(?!_).*\\.py$</filter>
            </commands>
            <langs>
                <path>langs</path>
                <aliases>
                    <alias locale="en"><code>en-US</code><code>en-GB</code></alias>
                </aliases>
            </langs>
        </appcmds>
    """

    logger = logging.getLogger("appcmds.ConfigManager")

    def __init__(self, path=DEFAULT_CONFIG_PATH, requireVersion=None):

        """
        Initialize config manager.
        Optional path argument specifies path to load config from.
        Optional requireVersion argument specifies a minimum version the application requires.
        """

        self.minVersion = requireVersion
        self.path = Path(path)
        self.version = "N/A"
        self.root = ET.Element(ROOT_TAG)
        self.load()

    def load(self, path=None) -> bool:

        """
        Load a config from <path> or the default config.
        If the file can't be read, the previous config data (or an empty config) is kept.
        Raises VersionError if the config is older than the required version.
        """

        if path:
            self.path = Path(path)

        self.logger.info("Loading configuration file...")
        try:
            root = ET.ElementTree(file=str(self.path)).getroot() #Load the config (extracting the root element from the element tree generated from a file)
        except OSError:
            self.logger.error("Failed to load config data: File %s could not be opened." % self.path)
            return False
        except ET.ParseError:
            self.logger.error("Failed to load config data: An error occured while parsing XML data.")
            return False

        version = root.get("version", "N/A")
        if self.minVersion:
            try:
                v = int(version)
            except ValueError:
                #no usable version attribute, the config is REALLY old or was manipulated
                raise VersionError("Version number doesn't meet application requirements! Config is very old or was manipulated.")
            if v < self.minVersion:
                raise VersionError("Version number doesn't meet application requirements! (minimum version %i/config version %s)" % (self.minVersion, version))

        self.root = root
        self.version = version
        self.logger.info("Config data loaded. (Configuration file version %s)" % self.version)

        return True

    def getElement(self, path=None) -> ET.Element:

        """
        Get element at <path>. If path is None returns root element.
        Returns None if the element doesn't exist.
        """

        if not path: return self.root

        cElement = self.root
        for i in path.split("."):
            cElement = cElement.find(i)
            if cElement is None:
                return None

        return cElement

    def getElementText(self, path=None, default="") -> str:

        """
        Shorthand for getElement(path).text . Supports default values.
        """

        element = self.getElement(path)
        if element is None or element.text is None:
            return default
        return element.text.strip()

    def getAliases(self, path="langs.aliases") -> Dict[str, List[str]]:

        """
        Read the locale alias table at <path>.
        Returns a mapping of locale identifier to platform locale codes.
        """

        aliases = {}
        element = self.getElement(path)
        if element is None:
            return aliases
        for alias in element.findall("alias"):
            locale = alias.get("locale")
            if not locale:
                self.logger.warning("Ignoring alias without locale attribute.")
                continue
            aliases.setdefault(locale, []).extend(code.text.strip() for code in alias.findall("code") if code.text)
        return aliases
