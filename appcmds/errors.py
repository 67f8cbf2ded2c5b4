class CommandException(Exception):

    """
    Base class for all exceptions raised by the command subsystem.
    """

    pass

class NotConstructibleError(CommandException):

    """
    Raised when the value exported by a command file cannot be instantiated.
    """

    def __init__(self, path, value):

        self.path = path
        self.value = value
        super().__init__("Export of %s is not constructible: %r" % (path, value))

class CommandLoadError(CommandException):

    """
    Raised when a load pass cannot continue, e.g. the command directory is
    missing or a command file could not be imported.
    """

    pass

class ReloadError(CommandException):

    """
    Raised by a command instance if it could not reload itself from its file.
    """

    pass
