#
# Log - Logging support for the boot runtime
#
import logging

from .Err import ArgErr


class LogLevel:
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal, pyLevel):
        self._name = name
        self._ordinal = ordinal
        self._pyLevel = pyLevel

    @staticmethod
    def fromStr(name, checked=True):
        """Parse LogLevel from string"""
        level = LogLevel._levels.get(name.lower())
        if level is not None:
            return level
        if checked:
            raise ArgErr(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        """Get all log level values"""
        return [LogLevel.debug, LogLevel.info, LogLevel.warn, LogLevel.err, LogLevel.silent]

    def name(self):
        return self._name

    def __str__(self):
        return self._name

    def __lt__(self, other):
        return self._ordinal < other._ordinal


LogLevel.debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel.info = LogLevel("info", 1, logging.INFO)
LogLevel.warn = LogLevel("warn", 2, logging.WARNING)
LogLevel.err = LogLevel("err", 3, logging.ERROR)
LogLevel.silent = LogLevel("silent", 4, logging.CRITICAL + 10)

for _level in LogLevel.vals():
    LogLevel._levels[_level.name()] = _level


class LogRec:
    """
    LogRec represents a single log record.
    """

    def __init__(self, level, logName, msg):
        self._level = level
        self._logName = logName
        self._msg = msg

    def level(self):
        return self._level

    def logName(self):
        return self._logName

    def msg(self):
        return self._msg

    def __str__(self):
        return f"[{self._level.name()}] [{self._logName}] {self._msg}"


class Log:
    """
    Log provides logging functionality on top of the logging module.
    """

    _logs = {}
    _handlers = []

    def __init__(self, name, register=True):
        if not Log._isValidName(name):
            raise ArgErr(f"Invalid log name: {name}")
        if register and name in Log._logs:
            raise ArgErr(f"Log already registered: {name}")

        self._name = name
        self._level = LogLevel.info
        self._pyLogger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _isValidName(name):
        """Validate log name - must be valid identifier characters"""
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        log = Log._logs.get(name)
        if log is None:
            log = Log(name, True)
            from .Env import Env
            log.level(LogLevel.fromStr(Env.cur().config("logLevel"), False) or LogLevel.info)
        return log

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(newLevel)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def isEnabled(self, level):
        return not level < self._level

    def debug(self, msg):
        if self.isEnabled(LogLevel.debug):
            self.log(LogRec(LogLevel.debug, self._name, msg))

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in Log._handlers:
            handler(rec)

        self._pyLogger.log(rec._level._pyLevel, rec._msg)

    @staticmethod
    def addHandler(handler):
        """Add a global log handler"""
        if not callable(handler):
            raise ArgErr("Handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def removeHandler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
