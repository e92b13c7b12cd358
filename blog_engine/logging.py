"""
Logger implementations for the blog engine.
Each one satisfies the Logger protocol so components can take any of them.
"""
import logging
from datetime import datetime


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConsoleLogger:
    """Prints timestamped lines to stdout"""
    
    def __init__(self, name: str = "blog_engine", level: str = "INFO"):
        self.name = name
        self.level = level.upper()
        if self.level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
    
    def info(self, message: str) -> None:
        self._log("INFO", message)
    
    def warning(self, message: str) -> None:
        self._log("WARNING", message)
    
    def error(self, message: str) -> None:
        self._log("ERROR", message)
    
    def debug(self, message: str) -> None:
        self._log("DEBUG", message)
    
    def _log(self, level: str, message: str) -> None:
        """Print the message when its level is at or above the threshold"""
        if _LEVELS.index(level) < _LEVELS.index(self.level):
            return
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{timestamp}] {level} - {self.name}: {message}")


class StandardLogger:
    """Logger using Python's standard logging module"""
    
    def __init__(self, logger_name: str = "blog_engine", level: str = "INFO"):
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(getattr(logging, level.upper()))
        
        # Only the package root gets a handler; children propagate to it
        root = logging.getLogger(logger_name.split(".")[0])
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            root.addHandler(handler)
    
    def info(self, message: str) -> None:
        self.logger.info(message)
    
    def warning(self, message: str) -> None:
        self.logger.warning(message)
    
    def error(self, message: str) -> None:
        self.logger.error(message)
    
    def debug(self, message: str) -> None:
        self.logger.debug(message)


class NullLogger:
    """Discards everything"""
    
    def info(self, message: str) -> None:
        pass
    
    def warning(self, message: str) -> None:
        pass
    
    def error(self, message: str) -> None:
        pass
    
    def debug(self, message: str) -> None:
        pass


class LoggerFactory:
    """Factory for creating logger instances"""
    
    @staticmethod
    def create_console_logger(name: str = "blog_engine", level: str = "INFO") -> ConsoleLogger:
        """Create console logger"""
        return ConsoleLogger(name, level)
    
    @staticmethod
    def create_standard_logger(name: str = "blog_engine", level: str = "INFO") -> StandardLogger:
        """Create standard library logger"""
        return StandardLogger(name, level)
    
    @staticmethod
    def create_null_logger() -> NullLogger:
        """Create a logger that drops every message"""
        return NullLogger()
    
    @staticmethod
    def create(logger_type: str = "standard", name: str = "blog_engine",
               level: str = "INFO"):
        """Create a logger by type name"""
        if logger_type == "console":
            return LoggerFactory.create_console_logger(name, level)
        elif logger_type == "standard":
            return LoggerFactory.create_standard_logger(name, level)
        elif logger_type == "null":
            return LoggerFactory.create_null_logger()
        else:
            raise ValueError(f"Unknown logger type: {logger_type}")
