# wagersim/utils/errors.py
class ConfigError(RuntimeError):
    """
    Raised when a configuration file cannot be located or read.
    """


class UnknownStrategyError(ValueError):
    """
    Raised by StrategyFactory for an unregistered strategy type.
    """
