import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_level(value: str | None) -> int:
    """Map 'debug', 'INFO', ... to a logging constant, INFO when unrecognized."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the root handler and level once at startup and return the service logger."""
    logging.basicConfig(level=_parse_level(level), format=LOG_FORMAT)
    logging.getLogger().setLevel(_parse_level(level))
    return logging.getLogger("app")
