import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a single stream handler to the root logger.

    Safe to call more than once (app factory + tests); only the level is
    updated after the first call.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO; keep provider chatter out of app logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True
