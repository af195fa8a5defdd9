import logging


def get_logger(name: str = "articulation") -> logging.Logger:
    logger = logging.getLogger(name)
    root = logging.getLogger("articulation")
    if root.handlers:
        return logger
    root.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    fmt = logging.Formatter("[%(levelname)s] %(message)s")
    handler.setFormatter(fmt)
    root.addHandler(handler)
    return logger
