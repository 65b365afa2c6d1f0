import logging


def get_logger(name: str, verbose: bool = False):
    logger = logging.getLogger(name)
    if verbose:
        logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    if not verbose:
        logger.setLevel(logging.INFO)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s — %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
