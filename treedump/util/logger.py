import logging, sys, traceback

LOG_FILE = "treedump_debug.log"


def setup_app_logger(name="TREEDUMP", log_file=LOG_FILE):
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers: return logger
    formatter = logging.Formatter('%(asctime)s [%(name)s] [%(levelname)s] %(message)s')
    if log_file:
        fh = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    # stderr, stdout carries the report itself
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


def set_console_level(logger, level):
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def crash_handler(etype, value, tb):
    # Global hook to catch any unhandled exception
    logger = logging.getLogger("CRASH")
    error_msg = "".join(traceback.format_exception(etype, value, tb))
    logger.critical(f"UNHANDLED EXCEPTION:\n{error_msg}")
    for handler in logger.handlers: handler.flush()
