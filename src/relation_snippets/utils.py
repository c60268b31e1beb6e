import logging
import os


class InvalidSpanError(ValueError):
    """A span pair that breaks the ordering or sentence containment assumptions."""


class InvalidSpanOrderError(InvalidSpanError):
    pass


class SpanOutsideSentenceError(InvalidSpanOrderError):
    pass


class SnippetLogger:
    LOG_LVLs = {
        'i': logging.INFO,
        'd': logging.DEBUG,
        'e': logging.ERROR,
        'w': logging.WARN
    }

    def __init__(self, logger_file=None, logger_level='d'):
        self.lf = logger_file
        self.lvl = logger_level

    def _has_file_handler(self, logger):
        log_path = os.path.abspath(self.lf)
        return any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in logger.handlers)

    def _create_logger(self, logger_name=""):
        logger = logging.getLogger(logger_name)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                                      datefmt="%Y-%m-%d %H:%M:%S")
        logger.setLevel(self.LOG_LVLs[self.lvl])
        if self.lf:
            if self._has_file_handler(logger):
                return logger
            fh = logging.FileHandler(self.lf)
            fh.setFormatter(formatter)
            fh.setLevel(self.LOG_LVLs[self.lvl])
            logger.addHandler(fh)
        elif not logger.handlers:
            # module level loggers call this on import; only one stream handler per logger
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            ch.setLevel(self.LOG_LVLs[self.lvl])
            logger.addHandler(ch)

        return logger

    def get_logger(self):
        return self._create_logger("Relation_Snippet_Printer")
