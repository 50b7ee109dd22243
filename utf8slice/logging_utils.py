import logging
import logging.config
import sys

from utf8slice.parameters import ParameterError, Parameters

_CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s:%(name)s:%(message)s"
_CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# `logging` has no non-deprecated public lookup from level names to levels
_LEVELS_BY_NAME = {
    name: getattr(logging, name)
    for name in ("CRITICAL", "FATAL", "ERROR", "WARNING", "INFO", "DEBUG")
}
_LEVELS_BY_NAME["WARN"] = logging.WARNING


def configure_logging_from(params: Parameters) -> None:
    """
    Set up logging as *params* describe.

    A ``logging.config_file`` parameter names a `logging.config.fileConfig` file which
    takes over completely.  Otherwise the root logger gets the level ``logging.root_level``
    (INFO if absent) and a console handler on stderr, which keeps log lines out of
    slice output written to stdout.
    """
    if "logging.config_file" in params:
        logging.config.fileConfig(str(params.existing_file("logging.config_file")))
        return

    level_name = params.string("logging.root_level", default="INFO")
    level = _LEVELS_BY_NAME.get(level_name)
    if level is None:
        raise ParameterError(
            f"Invalid logging level {level_name}. Valid levels are {sorted(_LEVELS_BY_NAME)}"
        )

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, _CONSOLE_DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
