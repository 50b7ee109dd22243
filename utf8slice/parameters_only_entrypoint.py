import logging
import os
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import Callable, Optional, Sequence

from utf8slice.logging_utils import configure_logging_from
from utf8slice.parameters import Parameters, YAMLParametersLoader

_log = logging.getLogger(__name__)  # pylint:disable=invalid-name


def parameters_only_entry_point(
    main_method: Callable[[Parameters], None],
    usage_message: str = None,
    *,
    parameters: Optional[Parameters] = None,
    program_name: Optional[str] = None,
) -> None:
    """
    Run *main_method* on parameters taken from the command line.

    The command line is a parameter file followed by any number of ``-p name value`` overrides,
    where *name* may be dotted to reach into a namespace.
    If *parameters* is given, no parameter file is expected and the overrides apply to it.

    Logging is configured from the final parameters (see `configure_logging_from`)
    and the parameters are logged before *main_method* runs.
    """
    run_with_args(
        main_method,
        sys.argv[1:],
        usage_message,
        parameters=parameters,
        program_name=program_name or os.path.basename(sys.argv[0]),
    )


def run_with_args(
    main_method: Callable[[Parameters], None],
    args: Sequence[str],
    usage_message: str = None,
    *,
    parameters: Optional[Parameters] = None,
    program_name: Optional[str] = None,
) -> None:
    """
    Like `parameters_only_entry_point`, but with an explicit argument list instead of `sys.argv`.
    """
    parser = ArgumentParser(prog=program_name, description=usage_message)
    if parameters is None:
        parser.add_argument("param_file", type=Path, help="YAML parameter file")
    parser.add_argument(
        "-p",
        dest="overrides",
        action="append",
        nargs=2,
        metavar=("NAME", "VALUE"),
        default=[],
        help="override a parameter; may be repeated",
    )
    parsed = parser.parse_args(args)

    params = (
        parameters
        if parameters is not None
        else YAMLParametersLoader().load(parsed.param_file)
    )
    if parsed.overrides:
        params = params.unify(Parameters.from_key_value_pairs(parsed.overrides))

    configure_logging_from(params)
    _log.info("Ran with parameters:\n%s", params)
    main_method(params)
