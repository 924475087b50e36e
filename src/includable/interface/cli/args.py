from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the includable CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="includable",
        description=(
            "Test whether a Puppet class file exists on the environment's "
            "module path and declares the class."
        ),
    )

    p.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Qualified class name, e.g. role::base.",
    )

    # --- Environment Selection ---
    p.add_argument(
        "-e", "--environment",
        dest="environment",
        default=None,
        help="Environment to evaluate (default: production).",
    )
    p.add_argument(
        "--environmentpath",
        dest="environmentpath",
        default=None,
        help="Directory holding all environments.",
    )
    p.add_argument(
        "--basemodulepath",
        dest="basemodulepath",
        default=None,
        help="Colon-delimited global module directories.",
    )
    p.add_argument(
        "--root",
        dest="environment_root",
        default=None,
        help="Environment directory; overrides environmentpath/environment.",
    )
    p.add_argument(
        "--config-file",
        dest="config_file",
        default=None,
        help="environment.conf to read modulepath from.",
    )

    # --- Matching ---
    p.add_argument(
        "--regex",
        action="store_true",
        help="Embed the class name as a regular expression instead of literal text.",
    )

    # --- Settings Sources ---
    p.add_argument(
        "--settings",
        dest="settings_file",
        default=None,
        help="JSON settings file (default: $INCLUDABLE_CONFIG or ~/.includable/config.json).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any settings file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Output ---
    p.add_argument(
        "--which",
        action="store_true",
        help="Print the path of the declaring manifest instead of true/false.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Log every candidate manifest (DEBUG level).",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None so the merge keeps the loaded value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["environment"] = args.environment
    overrides["environmentpath"] = args.environmentpath
    overrides["basemodulepath"] = args.basemodulepath
    overrides["environment_root"] = args.environment_root
    overrides["config_file"] = args.config_file

    if args.regex:
        overrides["literal_match"] = False

    return overrides
