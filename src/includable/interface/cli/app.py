from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, settings file, CLI overrides), validation, the
lookup itself and result rendering. Exit codes: 0 includable,
1 not includable, 2 invalid input, 130 interrupted.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from includable.core.engine import locate
from includable.core.validator import validate_config
from includable.domain.config import (
    CONFIG_KEYS,
    build_environment,
    get_default_config,
    load_config,
)
from includable.infra.logging import LoggingConfig, configure_logging, get_logger
from includable.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 2. Configuration hierarchy: defaults < settings file < CLI flags
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.settings_file)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_FOUND

    # 3. Input validation (the core does not accept empty names)
    name = (args.name or "").strip()
    if not name:
        print("ERROR: a non-empty qualified class name is required.", file=sys.stderr)
        return EXIT_USAGE

    # 4. Lookup
    env = build_environment(clean_conf)
    logger.debug(f"Evaluating `{name}` in environment root {env.root}")
    try:
        target = locate(name, env, literal=clean_conf["literal_match"])
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Rendering
    _print_result(name, target, json_output=args.json_output, which=args.which)
    return EXIT_FOUND if target is not None else EXIT_NOT_FOUND

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of non-None overrides for known keys only.

    Args:
        base: Loaded configuration.
        overrides: Values coming from the command line.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(name: str, target: Optional[str], *, json_output: bool, which: bool) -> None:
    """Render the lookup outcome on stdout."""
    if json_output:
        payload = {"name": name, "includable": target is not None, "path": target}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif which:
        if target is not None:
            print(target)
    else:
        print("true" if target is not None else "false")


if __name__ == "__main__":
    sys.exit(main())
