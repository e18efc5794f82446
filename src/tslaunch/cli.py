"""Command-line entry points for tslaunch."""

import argparse
import json
import logging
import posixpath
import sys

from tslaunch import __version__
from tslaunch.config import load_config
from tslaunch.launcher import build_launch_plan, exec_launch_plan
from tslaunch.models import LaunchPlan

log = logging.getLogger("tslaunch")

# Shell conventions for a failed exec.
COMMAND_NOT_FOUND_EXIT = 127
CANNOT_EXECUTE_EXIT = 126


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def _handoff(plan: LaunchPlan, prog: str) -> int:
    """Exec the plan; on failure report like a shell would and return its status."""
    executable = plan.interpreter.executable
    try:
        exec_launch_plan(plan)
    except FileNotFoundError:
        print(f"{prog}: {executable}: command not found", file=sys.stderr)
        return COMMAND_NOT_FOUND_EXIT
    except PermissionError:
        print(f"{prog}: {executable}: Permission denied", file=sys.stderr)
        return CANNOT_EXECUTE_EXIT
    except OSError as e:
        print(f"{prog}: {executable}: {e.strerror or e}", file=sys.stderr)
        return CANNOT_EXECUTE_EXIT
    return 0


def launch_main(argv: list[str] | None = None) -> int:
    """Run as the tsserver shim: argv[0] locates the install dir, the rest is forwarded."""
    args = list(sys.argv if argv is None else argv)
    invocation_path = args[0] if args else ""
    prog = posixpath.basename(invocation_path.replace("\\", "/")) or "tsserver"

    config = load_config()
    _configure_logging(config.debug)

    plan = build_launch_plan(invocation_path, args[1:], config=config)
    return _handoff(plan, prog)


def launch_entrypoint() -> None:
    """Console script entrypoint for the forwarding shim."""
    raise SystemExit(launch_main())


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the inspection CLI."""
    parser = argparse.ArgumentParser(
        prog="tslaunch",
        description="Launch tsserver with a local or system node and an extended NODE_PATH",
        epilog="Arguments after -- are forwarded to tsserver unchanged.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--install-dir",
        metavar="DIR",
        help="Resolve paths as if the launcher lived in DIR (default: this script's directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the launch plan as JSON instead of starting the server",
    )
    return parser


def _split_forwarded(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first ``--`` into (own options, forwarded args)."""
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def plan_to_dict(plan: LaunchPlan, module_path_var: str) -> dict:
    return {
        "install_dir": plan.install_dir,
        "interpreter": plan.interpreter.executable,
        "interpreter_kind": plan.interpreter.kind,
        "server_script": plan.server_script,
        "argv": plan.argv,
        "node_path": plan.env[module_path_var],
    }


def main(argv: list[str] | None = None) -> int:
    """Run the inspection CLI; without --dry-run it hands off like the shim."""
    own, forwarded = _split_forwarded(list(sys.argv[1:] if argv is None else argv))
    args = build_parser().parse_args(own)

    config = load_config()
    if args.debug:
        config.debug = True
    _configure_logging(config.debug)

    if args.install_dir:
        invocation_path = f"{args.install_dir.rstrip('/')}/tsserver"
    else:
        invocation_path = sys.argv[0]
    log.debug("invocation path %r", invocation_path)

    plan = build_launch_plan(invocation_path, forwarded, config=config)
    if args.dry_run:
        print(json.dumps(plan_to_dict(plan, config.module_path_var), indent=2))
        return 0
    return _handoff(plan, "tslaunch")


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
