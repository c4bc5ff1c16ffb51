import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from botocore.exceptions import BotoCoreError

from ssmps import __version__
from ssmps.config import Settings, build_client
from ssmps.errors import SsmpsError
from ssmps.paths import make_name_to_path_map
from ssmps.store import get_multiple_param_values

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"

def configure_logging(level: str = "WARNING") -> None:
    """One stderr handler on the package logger; stdout is kept for results."""
    pkg = logging.getLogger("ssmps")
    pkg.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    pkg.addHandler(handler)
    pkg.setLevel(level.upper())

def validate_args(names: Sequence[str]) -> bool:
    if len(names) < 1:
        logger.error("Too few arguments")
        return False
    return True

def run(names: Sequence[str], settings: Settings, client: Any) -> str:
    """Resolve names and return the text to print (without trailing newline)."""
    name_to_path = make_name_to_path_map(settings.base_path, names)
    paths: List[str] = list(dict.fromkeys(name_to_path.values()))

    path_to_value = get_multiple_param_values(client, paths)

    if len(names) == 1:
        return path_to_value.get(name_to_path[names[0]], "")

    # same name given twice still counts as the multi-value form
    name_to_value: Dict[str, str] = {
        name: path_to_value.get(path, "") for name, path in name_to_path.items()
    }
    return json.dumps(name_to_value, separators=(",", ":"), sort_keys=True)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ssmps",
        description="Print values from AWS SSM Parameter Store. "
        "Relative names are resolved under $SSMPS_BASE_PATH.",
        epilog="Use -- before names that start with a dash: ssmps -- -name",
    )
    ap.add_argument("names", nargs="*", metavar="name", help="parameter name or absolute path")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if not validate_args(args.names):
        return 1

    try:
        client = build_client(settings)
        out = run(args.names, settings, client)
    except (SsmpsError, BotoCoreError) as e:
        print(e, file=sys.stderr)
        return 1

    print(out)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
