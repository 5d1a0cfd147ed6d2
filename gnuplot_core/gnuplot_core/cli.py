#!/usr/bin/env python3
import argparse
import json
import sys

from . import get_discovery, __version__
from .discovery import RECOMMENDED_VERSION, meets_recommended, require_version
from .errors import GnuplotError
from .config import load_settings


def cmd_info(args):
    gp = get_discovery()
    print(json.dumps(gp.to_dict(), indent=2, ensure_ascii=False))


def cmd_terminals(args):
    gp = get_discovery()
    for term in gp.terminals:
        print(f'{term.name}\t{term.description}')


def cmd_require(args):
    gp = require_version(get_discovery(), args.version)
    print(f'gnuplot {gp.version} at {gp.executable_path} satisfies {args.version}')


def cmd_check(args):
    gp = get_discovery()
    pl = f' patchlevel {gp.patch_level}' if gp.patch_level else ''
    print(f'gnuplot {gp.version}{pl}: {gp.executable_path} ({len(gp.terminals)} terminals)')
    if not meets_recommended(gp):
        print(
            f'warning: gnuplot {gp.version} is older than the recommended {RECOMMENDED_VERSION}',
            file=sys.stderr,
        )


def main(argv=None):
    parser = argparse.ArgumentParser(description='Locate and verify the gnuplot executable')
    parser.add_argument('--verbose', action='store_true', help='Log discovery details at DEBUG level')
    parser.add_argument('--version', action='version', version=f'gnuplot-core {__version__}')
    sub = parser.add_subparsers(required=True)

    p_info = sub.add_parser('info', help='Show discovered path, version, patch level and terminals as JSON')
    p_info.set_defaults(func=cmd_info)

    p_terms = sub.add_parser('terminals', help='List supported terminal types, one per line')
    p_terms.set_defaults(func=cmd_terminals)

    p_req = sub.add_parser('require', help='Fail unless gnuplot is at least the given version')
    p_req.add_argument('version', help='Minimum major.minor version, e.g., 5.0')
    p_req.set_defaults(func=cmd_require)

    p_check = sub.add_parser('check', help=f'Summarize gnuplot and warn if older than {RECOMMENDED_VERSION}')
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.verbose:
            settings["log_level"] = "DEBUG"
        get_discovery(settings)
        args.func(args)
    except GnuplotError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ValueError as e:
        print(f'gnuplot_core: {e}', file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
