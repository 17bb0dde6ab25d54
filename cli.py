from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from gogetters import __version__
from gogetters.config import DEFAULT_DIRECTIVE, GeneratorConfig
from gogetters.errors import GettersError
from gogetters.generate import GetterGenerator
from gogetters.logging_config import setup_logging
from gogetters.model import GeneratedFile


logger = logging.getLogger("gogetters.cli")

COMMANDS = ("generate", "serve")


def _log_level(args: argparse.Namespace) -> Optional[str]:
	if args.debug:
		return "DEBUG"
	if args.verbose:
		return "INFO"
	if args.quiet:
		return "ERROR"
	return None


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
	return GeneratorConfig(
		directive=args.directive,
		export_strategy=args.title_case,
		formatter=args.formatter,
		fail_fast=not args.keep_going,
		check=args.check,
		allow_collisions=args.allow_collisions,
		legacy_chan_spelling=args.legacy_chan,
	)


def cmd_generate(args: argparse.Namespace) -> int:
	root = os.path.abspath(args.path)
	config = config_from_args(args)

	def announce(generated: GeneratedFile) -> None:
		if config.check:
			if generated.changed:
				print(f"stale getters for {generated.source_path}")
		else:
			print(f"generated getters for {generated.source_path}")

	try:
		generator = GetterGenerator(config)
		report = generator.run(root, on_generated=announce)
	except GettersError as exc:
		logger.error("%s", exc)
		return 1

	if not report.ok:
		logger.error("%d file(s) failed", len(report.failures))
		return 1
	if config.check and report.stale:
		return 1
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	common = argparse.ArgumentParser(add_help=False)
	common.add_argument("--verbose", "-v", action="store_true", help="Log progress")
	common.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
	common.add_argument("--debug", action="store_true", help="Log everything")

	parser = argparse.ArgumentParser(prog="gogetters")
	parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pg = sub.add_parser("generate", parents=[common], help="Generate *_getters.go files (default)")
	pg.add_argument("path", nargs="?", default=".", help="Directory to scan (default: working directory)")
	pg.add_argument("--check", action="store_true", help="Report stale outputs without writing")
	pg.add_argument("--keep-going", action="store_true", help="Continue after a failing file")
	pg.add_argument("--title-case", choices=["ascii", "unicode"], default="ascii", help="How field names are exported")
	pg.add_argument("--formatter", choices=["auto", "gofmt", "builtin"], default="auto")
	pg.add_argument("--allow-collisions", action="store_true", help="Do not reject clashing accessor names")
	pg.add_argument("--legacy-chan", action="store_true", help="Spell channel types as 'chann T'")
	pg.add_argument("--directive", default=DEFAULT_DIRECTIVE, help="Marker comment to look for")
	pg.set_defaults(func=cmd_generate)

	ps = sub.add_parser("serve", parents=[common], help="Run the HTTP preview service")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	argv = list(sys.argv[1:] if argv is None else argv)
	# no subcommand means "generate"
	if not argv or (argv[0] not in COMMANDS and argv[0] not in ("-h", "--help", "--version")):
		argv.insert(0, "generate")

	args = build_parser().parse_args(argv)
	setup_logging(_log_level(args))
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
