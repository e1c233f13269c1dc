"""
Command-line entry point: collect tokens into a log and show it.

Examples:
    rpnlog "PUSH 1" "PUSH 2" ADD
    rpnlog --file tokens.txt --format yaml
"""
import argparse
import logging
import sys
from typing import List, Optional

from rpnlog.log import OrderedStringLog
from rpnlog.serialization import log_to_json, log_to_yaml


logger = logging.getLogger(__name__)


def _read_token_file(path: str) -> List[str]:
    """One token per line; the line terminator is not part of the token."""
    with open(path, 'r', encoding='utf-8') as fh:
        return [line.rstrip('\n') for line in fh]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rpnlog',
        description='Collect reverse polish notation tokens and display them in order',
    )
    parser.add_argument('tokens', nargs='*', help='Tokens to append, in order')
    parser.add_argument('--file', '-f', help='File with one token per line (appended before positional tokens)')
    parser.add_argument(
        '--format',
        choices=['text', 'json', 'yaml'],
        default='text',
        help='Output format (default: text)',
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging on stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        )

    log = OrderedStringLog()
    if args.file:
        try:
            log.extend(_read_token_file(args.file))
        except OSError as exc:
            print(f"Cannot read token file {args.file}: {exc.strerror}", file=sys.stderr)
            return 1
    log.extend(args.tokens)
    logger.debug("Collected %d tokens", len(log))

    if args.format == 'json':
        print(log_to_json(log))
    elif args.format == 'yaml':
        sys.stdout.write(log_to_yaml(log))
    else:
        log.display()
    return 0


if __name__ == '__main__':
    sys.exit(main())
