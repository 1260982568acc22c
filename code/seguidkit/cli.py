import sys
import logging
import argparse
from typing import List, Optional, Union

from seguidkit import __version__
from seguidkit.config import DEFAULTS, LOGGING
from seguidkit.core import (
    ChecksumEngine,
    ChecksumKind,
    SeguidError,
    StrandPair,
    list_alphabet_presets,
    parse_sequence_string
)

logger = logging.getLogger(__name__)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, LOGGING.level, logging.WARNING)
    logging.basicConfig(level=level, format=LOGGING.format, stream=sys.stderr)
    logging.getLogger('seguidkit').setLevel(level)


def read_sequence_text(args: argparse.Namespace) -> str:
    """Read the input and join its lines with a bare newline."""
    if args.input:
        with open(args.input, newline='') as f:
            raw = f.read()
    else:
        raw = sys.stdin.read()
    if '\r' in raw:
        logger.warning("Windows line endings in input were normalized to '\\n'")
    lines = [line.rstrip('\r') for line in raw.split('\n')]
    return '\n'.join(lines).rstrip('\n')


def resolve_sequence(kind: ChecksumKind, text: str) -> Union[str, StrandPair]:
    """Turn CLI input into the argument the checksum kind expects."""
    if not kind.double_stranded:
        return text
    spec = parse_sequence_string(text)
    if kind is ChecksumKind.CCSEGUID and not spec.is_double_stranded:
        return spec.watson
    return spec.as_strand_pair()


def cmd_checksum(args: argparse.Namespace) -> None:
    kind = ChecksumKind.from_name(args.type)
    alphabet = args.alphabet
    if alphabet is None:
        # the v1 kinds only make sense over their own protein alphabet
        alphabet = kind.default_alphabet if kind.label.startswith('seguidv1') else DEFAULTS.alphabet
    text = read_sequence_text(args)
    sequence = resolve_sequence(kind, text)
    logger.debug(f"Computing {kind.label} over {len(text)} input characters")
    engine = ChecksumEngine()
    print(engine.checksum(kind, sequence, alphabet=alphabet, form=args.form))


def cmd_alphabets(args: argparse.Namespace) -> None:
    for preset in list_alphabet_presets():
        print(f"{preset.name:<20} {preset.spec}")
        if args.verbose and preset.description:
            print(f"{'':<20} {preset.description}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='seguidkit', description='SEGUID checksum calculator')
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    p.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    p.add_argument('-q', '--quiet', action='store_true', help='Only log errors')
    sub = p.add_subparsers(dest='cmd', required=True)
    # checksum
    pc = sub.add_parser('checksum', help='Compute a checksum of a sequence read from stdin')
    pc.add_argument('--type', default=DEFAULTS.kind,
                    help='seguid, lsseguid, csseguid, ldseguid, cdseguid, ccseguid, '
                         'seguidv1 or seguidv1urlsafe')
    pc.add_argument('--alphabet', default=None,
                    help='Alphabet specification, e.g. "{DNA}" or "{DNA},XY"')
    pc.add_argument('--form', default=DEFAULTS.form, help='long, short or both')
    pc.add_argument('--input', default=None, help='Read the sequence from FILE instead of stdin')
    pc.set_defaults(func=cmd_checksum)
    # alphabets
    pa = sub.add_parser('alphabets', help='List predefined alphabets')
    pa.set_defaults(func=cmd_alphabets)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    try:
        args.func(args)
    except SeguidError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
