"""Command-line conversion and fetching.

Usage
-----
    alphacodec convert --from fasta --to csv uniprot_sprot.fasta uniprot_sprot.tsv
    alphacodec convert --from msconvert --to fullms --policy lenient run.mgf run.txt
    alphacodec fetch P46406 P02769 -o proteins.tsv
"""

import argparse
import logging
import sys
from typing import List, Optional

from .client import UniProtClient
from .codecs import RecordCodec, SpectrumCodec, SraCodec, UniProtCodec, UniProtFormat
from .config import Policy, setup_logging
from .errors import CodecError
from .formats.mgf import MgfKind

logger = logging.getLogger(__name__)

UNIPROT_FORMATS = {fmt.value: fmt for fmt in UniProtFormat}
MGF_KINDS = {kind.value: kind for kind in MgfKind}
ALL_FORMATS = sorted([*UNIPROT_FORMATS, *MGF_KINDS, "fastq"])


def codec_for(name: str) -> RecordCodec:
    if name in UNIPROT_FORMATS:
        return UniProtCodec(UNIPROT_FORMATS[name])
    if name in MGF_KINDS:
        return SpectrumCodec(MGF_KINDS[name])
    if name == "fastq":
        return SraCodec()
    raise ValueError(f"Unknown format: {name!r}")


def _family(name: str) -> str:
    if name in UNIPROT_FORMATS:
        return "uniprot"
    if name in MGF_KINDS:
        return "mgf"
    return "sra"


def convert(args: argparse.Namespace) -> int:
    if _family(args.source_format) != _family(args.target_format):
        logger.error(f"Cannot convert {args.source_format} records to {args.target_format}")
        return 2
    policy = Policy.from_name(args.policy)
    source = codec_for(args.source_format)
    target = codec_for(args.target_format)
    with source.iter_file(args.input, policy=policy) as records:
        target.to_file(records, args.output, policy=policy)
    return 0


def fetch(args: argparse.Namespace) -> int:
    client = UniProtClient(timeout=args.timeout)
    text = client.fetch_text(args.accessions)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(text)
        logger.info(f"✓ Saved {len(args.accessions)} accessions to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alphacodec",
        description="Convert UniProt, MGF and FASTQ records between formats.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_convert = subparsers.add_parser("convert", help="Convert a file between formats")
    p_convert.add_argument("--from", dest="source_format", choices=ALL_FORMATS, required=True)
    p_convert.add_argument("--to", dest="target_format", choices=ALL_FORMATS, required=True)
    p_convert.add_argument(
        "--policy",
        choices=[policy.value for policy in Policy],
        default=Policy.DEFAULT.value,
        help="How to treat invalid records (default: default)",
    )
    p_convert.add_argument("input", help="Input file")
    p_convert.add_argument("output", help="Output file")
    p_convert.set_defaults(func=convert)

    p_fetch = subparsers.add_parser("fetch", help="Download UniProt entries as TSV")
    p_fetch.add_argument("accessions", nargs="+", help="UniProt accessions (P46406)")
    p_fetch.add_argument("-o", "--output", help="Output file (default: stdout)")
    p_fetch.add_argument("--timeout", type=float, default=30.0, help="Seconds (default: 30)")
    p_fetch.set_defaults(func=fetch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        return args.func(args)
    except (CodecError, OSError) as exc:
        logger.error(f"{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
