import argparse
import logging
import sys

from .attribute import attribute
from .configured_logger import new_logger
from .decode import CorruptInputError, decode
from .rank import hotspot_frame, rank
from .report import format_hotspots, format_summary, write_csv

logger = logging.getLogger(__name__)


def get_parser():
    parser = argparse.ArgumentParser(
        prog="pprof-hotspots",
        description="Report the top flat / cumulative hotspots in a pprof profile",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("profile", help="gzip-compressed pprof file")
    parser.add_argument(
        "--top",
        help="number of functions to report",
        type=int,
        default=10,
    )
    parser.add_argument(
        "--csv",
        help="also save the ranked table to this csv file",
        default=None,
    )
    parser.add_argument(
        "--verbose",
        help="log decoding and attribution details to stderr",
        action="store_true",
        default=False,
    )
    return parser


def main(argv=None):
    """
    Decode the profile, attribute and rank, print the report.
    """
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.top < 0:
        parser.error(f"--top must be >= 0, got {args.top}")

    new_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        profile = decode(args.profile)
    except (CorruptInputError, OSError) as e:
        print(f"Error reading profile: {e}", file=sys.stderr)
        return 1

    df = hotspot_frame(rank(attribute(profile), args.top))

    print(format_summary(profile))
    print()
    print(format_hotspots(df, profile.period))

    if args.csv:
        write_csv(df, profile.period, args.csv)
        logger.info(f"Saved {len(df)} rows to {args.csv}")
    return 0


def run():
    sys.exit(main())
