"""Command line interface: ``rocketgen --height N [--palette NAME]``."""
import argparse
import sys
from enum import Enum

from .assembly import NumpyRandomSource, RocketAssembler, RocketError
from .parts import DEFAULT_CATALOG
from .utils.config import default_palette, load_config, ratio_range
from .utils.logging import setup_logging


class Palette(Enum):
    # Accepted for forward compatibility; rendering is monochrome.
    AMERICA = "america"


def build_parser(default_palette=Palette.AMERICA.value):
    parser = argparse.ArgumentParser(
        prog="rocketgen",
        description="Print a randomly assembled ASCII-art rocket.",
        add_help=False,
    )
    parser.add_argument("-h", "--height", type=int, required=True,
                        help="total height of the rocket in rows (at least 3)")
    parser.add_argument("-p", "--palette", default=default_palette,
                        choices=[palette.value for palette in Palette],
                        help="colour palette (currently ignored)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log assembly steps to stderr")
    parser.add_argument("--help", action="help",
                        help="show this help message and exit")
    return parser


def main(argv=None, stdout=None):
    """Run the generator and return the process exit status."""
    stdout = stdout or sys.stdout
    config = load_config()
    logger = setup_logging("rocketgen", config["logging"]["level"])

    try:
        palette = default_palette(config, [choice.value for choice in Palette])
        ratios = ratio_range(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    args = build_parser(palette).parse_args(argv)
    if args.verbose:
        logger = setup_logging("rocketgen", "DEBUG")

    try:
        assembler = RocketAssembler(
            args.height,
            catalog=DEFAULT_CATALOG,
            random_source=NumpyRandomSource(),
            ratio_range=ratios,
        )
        rocket = assembler.build()
    except RocketError as e:
        logger.error(f"Could not build rocket: {e}")
        return 1

    stdout.write(rocket.render())
    return 0


if __name__ == '__main__':
    sys.exit(main())
