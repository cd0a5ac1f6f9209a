#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from intstack import main
from intstack.constants import DEFAULT_CAPACITY, DEFAULT_VALUES


def parse_args():
    parser = ArgumentParser()
    parser.add_argument(
        "-c", "--capacity", type=int,
        help="set the maximum number of frames the stack may hold (default {})".format(DEFAULT_CAPACITY)
    )
    parser.add_argument(
        "-v", "--values",
        help="comma-separated integers to push, in order (default {})".format(DEFAULT_VALUES)
    )
    parser.add_argument(
        "-p", "--pops", type=int,
        help="number of pops to perform after pushing (default is one more than the number of values)"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output after each stack operation"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to run the scenario from another script by calling this with a dictionary
    for operation, result in main(args):
        print("{:<12} {}".format(operation, result))
