#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to run the reference stack scenario, replacing args with
a dictionary of options.  This can be done via the Terminal or another script.

All options must be supplied.  Defaults can be specified with a 'None'.

With no overrides, a 3-frame stack is created, 5, 6, and 7 are pushed, and a
fourth push of 8 overflows.  Popping then yields 7, 6, and 5, and a fourth pop
underflows.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CAPACITY, DEFAULT_VALUES
from .debugger import Debugger
from .result import Err, push, pop
from .stack import Stack


class StartupError(Exception):
    pass


def parse_values(values):
    try:
        return [int(value) for value in values.split(",") if value.strip()]
    except ValueError:
        raise StartupError("Stack values must be comma-separated integers, got '{}'.".format(values)) from None


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    capacity = DEFAULT_CAPACITY if args["capacity"] is None else args["capacity"]

    if capacity < 0:
        raise StartupError("Stack capacity cannot be negative.")

    values = parse_values(DEFAULT_VALUES if args["values"] is None else args["values"])

    debugger = Debugger()
    debugger.set_live(args["debug"])

    stack = Stack(capacity)
    history = []

    try:
        for value in values:
            operation = "push({})".format(value)
            result = push(stack, value)
            history.append((operation, result))

            if debugger.is_live():
                debugger.output(stack, operation, result, verbose=isinstance(result, Err))

        # One more pop than the frames actually pushed, so the empty case is always reached by default
        num_pops = stack.num_frames + 1 if args["pops"] is None else args["pops"]

        for _ in range(num_pops):
            result = pop(stack)
            history.append(("pop()", result))

            if debugger.is_live():
                debugger.output(stack, "pop()", result, verbose=isinstance(result, Err))
    finally:
        # Release anything still held, e.g. when fewer pops than pushes were requested
        stack.destroy()

    return history
