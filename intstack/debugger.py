#!/usr/bin/env python3

"""
Stack Debugger

If enabled, this will output a line after each stack operation:
    * OP - Operation performed, with its argument if it had one
    * N  - Frames in use, and the stack capacity
    * ST - Outcome ("ok", "ok -> value", or the error raised)

In verbose mode, the stack contents follow on a second line, top first.  The
driver uses this whenever an operation fails.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .result import Ok


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, stack, operation, result=None, verbose=False):
        debug_str = "OP: {:<12} N: {}/{}".format(operation, stack.num_frames, stack.capacity)

        if result is not None:
            if isinstance(result, Ok):
                status = "ok" if result.value is None else "ok -> {}".format(result.value)
            else:
                status = "{}: {}".format(type(result.error).__name__, result.error)

            debug_str += " ST: {}".format(status)

        if verbose:
            stack_items = stack.get_items()
            stack_str = (" {}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, stack, operation, result=None, verbose=False):
        print(self.debug(stack, operation, result, verbose))
