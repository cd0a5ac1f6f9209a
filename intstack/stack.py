#!/usr/bin/env python3

"""
Bounded Integer Stack

A last-in-first-out chain of frames with a capacity fixed at construction.  The
stack owns its top frame directly, and every frame owns the one beneath it, so
each frame has exactly one owner and the chain can never loop back on itself.

Pushing onto a full stack raises CapacityExceeded, and popping an empty stack
raises StackEmpty.  Neither touches the stack, so both are safe to catch and
carry on from.  See the result module for a non-raising interface.

The stack never grows.  It is also not safe to share between threads without
wrapping every push, pop, and destroy call in the same lock.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .frame import Frame


class StackError(Exception):
    pass


class CapacityExceeded(StackError):
    def __init__(self, message="Stack overflow"):
        super().__init__(message)


class StackEmpty(StackError):
    def __init__(self, message="Stack underflow"):
        super().__init__(message)


class Stack:
    def __init__(self, capacity):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError("Stack capacity must be an integer")

        if capacity < 0:
            raise ValueError("Stack capacity cannot be negative")

        self.top = None
        self.num_frames = 0
        self._capacity = capacity

    @property
    def capacity(self):
        return self._capacity

    def push(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            raise TypeError("Only integers can be pushed, not {}".format(type(data).__name__))

        # Check before allocating, so a failed push leaves nothing behind
        if self.num_frames == self._capacity:
            raise CapacityExceeded()

        frame = Frame(data)
        frame.next = self.top
        self.top = frame
        self.num_frames += 1

    def pop(self):
        if self.num_frames == 0:
            raise StackEmpty()

        popped = self.top
        data = popped.data
        self.top = popped.next
        self.num_frames -= 1

        # The frame beneath now belongs to the stack, so the popped frame must not keep a link to it
        popped.next = None
        return data

    def peek(self):
        if self.num_frames == 0:
            raise StackEmpty()

        return self.top.data

    def is_empty(self):
        return self.num_frames == 0

    def is_full(self):
        return self.num_frames == self._capacity

    def destroy(self):
        # Unlink one frame at a time rather than dropping the whole chain at once, so each is released exactly once
        released = 0
        frame = self.top
        self.top = None

        while frame is not None:
            below = frame.next
            frame.next = None
            frame = below
            released += 1

        self.num_frames = 0
        return released

    def get_items(self):
        # For debugging.  Top first.
        items = []
        frame = self.top

        while frame is not None:
            items.append(frame.data)
            frame = frame.next

        return items

    def __len__(self):
        return self.num_frames

    def __repr__(self):
        return "<Stack {}/{}>".format(self.num_frames, self._capacity)
