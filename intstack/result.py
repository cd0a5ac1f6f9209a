#!/usr/bin/env python3

"""
Status-Returning Stack Calls

Wraps Stack.push and Stack.pop so that a full or empty stack is reported back
as a value instead of an exception.  Callers check the result at the call site:

    result = pop(stack)
    if isinstance(result, Ok):
        use(result.value)

A failed pop is an Err, which has no value attribute at all, so there is no
stale output left lying around to be read by mistake.

Type errors (e.g. pushing a string) are programming mistakes, not stack states,
and are still raised.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from dataclasses import dataclass
from typing import Generic, TypeVar
from .stack import StackError

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


def push(stack, data):
    try:
        stack.push(data)
    except StackError as err:
        return Err(err)

    return Ok(None)


def pop(stack):
    try:
        return Ok(stack.pop())
    except StackError as err:
        return Err(err)
