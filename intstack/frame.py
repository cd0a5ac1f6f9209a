#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Frame:
    __slots__ = ("data", "next")

    def __init__(self, data):
        self.data = data
        self.next = None

    def __repr__(self):
        return "<Frame {}>".format(self.data)
