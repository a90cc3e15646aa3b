#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""The key/value emission primitive every directive helper is built on.

Cargo reads lines of the form ``cargo:KEY=VALUE`` from the standard output
of a build script. pair() formats one such line and writes it to a stream.
"""

import io
import sys

import attr

PREFIX = 'cargo'


@attr.s(frozen=True)
class Directive:
    """One line for Cargo, before formatting.

    The key and value are joined into a single str.format() template, so
    both may contain placeholders resolved against args and kwargs.
    """
    key = attr.ib()
    value = attr.ib()
    args = attr.ib(default=(), converter=tuple)
    kwargs = attr.ib(factory=dict)

    @property
    def template(self):
        return f'{PREFIX}:{self.key}={self.value}'

    def format(self):
        return self.template.format(*self.args, **self.kwargs)


def write(line, stream=None, end='\n'):
    """Write one line to stream (stdout by default) in a single write() call."""
    if stream is None:
        stream = sys.stdout
    text = line + end
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode('utf-8'))
    else:
        stream.write(text)


def emit(directive, to=None):
    # Formatting happens before the write, so a bad template never leaves a partial line.
    write(directive.format(), stream=to)


def pair(key, value, *args, to=None, **kwargs):
    """Emit ``cargo:key=value`` to Cargo.

    This is the base function upon which the other helpers are built, and
    can be used directly to emit arbitrary user-defined metadata:

        pair('root', '/path/to/root')
        pair('{lib}dir', '/path/to/{lib}', lib='foo')

    Pass to= to write somewhere other than stdout.
    """
    emit(Directive(key, value, args, kwargs), to=to)


def capture_output(func):
    """Call func(stream) with an in-memory stream and return what it wrote."""
    stream = io.StringIO()
    func(stream)
    return stream.getvalue()


def pair_each(key, values, to=None):
    """Emit one ``cargo:key=value`` line per value, in order.

    Values are emitted literally; braces in paths or flags are not treated
    as placeholders.
    """
    if not values:
        raise TypeError(f'at least one value is required for {key}')
    for value in values:
        pair(key, '{}', value, to=to)
