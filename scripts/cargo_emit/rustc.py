#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Directives that pass configuration, flags and link options to rustc."""

import os
from collections.abc import Mapping, Sequence

from .pair import pair, pair_each


def _as_pair(item, what):
    if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
        raise TypeError(f'expected a ({what}) pair, got {item!r}')
    return item


def _with_kind(item, kind):
    """Split an item into (value, kind); a (value, kind) pair overrides kind."""
    if isinstance(item, (str, os.PathLike)):
        return item, kind
    return _as_pair(item, 'value, kind')


def _pair_each_with_kind(key, items, kind, to):
    if not items:
        raise TypeError(f'at least one value is required for {key}')
    for value, item_kind in [_with_kind(item, kind) for item in items]:
        if item_kind:
            pair(key, '{}={}', item_kind, value, to=to)
        else:
            pair(key, '{}', value, to=to)


def rustc_cfg(feature, *args, to=None, **kwargs):
    """Tell Cargo to enable the cfg ``feature`` for the crate.

    feature is a str.format() template. After rustc_cfg('bench'), code can
    use ``#[cfg(bench)]``.
    """
    pair('rustc-cfg', feature, *args, to=to, **kwargs)


def rustc_env(var, value, *args, to=None, **kwargs):
    """Set the environment variable var to value at crate compile time.

    var and value are joined into a single str.format() template:

        rustc_env('MY_HASH', '{}', git_rev_hash)
    """
    pair('rustc-env', var + '=' + value, *args, to=to, **kwargs)


def rustc_flags(*flags, to=None):
    """Pass flags to the compiler. Cargo only accepts -l and -L here."""
    pair_each('rustc-flags', flags, to=to)


def rustc_cdylib_link_arg(*flags, to=None):
    """Pass ``-C link-arg=FLAG`` when building a cdylib."""
    pair_each('rustc-cdylib-link-arg', flags, to=to)


def rustc_link_arg(*flags, to=None):
    """Pass ``-C link-arg=FLAG`` when building any supported target."""
    pair_each('rustc-link-arg', flags, to=to)


def rustc_link_arg_bin(*pairs, to=None):
    """Pass ``-C link-arg=FLAG`` only when building the named binary.

    Takes (bin, flag) tuples, or a single mapping of bin to flag:

        rustc_link_arg_bin(('hello_world', '-Wall'))
        rustc_link_arg_bin({'a': '-Wl,-z,now', 'b': '-Wl,--as-needed'})
    """
    if len(pairs) == 1 and isinstance(pairs[0], Mapping):
        pairs = tuple(pairs[0].items())
    if not pairs:
        raise TypeError('at least one (bin, flag) pair is required for rustc-link-arg-bin')
    for bin_name, flag in [_as_pair(item, 'bin, flag') for item in pairs]:
        pair('rustc-link-arg-bin', '{}={}', bin_name, flag, to=to)


def rustc_link_arg_bins(*flags, to=None):
    """Pass ``-C link-arg=FLAG`` when building binary targets."""
    pair_each('rustc-link-arg-bins', flags, to=to)


def rustc_link_lib(*names, kind=None, to=None):
    """Link the named libraries, as with rustc's -l flag.

    Emits ``cargo:rustc-link-lib=[KIND=]NAME`` per name. kind applies to
    every name given as a plain string; a (name, kind) tuple sets its own:

        rustc_link_lib('ssl', ('ruby', 'static'), ('CoreFoundation', 'framework'))
        rustc_link_lib('ruby', kind='static')
    """
    _pair_each_with_kind('rustc-link-lib', names, kind, to)


def rustc_link_search(*paths, kind=None, to=None):
    """Add library search paths, as with rustc's -L flag.

    Emits ``cargo:rustc-link-search=[KIND=]PATH`` per path; kinds work as in
    rustc_link_lib().
    """
    _pair_each_with_kind('rustc-link-search', paths, kind, to)
