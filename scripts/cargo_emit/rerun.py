#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Directives controlling when Cargo re-runs the build script."""

from .pair import pair_each


def rerun_if_changed(*paths, to=None):
    """Tell Cargo to run the build script again if any of paths changes.

    Equivalent to printing ``cargo:rerun-if-changed=PATH`` once per path.
    Cargo compares last-modified timestamps; a directory is only checked for
    its own timestamp, not traversed. See compare_and_set_contents_hash()
    for content-based change detection.

        rerun_if_changed('/path/to/resource1', '/path/to/resource2')
    """
    pair_each('rerun-if-changed', paths, to=to)


def rerun_if_env_changed(*names, to=None):
    """Tell Cargo to run the build script again if any of the named
    environment variables changes value.
    """
    pair_each('rerun-if-env-changed', names, to=to)
