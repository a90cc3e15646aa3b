#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0

from .pair import pair


def warning(message, *args, to=None, **kwargs):
    """Have Cargo print a formatted warning.

    message is a str.format() template:

        warning('Something suspicious is happening: {}', error)

    Building my-crate then shows ``warning: Something suspicious is happening: ...``.
    """
    pair('warning', message, *args, to=to, **kwargs)
