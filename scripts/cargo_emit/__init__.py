#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Talk to Cargo from a build script.

Cargo listens to certain lines printed by a build script (``cargo:KEY=VALUE``)
to decide how to compile and link the package. This package provides one
function per known directive, so a typo in a directive name is a NameError
instead of a line Cargo silently ignores, plus a content-hash based change
check for files the build depends on.

    from cargo_emit import rerun_if_changed, rustc_link_lib, warning

    rerun_if_changed('wrapper.h')
    rustc_link_lib('ssl', ('ruby', 'static'))
    if should_warn:
        warning("(C-3PO voice) We're doomed")
"""

# Defined before the submodule imports: it seeds every contents hash.
__version__ = '0.2.0'

from .contents_hash import (ContentsHashCache, CorruptHashFileError,
                            HashFileOutcome, MissingOutDirError,
                            compare_and_set_contents_hash)
from .pair import PREFIX, Directive, capture_output, pair
from .rerun import rerun_if_changed, rerun_if_env_changed
from .rustc import (rustc_cdylib_link_arg, rustc_cfg, rustc_env, rustc_flags,
                    rustc_link_arg, rustc_link_arg_bin, rustc_link_arg_bins,
                    rustc_link_lib, rustc_link_search)
from .warning import warning
