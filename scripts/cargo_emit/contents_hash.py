#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Detect changes to a file's contents by hash instead of modification time.

A hash of the file (seeded with the cargo_emit version) is kept in OUT_DIR
between build script runs, in a file named after a hash of the path.
"""

import errno
import os
import stat
import sys
from enum import Enum, unique
from pathlib import Path

from . import __version__
from .fxhash import DIGEST_SIZE, FxHasher64, fxhash64
from .log import logDiag

CHUNK_SIZE = 1024
HASH_FILE_SUFFIX = '.hash'


class MissingOutDirError(RuntimeError):
    pass


class CorruptHashFileError(RuntimeError):
    pass


@unique
class HashFileOutcome(Enum):
    """The result of comparing the contents of a file using its hash."""

    # A fresh hash file with the hashed contents of the file has been created.
    CREATED = 'created'
    # Based on the hash file, the contents of the file have changed.
    CHANGED = 'changed'
    # Based on the hash file, the contents of the file have not changed.
    UNCHANGED = 'unchanged'

    def __str__(self):
        return self.value


def contents_hash(path, version=__version__):
    """Hash version followed by the contents of the file at path."""
    hasher = FxHasher64(version.encode('utf-8'))
    with open(path, 'rb') as fp:
        for chunk in iter(lambda: fp.read(CHUNK_SIZE), b''):
            hasher.write(chunk)
    return hasher.finish()


def resolve_out_dir(out_dir=None):
    if out_dir is None:
        out_dir = os.environ.get('OUT_DIR')
    if not out_dir:
        raise MissingOutDirError(
            'failed to get OUT_DIR. Are you using this in a build script?')
    return Path(out_dir)


class ContentsHashCache:
    """Hash files kept in one output directory.

    Holds no state besides its configuration: everything lives in the hash
    files, so separate instances on the same directory see the same data.
    Not safe to use concurrently for the same path and directory; the
    read-compare-write below is not atomic.
    """

    def __init__(self, out_dir=None, version=None):
        self.out_dir = resolve_out_dir(out_dir)
        self.version = __version__ if version is None else version

    def hash_file_path(self, path):
        # Keyed by a hash of the path as given, so two paths can collide and
        # share an entry; "a" and "./a" also get separate entries. Naming the
        # file after a sanitized form of the path itself would avoid both.
        path_hash = fxhash64(os.fspath(path))
        return self.out_dir / f'{path_hash:x}{HASH_FILE_SUFFIX}'

    def check_and_update(self, path):
        """Compare the contents of path against the stored hash, storing the new one.

        Directories are not supported and raise IsADirectoryError.
        """
        if stat.S_ISDIR(os.stat(path).st_mode):
            raise IsADirectoryError(
                errno.EISDIR,
                'hashing the contents of a directory is not supported',
                os.fspath(path))

        computed = contents_hash(path, self.version).to_bytes(DIGEST_SIZE, sys.byteorder)
        hash_file = self.hash_file_path(path)

        if not hash_file.exists():
            hash_file.write_bytes(computed)
            outcome = HashFileOutcome.CREATED
        else:
            stored = hash_file.read_bytes()
            if len(stored) != len(computed):
                raise CorruptHashFileError(
                    f'{hash_file} holds {len(stored)} bytes, expected {len(computed)}')
            if stored == computed:
                outcome = HashFileOutcome.UNCHANGED
            else:
                hash_file.write_bytes(computed)
                outcome = HashFileOutcome.CHANGED

        logDiag('*', os.fspath(path), outcome, '->', hash_file.name)
        return outcome


def compare_and_set_contents_hash(path, out_dir=None, version=None):
    """Check if the contents of path changed since the last call for it.

    Uses OUT_DIR from the environment unless out_dir is given.
    """
    return ContentsHashCache(out_dir, version).check_and_update(path)
