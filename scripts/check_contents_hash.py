#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Pass a filename. Exits 1 if its contents are new or changed since the last run, 0 otherwise.

Meant to be called from a Makefile or shell build step, for example:

    check_contents_hash.py --out-dir build/hashes include/wrapper.h || regenerate
"""

import sys

import click

from cargo_emit import (CorruptHashFileError, HashFileOutcome,
                        compare_and_set_contents_hash)
from cargo_emit.log import closeLogFiles, logDiag, setLogFile


class HashCheckError(click.ClickException):
    # 1 already means "changed".
    exit_code = 3


@click.command()
@click.option('--out-dir', envvar='OUT_DIR', required=True,
              type=click.Path(file_okay=False),
              help='Directory holding the hash files (default: $OUT_DIR)')
@click.option('--version-tag', default=None,
              help='Seed for the contents hash instead of the cargo_emit version')
@click.option('--diagfile', default=None,
              help="Write diagnostics to the specified file ('-' for stdout)")
@click.option('--quiet', '-q', is_flag=True,
              help="Don't print the outcome.")
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def check_contents_hash(path, out_dir, version_tag, diagfile, quiet):
    """Compare PATH against its hash from the previous run, and store the new hash."""
    setLogFile(setDiag=True, setWarn=True, filename=diagfile)
    try:
        try:
            outcome = compare_and_set_contents_hash(path, out_dir=out_dir, version=version_tag)
        except (OSError, CorruptHashFileError) as e:
            raise HashCheckError(str(e)) from e

        if not quiet:
            click.echo(str(outcome))
        if outcome != HashFileOutcome.UNCHANGED:
            logDiag(path, outcome, '- forcing rebuild')
            sys.exit(1)
    finally:
        closeLogFiles()


if __name__ == "__main__":
    check_contents_hash()
