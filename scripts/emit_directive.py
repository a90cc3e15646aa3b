#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Print Cargo build script directives from the command line.

For build scripts that shell out to other tools, for example:

    emit_directive.py rustc-link-lib --kind static ruby
    emit_directive.py rerun-if-changed wrapper.h build.rs

Values given on the command line are always emitted literally. Put -- before
values that start with a dash:

    emit_directive.py rustc-flags -- "-l ffi"
"""

import click

import cargo_emit


def _split_pair(ctx, param, values):
    pairs = []
    for value in values:
        bin_name, sep, flag = value.partition('=')
        if not sep or not bin_name:
            raise click.BadParameter(f'expected BIN=FLAG, got {value!r}')
        pairs.append((bin_name, flag))
    return pairs


@click.group()
def cli():
    """Print one cargo:KEY=VALUE line per value to stdout."""


@cli.command()
@click.argument('key')
@click.argument('value')
def pair(key, value):
    """Emit arbitrary KEY=VALUE metadata."""
    cargo_emit.pair('{}', '{}', key, value)


@cli.command('rerun-if-changed')
@click.argument('paths', nargs=-1, required=True)
def rerun_if_changed(paths):
    """Re-run the build script if any of PATHS changes."""
    cargo_emit.rerun_if_changed(*paths)


@cli.command('rerun-if-env-changed')
@click.argument('names', nargs=-1, required=True)
def rerun_if_env_changed(names):
    """Re-run the build script if any of the environment variables NAMES changes."""
    cargo_emit.rerun_if_env_changed(*names)


@cli.command('rustc-cfg')
@click.argument('feature')
def rustc_cfg(feature):
    cargo_emit.rustc_cfg('{}', feature)


@cli.command('rustc-env')
@click.argument('var')
@click.argument('value')
def rustc_env(var, value):
    cargo_emit.rustc_env('{}', '{}', var, value)


@cli.command('rustc-flags')
@click.argument('flags', nargs=-1, required=True)
def rustc_flags(flags):
    cargo_emit.rustc_flags(*flags)


@cli.command('rustc-cdylib-link-arg')
@click.argument('flags', nargs=-1, required=True)
def rustc_cdylib_link_arg(flags):
    cargo_emit.rustc_cdylib_link_arg(*flags)


@cli.command('rustc-link-arg')
@click.argument('flags', nargs=-1, required=True)
def rustc_link_arg(flags):
    cargo_emit.rustc_link_arg(*flags)


@cli.command('rustc-link-arg-bin')
@click.option('--pair', 'pairs', multiple=True, callback=_split_pair,
              help='Additional BIN=FLAG pair; may be repeated')
@click.argument('bin_name', required=False)
@click.argument('flag', required=False)
def rustc_link_arg_bin(pairs, bin_name, flag):
    """Pass FLAG to the linker only for binary BIN_NAME."""
    if bin_name is not None:
        if flag is None:
            raise click.UsageError('FLAG is required with BIN_NAME')
        pairs = [(bin_name, flag)] + pairs
    if not pairs:
        raise click.UsageError('give BIN_NAME FLAG or at least one --pair')
    cargo_emit.rustc_link_arg_bin(*pairs)


@cli.command('rustc-link-arg-bins')
@click.argument('flags', nargs=-1, required=True)
def rustc_link_arg_bins(flags):
    cargo_emit.rustc_link_arg_bins(*flags)


@cli.command('rustc-link-lib')
@click.option('--kind', default=None,
              help='Linkage kind, such as dylib, static or framework')
@click.argument('names', nargs=-1, required=True)
def rustc_link_lib(kind, names):
    cargo_emit.rustc_link_lib(*names, kind=kind)


@cli.command('rustc-link-search')
@click.option('--kind', default=None,
              help='Search kind, such as dependency, crate, native, framework or all')
@click.argument('paths', nargs=-1, required=True)
def rustc_link_search(kind, paths):
    cargo_emit.rustc_link_search(*paths, kind=kind)


@cli.command()
@click.argument('message', nargs=-1, required=True)
def warning(message):
    """Have Cargo print MESSAGE (words are joined by spaces) as a warning."""
    cargo_emit.warning('{}', ' '.join(message))


if __name__ == "__main__":
    cli()
