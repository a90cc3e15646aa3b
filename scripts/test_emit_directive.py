#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0

import pytest
from click.testing import CliRunner

from emit_directive import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.parametrize('args,expected', [
    (['pair', 'root', '/path/{to}/root'], ['cargo:root=/path/{to}/root']),
    (['rerun-if-changed', 'a.h', 'b.h'],
     ['cargo:rerun-if-changed=a.h', 'cargo:rerun-if-changed=b.h']),
    (['rerun-if-env-changed', 'CC'], ['cargo:rerun-if-env-changed=CC']),
    (['rustc-cfg', 'bench'], ['cargo:rustc-cfg=bench']),
    (['rustc-env', 'BUILD_HASH', 'abc123'], ['cargo:rustc-env=BUILD_HASH=abc123']),
    (['rustc-flags', '--', '-l ffi'], ['cargo:rustc-flags=-l ffi']),
    (['rustc-cdylib-link-arg', '--', '-Wl,-z,now'], ['cargo:rustc-cdylib-link-arg=-Wl,-z,now']),
    (['rustc-link-arg', 'x', 'y'], ['cargo:rustc-link-arg=x', 'cargo:rustc-link-arg=y']),
    (['rustc-link-arg-bins', 'x'], ['cargo:rustc-link-arg-bins=x']),
    (['rustc-link-arg-bin', '--pair', 'other=-O', '--', 'hello', '-Wall'],
     ['cargo:rustc-link-arg-bin=hello=-Wall', 'cargo:rustc-link-arg-bin=other=-O']),
    (['rustc-link-lib', 'ssl'], ['cargo:rustc-link-lib=ssl']),
    (['rustc-link-lib', '--kind', 'static', 'ruby', 'z'],
     ['cargo:rustc-link-lib=static=ruby', 'cargo:rustc-link-lib=static=z']),
    (['rustc-link-search', '--kind', 'native', '/opt/lib'],
     ['cargo:rustc-link-search=native=/opt/lib']),
    (['warning', 'We\'re', 'doomed'], ['cargo:warning=We\'re doomed']),
])
def test_commands(runner, args, expected):
    result = runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == expected


@pytest.mark.parametrize('args', [
    ['rerun-if-changed'],
    ['rustc-link-lib'],
    ['rustc-link-arg-bin'],
    ['rustc-link-arg-bin', 'hello'],
    ['rustc-link-arg-bin', '--pair', 'no-equals'],
])
def test_usage_errors(runner, args):
    assert runner.invoke(cli, args).exit_code == 2
