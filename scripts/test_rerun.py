#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import pytest

from cargo_emit import capture_output, rerun_if_changed, rerun_if_env_changed


def test_rerun_if_changed_single(capsys):
    rerun_if_changed('PATH')
    assert capsys.readouterr().out == 'cargo:rerun-if-changed=PATH\n'


def test_rerun_if_changed_multiple_in_order():
    output = capture_output(lambda out: rerun_if_changed(
        '/path/to/resource1', Path('resource2'), 'build.rs', to=out))
    assert output == ('cargo:rerun-if-changed=/path/to/resource1\n'
                      'cargo:rerun-if-changed=resource2\n'
                      'cargo:rerun-if-changed=build.rs\n')


def test_rerun_if_changed_braces_are_literal():
    assert capture_output(lambda out: rerun_if_changed('dir/{name}.h', to=out)) == \
        'cargo:rerun-if-changed=dir/{name}.h\n'


def test_rerun_if_changed_requires_a_path():
    with pytest.raises(TypeError):
        rerun_if_changed()


def test_rerun_if_env_changed():
    assert capture_output(lambda out: rerun_if_env_changed('MY_DEPENDENCY', 'PATH', to=out)) == \
        'cargo:rerun-if-env-changed=MY_DEPENDENCY\ncargo:rerun-if-env-changed=PATH\n'
