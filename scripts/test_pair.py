#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0

import io

import pytest

from cargo_emit import Directive, capture_output, pair


class CountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.writes = 0

    def write(self, s):
        self.writes += 1
        return super().write(s)


def test_pair_to_stdout(capsys):
    pair('KEY', 'VALUE')
    assert capsys.readouterr().out == 'cargo:KEY=VALUE\n'


def test_pair_literal():
    assert capture_output(lambda out: pair('root', '/path/to/root', to=out)) == \
        'cargo:root=/path/to/root\n'


def test_pair_positional_args():
    assert capture_output(lambda out: pair('KEY', '{}-{}', 'a', 1, to=out)) == \
        'cargo:KEY=a-1\n'


def test_pair_named_args_in_key_and_value():
    assert capture_output(lambda out: pair('{lib}dir', '/path/to/{lib}', lib='foo', to=out)) == \
        'cargo:foodir=/path/to/foo\n'


def test_escaped_braces():
    assert capture_output(lambda out: pair('KEY', '{{x}}', to=out)) == 'cargo:KEY={x}\n'


def test_single_write_per_directive():
    stream = CountingStream()
    pair('KEY', 'VALUE', to=stream)
    pair('KEY', '{}', 'other', to=stream)
    assert stream.writes == 2
    assert stream.getvalue().splitlines() == ['cargo:KEY=VALUE', 'cargo:KEY=other']


def test_binary_stream():
    stream = io.BytesIO()
    pair('KEY', 'välue', to=stream)
    assert stream.getvalue() == 'cargo:KEY=välue\n'.encode('utf-8')


@pytest.mark.parametrize('value,args,kwargs,exc', [
    ('{}', (), {}, IndexError),
    ('{name}', (), {}, KeyError),
    ('{', (), {}, ValueError),
])
def test_bad_template_writes_nothing(value, args, kwargs, exc):
    stream = CountingStream()
    with pytest.raises(exc):
        pair('KEY', value, *args, to=stream, **kwargs)
    assert stream.writes == 0


def test_closed_stream_raises():
    stream = io.StringIO()
    stream.close()
    with pytest.raises(ValueError):
        pair('KEY', 'VALUE', to=stream)


def test_directive_format():
    directive = Directive('rustc-env', 'A={}', ['b'])
    assert directive.args == ('b',)
    assert directive.template == 'cargo:rustc-env=A={}'
    assert directive.format() == 'cargo:rustc-env=A=b'
