#!/usr/bin/env python3
# Copyright (c) 2026 The Khronos Group Inc.
#
# SPDX-License-Identifier: Apache-2.0
"""Diagnostic, warning and error logging for build scripts.

Standard output belongs to the directive stream read by Cargo, so nothing
here writes to it unless explicitly asked to with setLogFile(..., '-').
Diagnostics and warnings are dropped until a file is configured; errors go
to stderr.
"""

import sys

# Current context (usually the file being fingerprinted), added to log headers.
logContext = None

diagFile = None
warnFile = None
# None: whatever sys.stderr is when the error is logged.
errFile = None

# Files opened by setLogFile(), closed by closeLogFiles().
_openedFiles = []


def setLogContext(name):
    global logContext
    logContext = name


def logHeader(severity):
    """Generate a log message header, including the current context if set."""
    msg = severity + ':'
    if logContext:
        msg = msg + ' for ' + str(logContext)
    return msg + ' '


def setLogFile(setDiag, setWarn, filename):
    """Point diagnostic and/or warning output at a file.

    - setDiag - True to send diagnostics to filename
    - setWarn - True to send warnings to filename
    - filename - '-' for stdout, '-stderr' for stderr, otherwise a path
      opened for writing. None leaves the configuration unchanged.
    """
    global diagFile, warnFile

    if filename is None:
        return

    if filename == '-':
        fp = sys.stdout
    elif filename == '-stderr':
        fp = sys.stderr
    else:
        fp = open(filename, 'w', encoding='utf-8')
        _openedFiles.append(fp)

    if setDiag:
        diagFile = fp
    if setWarn:
        warnFile = fp


def closeLogFiles():
    """Close any files opened by setLogFile() and stop diagnostics and warnings."""
    global diagFile, warnFile

    for fp in _openedFiles:
        fp.close()
    _openedFiles.clear()
    diagFile = None
    warnFile = None


def _log(fp, severity, args, end):
    if fp is not None:
        fp.write(logHeader(severity) + ' '.join(str(arg) for arg in args) + end)


def logDiag(*args, **kwargs):
    _log(kwargs.pop('file', diagFile), 'DIAG', args, kwargs.pop('end', '\n'))


def logWarn(*args, **kwargs):
    _log(kwargs.pop('file', warnFile), 'WARN', args, kwargs.pop('end', '\n'))


def logErr(*args, **kwargs):
    """Log an error and raise UserWarning carrying the same message."""
    file = kwargs.pop('file', errFile or sys.stderr)
    end = kwargs.pop('end', '\n')
    msg = logHeader('ERROR') + ' '.join(str(arg) for arg in args)
    if file is not None:
        file.write(msg + end)
    raise UserWarning(msg)
