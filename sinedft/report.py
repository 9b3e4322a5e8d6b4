# -*- coding: utf-8 -*-
#
import sys

import numpy

from .negligible import TOLERANCE, significant


def normalize(S):
    '''Scales the raw transform output by 1/n.
    '''
    S = numpy.asarray(S, dtype=complex)
    return S / len(S)


def format_coefficient(k, c):
    return 'Frequency %d: %e + %e i' % (k, c.real, c.imag)


def coefficient_lines(S, tol=TOLERANCE, policy='magnitude'):
    C = normalize(S)
    for k in significant(C, tol, policy):
        yield format_coefficient(k, C[k])


def report(S, tol=TOLERANCE, policy='magnitude', stream=None):
    '''Writes one line per non-negligible normalized coefficient and returns
    the number of lines written.
    '''
    if stream is None:
        stream = sys.stdout
    count = 0
    for line in coefficient_lines(S, tol, policy):
        stream.write(line + '\n')
        count += 1
    return count
