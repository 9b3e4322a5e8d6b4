# -*- coding: utf-8 -*-
#
'''
Decide whether a complex number is numerical noise.

Two policies are available:

  * 'magnitude':      |z| < tol
  * 'componentwise':  |Re(z)| < tol and |Im(z)| < tol

The default is the magnitude test with tol = 1.0e-10. For normalized DFT
coefficients of O(1) data, round-off is of the order 1.0e-16 * log(n), so
1.0e-10 leaves plenty of room even for large n.
'''
import numpy

TOLERANCE = 1.0e-10

POLICIES = ['magnitude', 'componentwise']


def _check(tol, policy):
    if policy not in POLICIES:
        raise ValueError(
            'Unknown policy \'%s\'. Choose from %s.'
            % (policy, ', '.join(POLICIES))
            )
    if not tol > 0.0:
        raise ValueError('Tolerance must be positive (got %r).' % tol)
    return


def negligible_mask(values, tol=TOLERANCE, policy='magnitude'):
    '''Boolean array, True where values are indistinguishable from 0.
    '''
    _check(tol, policy)
    values = numpy.asarray(values, dtype=complex)
    if policy == 'magnitude':
        return abs(values) < tol
    return numpy.logical_and(abs(values.real) < tol, abs(values.imag) < tol)


def is_negligible(z, tol=TOLERANCE, policy='magnitude'):
    return bool(negligible_mask(z, tol, policy))


def significant(values, tol=TOLERANCE, policy='magnitude'):
    '''Indices of all entries which are not negligible, in increasing order.
    '''
    mask = negligible_mask(values, tol, policy)
    return numpy.flatnonzero(~mask)
