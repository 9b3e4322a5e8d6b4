# -*- coding: utf-8 -*-
#
'''
Uniform sampling of the test signal

    s(x) = sin(f * x)

on the interval [0, 2*pi). With n points and step h = 2*pi / n, the samples are

    X[k] = s(h * k),  k = 0, ..., n-1.

Since the end point 2*pi is excluded, one period of s is covered exactly, and
the DFT of X has

    S(-f) = \\sum_k X[k] e^{(2 pi i / n) * -f * k} / n
          = \\sum_k X[k] e^{(2 pi i / n) * (n - f) * k} / n
          = S(n - f),

i.e., the energy of frequency f shows up in the bins f and n - f.
'''
import numpy


def _check_size(n):
    if n < 1:
        raise ValueError('Number of samples must be positive (got %r).' % n)
    return


def step_size(n):
    '''Distance h = 2*pi/n between two consecutive sample points.
    '''
    _check_size(n)
    return 2 * numpy.pi / n


def sample_points(n):
    _check_size(n)
    return step_size(n) * numpy.arange(n)


def sample_sine(n, frequency):
    '''Returns the complex-valued samples sin(frequency * k * h) + 0i,
    k = 0, ..., n-1.
    '''
    t = sample_points(n)
    X = numpy.zeros(n, dtype=complex)
    X.real = numpy.sin(frequency * t)
    return X


def expected_bins(n, frequency):
    '''Frequency bins in which the sampled sin(frequency * x) is nonzero.

    If 2*frequency is a multiple of n, all samples sin(pi * j) vanish and
    there are no bins at all. Otherwise, the two bins are frequency and its
    alias n - frequency, both taken modulo n.
    '''
    _check_size(n)
    if (2 * frequency) % n == 0:
        return []
    return sorted([frequency % n, (-frequency) % n])
