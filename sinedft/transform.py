# -*- coding: utf-8 -*-
#
'''
One-dimensional complex discrete Fourier transforms.

The forward transform is unnormalized,

    S[k] = \\sum_j X[j] * exp(-2*pi*i * j*k / n),

and the inverse carries the factor 1/n,

    X[j] = 1/n \\sum_k S[k] * exp(2*pi*i * j*k / n),

such that the inverse undoes the forward transform. This is the convention of
numpy.fft, scipy.fft, and FFTW's FFTW_FORWARD/FFTW_BACKWARD pair (up to the
1/n which FFTW leaves to the caller).

Several backends implement the same contract; callers pick one by name. The
lifecycle of a transform, i.e., allocating a buffer, transforming it in place,
and releasing it again, is captured in :class:`Plan`:

    with Plan(n, 'forward') as plan:
        plan.buffer[:] = data
        plan.execute()
        S = plan.buffer.copy()
'''
import numpy
import scipy.fft

from .message import debug

DEFAULT_BACKEND = 'numpy'

DIRECTIONS = ['forward', 'inverse']


def _direct(x, sign):
    # (Slow) Fourier transform, straight from the definition.
    n = len(x)
    k = numpy.arange(n)
    # Reduce j*k modulo n first to keep the exponent in [0, 2*pi).
    W = numpy.exp(sign * 2j * numpy.pi * (numpy.outer(k, k) % n) / n)
    return W.dot(x)


def _direct_forward(x):
    return _direct(x, -1)


def _direct_inverse(X):
    return _direct(X, +1) / len(X)


def _scipy_forward(x):
    return scipy.fft.fft(x, overwrite_x=True)


def _scipy_inverse(X):
    return scipy.fft.ifft(X, overwrite_x=True)


BACKENDS = {
    'numpy': {
        'forward': numpy.fft.fft,
        'inverse': numpy.fft.ifft,
        },
    'scipy': {
        'forward': _scipy_forward,
        'inverse': _scipy_inverse,
        },
    'direct': {
        'forward': _direct_forward,
        'inverse': _direct_inverse,
        },
    }


def get_transform(direction='forward', backend=DEFAULT_BACKEND):
    '''Returns the function x -> DFT(x) for the given direction and backend.
    '''
    if backend not in BACKENDS:
        raise ValueError(
            'Unknown FFT backend \'%s\'. Choose from %s.'
            % (backend, ', '.join(sorted(BACKENDS)))
            )
    if direction not in DIRECTIONS:
        raise ValueError(
            'Unknown transform direction \'%s\'. Choose from %s.'
            % (direction, ', '.join(DIRECTIONS))
            )
    return BACKENDS[backend][direction]


def fft(x, backend=DEFAULT_BACKEND):
    x = numpy.asarray(x, dtype=complex)
    with Plan(len(x), 'forward', backend) as plan:
        return plan.execute(x).copy()


def ifft(X, backend=DEFAULT_BACKEND):
    X = numpy.asarray(X, dtype=complex)
    with Plan(len(X), 'inverse', backend) as plan:
        return plan.execute(X).copy()


class Plan(object):
    '''In-place transform of a complex buffer of fixed length n.

    The buffer only exists between __enter__ and __exit__.
    '''

    def __init__(self, n, direction='forward', backend=DEFAULT_BACKEND):
        if n < 1:
            raise ValueError('Transform length must be positive (got %r).' % n)
        self.n = n
        self.direction = direction
        self.backend = backend
        self._transform = get_transform(direction, backend)
        self.buffer = None
        return

    def __enter__(self):
        debug('Allocating %d complex values (%s, %s)',
              self.n, self.backend, self.direction)
        # Raises MemoryError if n is too large.
        self.buffer = numpy.zeros(self.n, dtype=complex)
        return self

    def __exit__(self, tpe, value, traceback):
        self.buffer = None
        debug('Released transform buffer')
        return

    def execute(self, data=None):
        '''Transforms the buffer in place and returns it. If data is given,
        it is copied into the buffer first.
        '''
        assert self.buffer is not None, 'Plan used outside of with block.'
        if data is not None:
            if len(data) != self.n:
                raise ValueError(
                    'Data of length %d doesn\'t fit plan of length %d.'
                    % (len(data), self.n)
                    )
            self.buffer[:] = data
        self.buffer[:] = self._transform(self.buffer)
        return self.buffer
