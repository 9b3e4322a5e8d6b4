# -*- coding: utf-8 -*-
#
'''
Sample sin(FREQUENCY * x) at N points in [0, 2*pi), Fourier-transform, and
print all coefficients which aren't numerically zero. For 0 < FREQUENCY < N/2,
exactly two lines show up: FREQUENCY and N - FREQUENCY.
'''
import argparse
import os
import sys

from .__about__ import __version__
from .message import Message, info, setup_logging
from .negligible import POLICIES, TOLERANCE
from .report import report
from .sampling import expected_bins, sample_sine
from .transform import BACKENDS, DEFAULT_BACKEND, Plan


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    # Report usage errors on stdout and let main() set the exit status.
    def error(self, message):
        raise UsageError(message)


def _positive_int(string):
    try:
        n = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid int value: %r' % string)
    if n < 1:
        raise argparse.ArgumentTypeError('must be positive, got %d' % n)
    return n


def _positive_float(string):
    try:
        value = float(string)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid float value: %r' % string)
    if not value > 0.0:
        raise argparse.ArgumentTypeError('must be positive, got %r' % value)
    return value


def _create_parser(prog):
    parser = _ArgumentParser(
        prog=prog,
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter
        )
    parser.add_argument(
        'n',
        metavar='N',
        type=_positive_int,
        help='number of sample points'
        )
    parser.add_argument(
        'frequency',
        metavar='FREQUENCY',
        type=int,
        help='frequency F of the test signal sin(F*x)'
        )
    parser.add_argument(
        '--tolerance',
        type=_positive_float,
        default=TOLERANCE,
        help='coefficients below this are considered zero (default: %e)'
        % TOLERANCE
        )
    parser.add_argument(
        '--policy',
        choices=POLICIES,
        default='magnitude',
        help='negligibility test (default: magnitude)'
        )
    parser.add_argument(
        '--backend',
        choices=sorted(BACKENDS),
        default=DEFAULT_BACKEND,
        help='FFT implementation (default: %s)' % DEFAULT_BACKEND
        )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='log progress to stderr (repeat for more)'
        )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
        )
    return parser


def run(n, frequency, tol=TOLERANCE, policy='magnitude',
        backend=DEFAULT_BACKEND, stream=None):
    '''Sample, transform, and report. Returns the number of lines printed.
    '''
    with Plan(n, 'forward', backend) as plan:
        with Message('Sampling sin(%d x) at %d points' % (frequency, n)):
            plan.buffer[:] = sample_sine(n, frequency)
        with Message('Computing forward DFT (%s)' % backend):
            plan.execute()
        count = report(plan.buffer, tol, policy, stream=stream)

    info('%d coefficient(s) above %e, expected bins: %s',
         count, tol, expected_bins(n, frequency))
    return count


def main(argv=None, prog=None):
    '''Runs the command line interface and returns the exit status. The
    program name in the usage line defaults to the basename of sys.argv[0].
    '''
    if prog is None:
        prog = os.path.basename(sys.argv[0])
    parser = _create_parser(prog)
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print('Usage: %s <N> <FREQUENCY>' % parser.prog)
        print('%s: error: %s' % (parser.prog, e))
        return 1
    except SystemExit as e:
        # --help and --version
        return e.code

    setup_logging(args.verbose)
    run(args.n, args.frequency, args.tolerance, args.policy, args.backend,
        stream=sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
