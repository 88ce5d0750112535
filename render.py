import sys
import time
from argparse import ArgumentParser, ArgumentTypeError, RawDescriptionHelpFormatter

from mandelbrot import (
    DEFAULT_WORKERS,
    EncodingError,
    MalformedInputError,
    RenderConfig,
    RenderMethod,
    WorkerFailure,
    new_buffer,
    parse_bounds,
    parse_complex,
    render_with,
    write_image,
)

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, file=sys.stderr, **kwargs)


def _pixels(text):
    try:
        return parse_bounds(text)
    except MalformedInputError as exc:
        raise ArgumentTypeError(str(exc)) from exc


def _point(text):
    try:
        return parse_complex(text)
    except MalformedInputError as exc:
        raise ArgumentTypeError(str(exc)) from exc


def build_option_parser():
    parser = ArgumentParser(prog='render', add_help=False)

    parser.add_argument('--workers', type=int, dest='workers', metavar='WORKERS', default=DEFAULT_WORKERS,
                        help='number of bands (and threads) used by the bands method')

    parser.add_argument('--pool-size', type=int, dest='pool_size', metavar='POOL_SIZE', default=None,
                        help='maximum number of threads used by the rows method. Default: executor default.')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging of band layout and timings.')

    return parser


def build_parser():
    parser = ArgumentParser(
        prog='render',
        description='Render the Mandelbrot set over a rectangle of the complex plane as a grayscale PNG.',
        epilog='Example: render mandel.png 1280x960 -2.0,1 0.6,-1 rows',
        formatter_class=RawDescriptionHelpFormatter,
        parents=[build_option_parser()],
    )

    parser.add_argument('file', metavar='FILE', help='path of the PNG file to write')

    parser.add_argument('bounds', type=_pixels, metavar='PIXELS',
                        help='image size in pixels, written WIDTHxHEIGHT (e.g. 1280x960)')

    parser.add_argument('upper_left', type=_point, metavar='UPPERLEFT',
                        help='complex point at the upper left corner, written RE,IM (e.g. -2.0,1)')

    parser.add_argument('lower_right', type=_point, metavar='LOWERRIGHT',
                        help='complex point at the lower right corner, written RE,IM (e.g. 0.6,-1)')

    parser.add_argument('method', nargs='?', metavar='RENDERMETHOD', default=RenderMethod.ROWS.value,
                        choices=[method.value for method in RenderMethod],
                        help='single, bands (fixed worker threads) or rows (one task per row). Default: rows.')

    return parser


def parse_arguments(argv=None):
    """Parse ``argv``, accepting corners such as ``-2.0,1`` anywhere among the options.

    Options are consumed first; everything left is decoded as positional values.
    """

    parser = build_parser()
    opt, values = build_option_parser().parse_known_args(argv)
    if '-h' in values or '--help' in values:
        parser.parse_args(['--help'])
    if '--' in values:
        values.remove('--')
    opt = parser.parse_args(['--', *values], namespace=opt)
    return opt, parser


def resolve_render_config(opt, parser: ArgumentParser) -> RenderConfig:
    if opt.workers is not None and opt.workers <= 0:
        parser.error("--workers must be a positive integer.")
    if opt.pool_size is not None and opt.pool_size <= 0:
        parser.error("--pool-size must be a positive integer.")
    return RenderConfig(
        method=RenderMethod(opt.method),
        workers=opt.workers,
        pool_size=opt.pool_size,
    )


def main(argv=None):
    opt, parser = parse_arguments(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    config = resolve_render_config(opt, parser)
    print("selected render method is {0}".format(config.method.value), file=sys.stderr)

    width, height = opt.bounds
    log("rendering %dx%d from %r to %r" % (width, height, opt.upper_left, opt.lower_right))
    if config.method is RenderMethod.BANDS:
        log("using %d bands of up to %d rows" % (config.workers, -(-height // config.workers)))
    elif config.method is RenderMethod.ROWS:
        log("using %d row tasks, pool size %s" % (height, config.pool_size or "default"))

    pixels = new_buffer(opt.bounds)
    start = time.perf_counter()
    try:
        render_with(config, pixels, opt.bounds, opt.upper_left, opt.lower_right)
    except WorkerFailure as exc:
        print("error rendering image: {0}".format(exc), file=sys.stderr)
        return 1
    log("rendered in %.3fs" % (time.perf_counter() - start))

    try:
        path = write_image(opt.file, pixels, opt.bounds)
    except EncodingError as exc:
        print(exc, file=sys.stderr)
        return 1
    log("wrote %s" % path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
