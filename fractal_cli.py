import argparse
import sys

from fractal_catalog import build_catalog
from fractal_config import load_settings
from fractal_errors import FractalError
from fractalgen_web import draw_fractal_web
from logging_config import setup_logging
from lsystem import expansion_length

DEFAULT_ITERATIONS = 4


def print_catalog(catalog):
    for entry in catalog.summary():
        print(f"{entry['id']:>3}  {entry['name']:<22} angle={entry['angle']:<5g} max_iterations={entry['max_iterations']}")


def build_argparser(settings):
    ap = argparse.ArgumentParser(description="Render an L-system fractal with a color gradient to PNG (no UI)")
    ap.add_argument("--fractal", type=int, default=1, help="Catalog id (see --list)")
    ap.add_argument("--iterations", type=int, default=None,
                    help=f"Rewriting rounds (default {DEFAULT_ITERATIONS}, capped at the fractal's maximum)")
    ap.add_argument("--out", default="fractal.png", help="Output PNG file")
    ap.add_argument("--color1", default=settings.color_start, help="Gradient start color")
    ap.add_argument("--color2", default=settings.color_end, help="Gradient end color")
    ap.add_argument("--width", type=int, default=settings.width)
    ap.add_argument("--height", type=int, default=settings.height)
    ap.add_argument("--list", action="store_true", help="Print the fractal catalog and exit")
    ap.add_argument("--info", action="store_true", help="Print the expanded length instead of rendering")
    ap.add_argument("--log-level", default=settings.log_level)
    return ap


def main(argv=None):
    settings = load_settings()
    args = build_argparser(settings).parse_args(argv)
    setup_logging(args.log_level)

    catalog = build_catalog()
    if args.list:
        print_catalog(catalog)
        return 0

    try:
        definition = catalog.get(args.fractal)
        iterations = args.iterations
        if iterations is None:
            iterations = min(DEFAULT_ITERATIONS, definition.max_iterations)

        if args.info:
            length = expansion_length(definition, iterations)
            print(f"{definition.name}: {length} symbols after {iterations} iterations")
            return 0

        img = draw_fractal_web(
            catalog,
            fractal_id=args.fractal,
            iterations=iterations,
            color_start=args.color1,
            color_end=args.color2,
            img_size=(args.width, args.height),
            max_side=settings.max_side,
        )
        img.save(args.out, format="PNG")
    except FractalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2

    print(f"Saved {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
