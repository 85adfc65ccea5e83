# src/colorlens/demo.py
import argparse
import json
import random
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorlens-demo",
        description="Name a color sample: nearest palette color with black/white/gray rules.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--rank",
        type=int,
        default=0,
        help="Also list the K nearest palette colors",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_rgb = sub.add_parser("rgb", help="Classify an RGB sample (0-255 each)")
    p_rgb.add_argument("channels", nargs=3, type=int, metavar=("R", "G", "B"))

    p_hsv = sub.add_parser("hsv", help="Classify an HSV triple (h in degrees, s/v in 0-1)")
    p_hsv.add_argument("channels", nargs=3, type=float, metavar=("H", "S", "V"))

    p_hex = sub.add_parser("hex", help="Classify a hex color like '#ff8800'")
    p_hex.add_argument("value")

    sub.add_parser("colors", help="List the palette in tie-break order")

    p_rand = sub.add_parser("random", help="Classify a random RGB sample")
    p_rand.add_argument("--seed", type=int, default=None)
    return parser


def _run(args: argparse.Namespace):
    from .detection.color import PALETTE
    from .detection.color.logic import random_color
    from .detection.color.utils import hex_to_rgb
    from .detection.orchestrator import analyze_hsv, analyze_sample

    if args.command == "rgb":
        return analyze_sample(args.channels, method="hsv", rank=args.rank)
    if args.command == "hsv":
        return analyze_hsv(*args.channels, rank=args.rank)
    if args.command == "hex":
        return analyze_sample(hex_to_rgb(args.value), method="hsv", rank=args.rank)
    if args.command == "colors":
        return [{"name": e.name, "hex": e.hex, "rgb": list(e.rgb)} for e in PALETTE]
    if args.command == "random":
        sample = random_color(random.Random(args.seed))
        return analyze_sample(sample.rgb, method="hsv", rank=args.rank)
    raise ValueError(f"Unknown command {args.command!r}")


def main(argv=None):
    """CLI demo: classify an RGB/HSV/hex sample and print the result as JSON."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        import logging

        from .detection.general.utils import enable_topics

        enable_topics(["all"])
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = _run(args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
