# ppmdecode/cli.py
import argparse
import logging
import sys

from .errors import PPMError
from .io.ppm import decode, decode_config

logger = logging.getLogger(__name__)


def cmd_info(args) -> int:
    status = 0
    for path in args.files:
        try:
            with open(path, "rb") as f:
                magic = f.read(2).decode("ascii", errors="replace")
                f.seek(0)
                cfg = decode_config(f)
        except (OSError, PPMError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
            continue
        print(f"{path}: {magic} {cfg.width}x{cfg.height} {cfg.color_model}")
    return status


def cmd_convert(args) -> int:
    try:
        with open(args.src, "rb") as f:
            if args.max_pixels is None:
                img = decode(f)
            elif args.max_pixels == 0:
                img = decode(f, max_pixels=None)
            else:
                img = decode(f, max_pixels=args.max_pixels)
    except (OSError, PPMError) as e:
        print(f"{args.src}: {e}", file=sys.stderr)
        return 1
    out = img.to_image()
    if args.drop_alpha:
        out = out.convert("RGB")
    try:
        out.save(args.dst)
    except (OSError, ValueError) as e:
        # np. RGBA do JPEG albo nieznane rozszerzenie
        print(f"{args.dst}: {e}", file=sys.stderr)
        return 1
    logger.info("Zapisano %s (%dx%d)", args.dst, img.width, img.height)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppmdecode", description="Dekoder obrazów PPM (P3/P6)."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="więcej logów (-vv: debug)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_info = sub.add_parser("info", help="wymiary i model koloru bez dekodowania")
    p_info.add_argument("files", nargs="+")
    p_info.set_defaults(func=cmd_info)

    p_conv = sub.add_parser("convert", help="dekoduj i zapisz przez Pillow")
    p_conv.add_argument("src")
    p_conv.add_argument("dst", help="format wg rozszerzenia, np. .png")
    p_conv.add_argument(
        "--max-pixels",
        type=int,
        default=None,
        help="limit pikseli (domyślnie constants.MAX_PIXELS, 0 = bez limitu)",
    )
    p_conv.add_argument(
        "--drop-alpha", action="store_true", help="zapis jako RGB (np. do JPEG)"
    )
    p_conv.set_defaults(func=cmd_convert)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)
