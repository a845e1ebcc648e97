from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path
from .config import MAX_NESTING_DEPTH, DecoderConfig
from .models.transmission import Transmission

logger = logging.getLogger(__name__)


def _config_from_args(args) -> DecoderConfig:
    literal_max_bits = None if args.literal_max_bits == 0 else args.literal_max_bits
    return DecoderConfig(
        max_depth=args.max_depth,
        literal_max_bits=literal_max_bits,
        strict_padding=args.strict_padding,
    )


def _summary(t: Transmission) -> dict:
    return {"version_sum": t.version_sum(), "value": t.value()}


def cmd_info(args):
    t = Transmission.from_hex(args.input, config=_config_from_args(args), as_text=args.hex)

    # Fast path: just the two derived numbers
    if args.summary:
        s = _summary(t)
        print(f"version_sum={s['version_sum']}, value={s['value']}")
        return 0

    out = _summary(t)
    out["packet"] = t.model_dump(mode="json")["packet"]
    print(json.dumps(out, indent=2))
    return 0


def cmd_to_json(args):
    t = Transmission.from_hex(args.input, config=_config_from_args(args), as_text=args.hex)
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(t.model_dump(mode="json"), out, indent=2)
    logger.info("wrote %s", args.output)
    return 0


def cmd_from_json(args):
    t = Transmission.model_validate_json(Path(args.input).read_text(encoding="utf-8"))
    with open(args.output, "w", encoding="ascii") as out:
        out.write(t.to_hex() + "\n")
    logger.info("wrote %s", args.output)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="bitpacket", description="Bit-packed transmission decoder")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--max-depth", type=int, default=MAX_NESTING_DEPTH,
                   help=f"Maximum packet nesting depth (1..{MAX_NESTING_DEPTH})")
    p.add_argument("--literal-max-bits", type=int, default=64, help="Widest literal value accepted (0 = unlimited)")
    p.add_argument("--strict-padding", action="store_true", help="Reject non-zero bits after the outermost packet")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print version sum, value and packet tree")
    sp.add_argument("input", help="Path to a hex file, or the hex transmission itself (an existing file wins)")
    sp.add_argument("--hex", action="store_true", help="Treat INPUT as hex text, never as a path")
    sp.add_argument("--summary", action="store_true", help="Print only version_sum and value")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="decode a transmission to a JSON packet tree")
    sp.add_argument("input", help="Path to a hex file, or the hex transmission itself (an existing file wins)")
    sp.add_argument("--hex", action="store_true", help="Treat INPUT as hex text, never as a path")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("from-json", help="encode a JSON packet tree as hex")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_from_json)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, ns.log_level), format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        return ns.func(ns)
    except (OSError, ValueError) as e:
        print(f"bitpacket: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
