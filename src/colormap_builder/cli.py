# src/colormap_builder/cli.py
import argparse
import logging
import sys

from .utils.load_config import MALFORMED_POLICIES


def _configure_logging(debug: bool, log_file: str | None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def main(argv=None):
    """CLI: convert a tab-delimited color definition file into colormap CSV."""
    from .pipeline import build_colormap
    from .utils.load_config import load_settings
    from .utils.log import enable_topics

    parser = argparse.ArgumentParser(
        prog="colormap-build",
        description="Build 'R, G, B, Name' CSV rows from a tab-delimited color file.",
    )
    parser.add_argument("--input", "-i", dest="input_path", help="Color definition file (default: rawColorFile.txt)")
    parser.add_argument("--output", "-o", dest="output_path", help="CSV to write (default: colormap.csv)")
    parser.add_argument("--config", help="JSON settings file (keys: input_path, output_path, on_malformed)")
    parser.add_argument(
        "--on-malformed",
        choices=MALFORMED_POLICIES,
        dest="on_malformed",
        help="What to do with a non-integer RGB field (default: abort)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs and per-line trace")
    parser.add_argument("--log-file", dest="log_file", help="Also append log records to this file")

    args = parser.parse_args(argv)

    try:
        _configure_logging(args.debug, args.log_file)
        if args.debug:
            enable_topics()
        settings = load_settings(
            args.config,
            input_path=args.input_path,
            output_path=args.output_path,
            on_malformed=args.on_malformed,
        )
        color_map = build_colormap(
            settings.input_path,
            settings.output_path,
            on_malformed=settings.on_malformed,
        )
    except Exception as e:
        logging.getLogger(__name__).debug("Build failed", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print(f"🎨 Wrote {len(color_map)} colors to {settings.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
