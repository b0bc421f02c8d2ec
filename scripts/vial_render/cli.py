"""Command-line interface for Vial keymap rendering."""

import argparse
import sys
from pathlib import Path

from .config import THEMES, load_render_config, load_vial_config
from .errors import VialRenderError
from .render.rasterizer import RENDERED_LAYER, render_keyboard_image

DEFAULT_INPUT = Path("data/yivu40-250906.vil")
DEFAULT_OUTPUT = Path("output/keyboard_layout.png")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="vial_render",
        description="Render the layer-0 legend of a Vial keymap to a PNG image",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- render subcommand ---
    render_parser = subparsers.add_parser(
        "render",
        help="Draw the layer-0 key legends to an image",
    )
    render_parser.add_argument(
        "-i", "--input",
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Input Vial .vil file (default: {DEFAULT_INPUT})",
    )
    render_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output PNG file (default: {DEFAULT_OUTPUT})",
    )
    render_parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default="dark",
        help="Built-in color theme (default: dark)",
    )
    render_parser.add_argument(
        "--style",
        type=Path,
        help="YAML style file with draw_config and colors overrides",
    )

    # --- info subcommand ---
    info_parser = subparsers.add_parser(
        "info",
        help="Print a summary of a Vial keymap",
    )
    info_parser.add_argument(
        "-i", "--input",
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Input Vial .vil file (default: {DEFAULT_INPUT})",
    )

    return parser


def cmd_render(args: argparse.Namespace) -> int:
    """Execute render subcommand."""
    print("Vial Keyboard Image Generator")

    vial = load_vial_config(args.input)
    print(f"Loaded: version={vial.version}, uid={vial.uid}")
    print(f"Layers: {len(vial.layout)}")

    render_config = load_render_config(args.style, args.theme)
    render_keyboard_image(vial, args.output, render_config)

    print(f"Layer {RENDERED_LAYER} image written to {args.output}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Execute info subcommand."""
    vial = load_vial_config(args.input)
    print(f"version:       {vial.version}")
    print(f"uid:           {vial.uid}")
    print(f"protocol:      vial {vial.vial_protocol}, via {vial.via_protocol}")
    print(f"layers:        {len(vial.layout)}")
    print(f"tap dances:    {len(vial.tap_dance)}")
    print(f"combos:        {len(vial.combo)}")
    print(f"key overrides: {len(vial.key_override)}")
    return 0


COMMANDS = {
    "render": cmd_render,
    "info": cmd_info,
}


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        sys.exit(command(args))
    except VialRenderError as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
