"""Implementations of the ``render`` and ``validate`` commands."""

import argparse
import logging
from typing import Any

from inkboard.config.settings import InkBoardSettings
from inkboard.data.loader import load_dashboard_data
from inkboard.layout.dispatch import resolve_layout
from inkboard.layout.nodes import count_nodes, load_layout
from inkboard.layout.region import Region
from inkboard.render.renderer import DashboardRenderer
from inkboard.utils.exceptions import ConfigError
from inkboard.utils.logging import get_logger

logger = logging.getLogger(__name__)


def settings_from_args(args: argparse.Namespace) -> InkBoardSettings:
    """Build settings with every option given on the command line taking priority."""
    kwargs: dict[str, Any] = {}
    render: dict[str, Any] = {}
    logging_overrides: dict[str, Any] = {}

    if args.config is not None:
        kwargs["config_file"] = args.config
    if args.layout is not None:
        kwargs["layout_file"] = args.layout
    if args.width is not None:
        render["width"] = args.width
    if args.height is not None:
        render["height"] = args.height

    if args.log_level:
        logging_overrides["level"] = args.log_level
    elif args.verbose:
        logging_overrides["level"] = "VERBOSE"
    if args.log_file is not None:
        logging_overrides["file"] = str(args.log_file)
    if args.no_log_colors:
        logging_overrides["console_colors"] = False

    # render-only options
    if getattr(args, "data_dir", None) is not None:
        kwargs["data_dir"] = args.data_dir
    if getattr(args, "output", None) is not None:
        kwargs["output_file"] = args.output
    if getattr(args, "channels", None) is not None:
        kwargs["channels_file"] = args.channels
    if getattr(args, "title", None):
        kwargs["title"] = args.title
    if getattr(args, "outlines", False):
        render["draw_outlines"] = True
    if getattr(args, "no_red", False):
        render["use_red"] = False

    if render:
        kwargs["render"] = render
    if logging_overrides:
        kwargs["logging"] = logging_overrides
    return InkBoardSettings(**kwargs)


def _require_layout_file(settings: InkBoardSettings) -> None:
    if settings.layout_file is None:
        raise ConfigError("No layout given: use --layout or set layout_file in the config file")


def run_render(args: argparse.Namespace, settings: InkBoardSettings) -> int:
    """Render the configured layout and write the outputs.

    Returns:
        Exit code (0 for success)
    """
    _require_layout_file(settings)
    logger.info("Rendering %s with data from %s", settings.layout_file, settings.data_dir)
    layout = load_layout(settings.layout_file)
    data = load_dashboard_data(settings.data_dir, today=args.date, title=settings.title)

    renderer = DashboardRenderer(settings.render, logger=get_logger("render"))
    renderer.render_to_files(layout, data, settings.output_file, settings.channels_file)

    print(f"Rendered {len(renderer.last_placements)} widgets to {settings.output_file}")
    if settings.channels_file is not None:
        print(f"Channel file written to {settings.channels_file}")
    return 0


def run_validate(args: argparse.Namespace, settings: InkBoardSettings) -> int:
    """Parse the layout and print where each widget lands.

    Returns:
        Exit code (0 for success)
    """
    _require_layout_file(settings)
    layout = load_layout(settings.layout_file)
    bounds = Region(0, 0, settings.render.width, settings.render.height)
    placements = resolve_layout(layout, bounds, logger=get_logger("layout"))

    print(
        f"{settings.layout_file}: {count_nodes(layout)} nodes, "
        f"{len(placements)} widgets on {bounds.width}x{bounds.height}"
    )
    for placement in placements:
        region = placement.region
        print(
            f"  {placement.path:<32} {placement.kind.value:<16} "
            f"x={region.x} y={region.y} width={region.width} height={region.height}"
        )
    return 0


COMMANDS = {
    "render": run_render,
    "validate": run_validate,
}
