#!/usr/bin/env python3

import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from .config_manager import (
    ConfigurationManager,
    DEFAULT_BACKGROUND_COLOR,
    JoystickControllerConfig,
    mode_choices,
    parse_mode,
)
from .joystick_main_widget import JoystickMainWidget


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='virtual_joystick_controller_demo',
        description='Show a virtual joystick controller in its own window.',
    )
    parser.add_argument('--mode', default='all-axis',
                        help='degree of freedom of the knob, one of: ' + ', '.join(mode_choices()))
    parser.add_argument('--no-back-to-zero', dest='back_to_zero', action='store_false',
                        help='keep the knob where it is released')
    parser.add_argument('--background', default=DEFAULT_BACKGROUND_COLOR,
                        help='window palette color')
    parser.add_argument('--windowed', action='store_true',
                        help='do not maximize the window')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def parse_config(parser: argparse.ArgumentParser, argv) -> tuple[argparse.Namespace, JoystickControllerConfig]:
    args = parser.parse_args(argv)
    try:
        config = JoystickControllerConfig(
            mode=parse_mode(args.mode),
            back_to_zero=args.back_to_zero,
            background_color=args.background,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, config


def main(argv=None):
    """Launch the joystick demo as a standalone Qt application."""
    argv = sys.argv[1:] if argv is None else argv
    args, config = parse_config(build_parser(), argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    app = QApplication([sys.argv[0]])
    widget = JoystickMainWidget(ConfigurationManager(config))
    widget.setWindowTitle('Virtual Joystick Controller')
    logger.info("Starting joystick demo (mode=%s, back_to_zero=%s)",
                config.mode.name, config.back_to_zero)
    if args.windowed:
        widget.resize(widget.sizeHint())
        widget.show()
    else:
        widget.showMaximized()
    return app.exec_()


if __name__ == '__main__':
    sys.exit(main())
