#!/usr/bin/env python3
"""
Motion Authenticity Evaluator - Main Entry Point
Runs the tracking challenge headless against an absolute pointing device.
"""

import argparse
import logging
import sys
import time

from motion_authenticity.config.settings import EvaluatorConfig
from motion_authenticity.core.listener import MotionListener
from motion_authenticity.device.device_manager import DeviceManager
from motion_authenticity.utils.logger import MotionLogger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate pointer traces from a touchscreen or tablet.")
    parser.add_argument("--width", type=int, default=960, help="Tracking surface width in pixels")
    parser.add_argument("--height", type=int, default=540, help="Tracking surface height in pixels")
    parser.add_argument("--config", help="JSON file with threshold overrides")
    parser.add_argument("--debug-log", help="Write a debug log to this file")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the headless evaluator."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO,
                        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s")

    config = EvaluatorConfig.from_file(args.config) if args.config else EvaluatorConfig()

    device_manager = DeviceManager()
    if not device_manager.find_device():
        print("❌ No absolute pointing device found")
        return 1

    listener = MotionListener(
        args.width, args.height,
        config=config,
        motion_logger=MotionLogger(args.debug_log, verbose=not args.quiet)
    )
    listener.start(device_manager)

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
