"""Serial bridge entry point — replays a telemetry capture to the cluster.

Press Ctrl+C to quit.

Usage:
    uv run python scripts/bridge.py --capture session.jsonl
    uv run python scripts/bridge.py --capture session.jsonl --port COM3 --loop
    uv run python scripts/bridge.py --capture session.jsonl --dry-run   # print frames
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from dotenv import load_dotenv

load_dotenv()

from cluster_bridge.config import BridgeConfig, ConfigError  # noqa: E402
from cluster_bridge.encoder.frame_encoder import FrameEncoder  # noqa: E402
from cluster_bridge.link.pump import FramePump  # noqa: E402
from cluster_bridge.link.serial_writer import SerialFrameWriter  # noqa: E402
from cluster_bridge.telemetry.replay import CaptureReadError, ReplaySource  # noqa: E402


class _PrintWriter:
    """Dry-run writer: echoes each frame to stdout."""

    def write(self, line: str) -> bool:
        sys.stdout.write(line)
        sys.stdout.flush()
        return True

    def close(self) -> None:
        pass


def main() -> int:
    ap = argparse.ArgumentParser(description="Telemetry → instrument cluster serial bridge")
    ap.add_argument("--capture", required=True, help="JSON-lines telemetry capture")
    ap.add_argument("--port", help="Serial device (overrides CLUSTER_BRIDGE_PORT)")
    ap.add_argument("--baud", type=int, help="Baud rate (overrides CLUSTER_BRIDGE_BAUD)")
    ap.add_argument("--hz", type=float, help="Frames per second (overrides CLUSTER_BRIDGE_HZ)")
    ap.add_argument("--layout", help="Frame layout: standard | safety")
    ap.add_argument("--loop", action="store_true", help="Restart the capture when it ends")
    ap.add_argument("--dry-run", action="store_true", help="Print frames instead of writing")
    args = ap.parse_args()

    try:
        env_cfg = BridgeConfig.from_env()
        cfg = BridgeConfig(
            port=args.port or env_cfg.port,
            baudrate=args.baud if args.baud is not None else env_cfg.baudrate,
            target_hz=args.hz if args.hz is not None else env_cfg.target_hz,
            layout=args.layout or env_cfg.layout,
            log_level=env_cfg.log_level,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        source = ReplaySource(args.capture, loop=args.loop)
    except CaptureReadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    writer = _PrintWriter() if args.dry_run else SerialFrameWriter(cfg.port, cfg.baudrate)
    pump = FramePump(source, FrameEncoder(cfg.frame_layout), writer, target_hz=cfg.target_hz)

    pump.start()
    print(f"Bridge running ({cfg.layout} layout, {cfg.target_hz:g} Hz). Press Ctrl+C to stop.",
          file=sys.stderr, flush=True)
    try:
        while pump.is_running:
            time.sleep(0.2)
            if source.exhausted:
                break
    except KeyboardInterrupt:
        pass
    finally:
        pump.stop()
        writer.close()
        print(f"\nBridge stopped after {pump.frames_sent} frame(s).", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
