"""Entry point: ``python -m unkindred``.

Supports two modes:
  - ``python -m unkindred``            → Launch the FastAPI server
  - ``python -m unkindred cli``        → Headless run driven by a key script
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _add_world_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--width", type=int, default=80, help="Map width in cells")
    parser.add_argument("--height", type=int, default=45, help="Map height in cells")
    parser.add_argument("--fov-radius", type=int, default=8, help="0 means unlimited")
    parser.add_argument("--log-level", type=str, default="INFO", choices=_LEVELS)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unkindred Hearts — turn-based roguelike core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_world_args(srv)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session from a key script")
    _add_world_args(cli)
    cli.add_argument(
        "--keys", type=str, default="",
        help="Key script: digits are numpad directions, 'f' toggles fullscreen, 'q' quits",
    )
    cli.add_argument("--replay", type=str, default="replay.json")

    return parser


def _config_from_args(args: argparse.Namespace, **extra):
    from unkindred.config import GameConfig

    return GameConfig(
        seed=args.seed,
        map_width=args.width,
        map_height=args.height,
        fov_radius=args.fov_radius,
        log_level=args.log_level,
        **extra,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from unkindred.api.app import create_app

    app = create_app(_config_from_args(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from unkindred.engine.input import ScriptedInput, parse_keys
    from unkindred.engine.session import GameSession
    from unkindred.utils.logging import setup_logging
    from unkindred.utils.replay import ReplayRecorder

    config = _config_from_args(args, replay_file=args.replay)
    setup_logging(config.log_level)

    recorder = ReplayRecorder(config.replay_file, config.seed)
    session = GameSession.new(config, recorder=recorder)
    session.engine.run(ScriptedInput(parse_keys(args.keys)))

    frame = session.engine.last_frame
    if frame is not None:
        print(frame.to_text())
    logger.info("Done (%s). Replay written to %s", session.engine.status.name, config.replay_file)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
