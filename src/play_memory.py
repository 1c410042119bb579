#!/usr/bin/env python3
"""
Memory Game - terminal front-end

Composition root: builds the gameplay session with a console presenter,
a score manager and (optionally) pygame cue sounds, then runs the
round loop reading the player's selections from stdin.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Add src to path for imports when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from gameplay_system import AccessibilityConfig, GameplaySession, Target, TimingConfig
from audio_system import CueSoundController, MockCueController
from display_system import ConsolePresenter, StaticLabelProvider
from score_system import LevelScoreManager
from utils import HybridLogger

HELP_TEXT = (
    "Select: tl tr bl br (or 1-4)  |  r: replay  |  t: tip  |  q: quit"
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Repeat the sequence of highlighted quadrants.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_TEXT
    )
    parser.add_argument(
        "--lives", type=int, default=5,
        help="Lives per game (7 = infinite)"
    )
    parser.add_argument(
        "--tips", type=int, default=3,
        help="Tip allowance (0 or 7 = not counted)"
    )
    parser.add_argument(
        "--countdown", type=int, default=3,
        help="Countdown steps before each round"
    )
    parser.add_argument(
        "--extreme", action="store_true",
        help="Re-roll the whole sequence every round"
    )
    parser.add_argument(
        "--sounds", metavar="DIR", default=None,
        help="Play cue sounds from DIR with pygame (default: muted)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducible sequences"
    )
    parser.add_argument(
        "--log-dir", default="logs",
        help="Directory for log files"
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Log sequences and cues"
    )
    return parser.parse_args(argv)


def create_session(args: argparse.Namespace, main_logger: HybridLogger):
    """
    Create and wire the gameplay session.

    Returns:
        (GameplaySession, cue player) - the cue player needs cleanup()
    """
    level = logging.DEBUG if args.debug else logging.INFO
    session_logger = main_logger.get_class_logger("GameplaySession", level)
    audio_logger = main_logger.get_class_logger("Audio", level)

    accessibility = AccessibilityConfig(
        max_lives=args.lives,
        tip_allowance=args.tips,
        countdown_steps=args.countdown
    )
    timing = TimingConfig()

    if args.sounds:
        cue_player = CueSoundController(audio_logger, sounds_folder=args.sounds)
    else:
        cue_player = MockCueController(audio_logger)

    session = GameplaySession(
        presenter=ConsolePresenter(highlight_ms=timing.highlight_ms),
        label_provider=StaticLabelProvider(),
        cue_player=cue_player,
        score_manager=LevelScoreManager(),
        logger=session_logger,
        accessibility=accessibility,
        timing=timing,
        rng=random.Random(args.seed) if args.seed is not None else None
    )
    session.set_extreme_mode(args.extreme)
    return session, cue_player


async def read_line(prompt: str) -> str:
    """Read a line from stdin without blocking the event loop"""
    return await asyncio.to_thread(input, prompt)


def print_status(session: GameplaySession) -> None:
    print(
        f"Level {session.level} | Lives {session.lives} | "
        f"Tips {session.remaining_tips} | Score {session.total_score}"
    )


async def run_game(session: GameplaySession) -> None:
    """Run rounds until the player quits"""
    print(HELP_TEXT)
    await session.start_round(reset=True)
    print_status(session)

    while True:
        if session.is_game_over:
            answer = (await read_line("💀 Game over - new game? [y/N] ")).strip().lower()
            if answer != "y":
                return
            await session.start_round(reset=True)
            print_status(session)
            continue

        if session.is_level_completed:
            print(
                f"⭐ Level {session.level} done in {session.elapsed_round_time:.1f}s - "
                f"{session.round_score} points (three stars: {session.three_star_threshold})"
            )
            await session.start_round()
            print_status(session)
            continue

        command = (await read_line("> ")).strip().lower()
        if not command:
            continue
        if command == "q":
            return
        if command == "r":
            await session.replay_round()
            continue
        if command == "t":
            tip = session.request_tip()
            if tip:
                print(f"💡 {tip[0]} {tip[1]} - {session.remaining_tips} tips left")
            continue

        try:
            target = Target.from_key(command)
        except ValueError:
            print(HELP_TEXT)
            continue
        session.submit_selection(target)


def main(argv=None) -> int:
    args = parse_args(argv)
    main_logger = HybridLogger("memory_game", log_dir=args.log_dir, console=args.debug)
    logger = main_logger.get_main_logger()

    cue_player = None
    try:
        session, cue_player = create_session(args, main_logger)
        asyncio.run(run_game(session))
        logger.info(f"Session ended at level {session.level} with {session.total_score} points")
    except KeyboardInterrupt:
        print("\n⏹️  Game stopped by user")
    except Exception as e:
        logger.error(f"Memory game error: {e}", exception=e)
        raise
    finally:
        if cue_player is not None:
            cue_player.cleanup()
        main_logger.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())
