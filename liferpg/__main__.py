"""Allow running LifeRPG as a module: python -m liferpg."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from PyQt6.QtCore import QCoreApplication

from .controller import ProgressionController
from .database.db import configure_engine, init_db
from .gamification.catalog import DAILY_QUESTS, STAT_NAMES
from .gamification.history import daily_xp_history
from .gamification.leveling import level_progress, stat_level, title_for_level
from .gamification.profile import Profile
from .settings import load_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="liferpg", description="Level up your life.")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("status", help="show level, streak, stats and quests")
    sub.add_parser("activities", help="list loggable activities")

    log = sub.add_parser("log", help="log a completed activity")
    log.add_argument("activity")
    log.add_argument("minutes", type=int)

    add = sub.add_parser("add-activity", help="create a custom activity")
    add.add_argument("name")
    add.add_argument("stat", choices=STAT_NAMES)
    add.add_argument("--xp", type=int, default=None)
    add.add_argument("--duration", type=int, default=None)
    add.add_argument("--icon", default="Star")
    add.add_argument("--color", default="text-slate-400")

    history = sub.add_parser("history", help="XP earned per day")
    history.add_argument("--days", type=int, default=35)
    return parser


def _print_status(profile: Profile) -> None:
    progress, required = level_progress(profile.total_xp)
    print(f"Level {profile.level} — {title_for_level(profile.level)}")
    print(f"XP {profile.total_xp}  ({progress}/{required} to next level)")
    print(f"Streak {profile.streak} day(s)")
    for name in STAT_NAMES:
        value = profile.stats.get(name, 0)
        print(f"  {name:<11} {value:>6}  (Lv {stat_level(value)})")
    done = set(profile.daily_quests.completed)
    for quest in DAILY_QUESTS:
        mark = "x" if quest.activity in done else " "
        print(f"  [{mark}] {quest.label} ({quest.activity})")
    if profile.inventory:
        print("Inventory: " + ", ".join(profile.inventory))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.database_url:
        configure_engine(settings.database_url)
    init_db()

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("LifeRPG")

    controller = ProgressionController(settings=settings)
    failures: list[str] = []
    controller.error.connect(failures.append)

    def _show_reward(event) -> None:
        line = f"* {event.message}"
        if event.xp:
            line += f" (+{event.xp} XP)"
        if event.item:
            line += f" [{event.item}]"
        print(line)
        controller.acknowledge_reward()  # no one to wait for on a terminal

    controller.reward_ready.connect(_show_reward)
    controller.start()

    command = args.command or "status"
    if command == "log":
        controller.log_activity(args.activity, args.minutes)
        if not failures:
            log = controller.profile.logs[0]
            print(f"+{log.xp_earned} XP for {log.duration_minutes}m of {log.activity}")
    elif command == "add-activity":
        if controller.add_custom_activity(
            args.name, args.stat,
            base_xp=args.xp, base_duration=args.duration,
            icon_key=args.icon, color=args.color,
        ):
            print(f"Added {args.name!r}")
    elif command == "activities":
        for a in controller.catalog().all_items():
            print(f"{a.key:<16} {a.stat.value:<10} {a.base_xp} XP / {a.base_duration} min")
    elif command == "history":
        for day, xp in daily_xp_history(controller.profile.logs, date.today(), args.days):
            print(f"{day.isoformat()}  {xp:>5} XP")
    else:
        _print_status(controller.profile)

    for message in failures:
        print(f"error: {message}", file=sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
