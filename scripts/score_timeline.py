from __future__ import annotations

import argparse
import json
import sys

import pandas as pd
import structlog

from spoilerguard.codec.progress import (
    boundary_label,
    overtime_period_count,
    percentage,
    segment_end_value,
)
from spoilerguard.codec.router import decode_position
from spoilerguard.config import FullConfig, load_config
from spoilerguard.feed.espn import parse_scoring_plays
from spoilerguard.format import format_position
from spoilerguard.logging import configure_logging
from spoilerguard.rules.sports import Sport, get_sport_rules
from spoilerguard.scoring.events import ScoringEvent
from spoilerguard.scoring.reconstruct import score_at, score_progression

logger = structlog.get_logger("score_timeline")


def load_events(path: str) -> list[ScoringEvent]:
    with open(path, "r") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = raw.get("scoringPlays") or raw.get("events") or []
    # already-normalized events use snake_case score keys
    if raw and "away_score" in raw[0]:
        return [ScoringEvent.model_validate(r) for r in raw]
    return parse_scoring_plays(raw)


def timeline_frame(events: list[ScoringEvent], sport: Sport) -> pd.DataFrame:
    rules = get_sport_rules(sport)
    n_segments = rules.regulation_periods + overtime_period_count(events, sport)
    values = [0] + [segment_end_value(s, sport) for s in range(1, n_segments + 1)]
    scores = score_progression(values, events, sport)
    return pd.DataFrame(
        {
            "value": values,
            "position": [format_position(decode_position(v, sport), sport) for v in values],
            "label": [boundary_label(v, sport) or "" for v in values],
            "pct": [round(percentage(v, sport), 1) for v in values],
            "away": [s.away for s in scores],
            "home": [s.home for s in scores],
        }
    )


def main():
    ap = argparse.ArgumentParser(description="Score at each period end, rebuilt from scoring plays")
    ap.add_argument("events", help="JSON file of ESPN scoringPlays or normalized events")
    ap.add_argument("--sport", required=True, choices=[s.value for s in Sport])
    ap.add_argument("--at", type=int, default=None, help="single encoded position to look up")
    ap.add_argument("--config", default="", help="YAML config file")
    args = ap.parse_args()

    cfg = load_config(args.config) if args.config else FullConfig()
    configure_logging(cfg.logging)

    sport = Sport.parse(args.sport)
    events = load_events(args.events)
    logger.info("events_loaded", path=args.events, sport=sport.value, n_events=len(events))

    if args.at is not None:
        score = score_at(args.at, events, sport)
        pos = format_position(decode_position(args.at, sport), sport)
        print(f"{pos}  away={score.away} home={score.home}")
        return

    print(timeline_frame(events, sport).to_string(index=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.exception("score_timeline_failed", error=str(e))
        sys.exit(1)
