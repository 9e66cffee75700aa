#!/usr/bin/env python3
"""
Pit the alpha-beta AI against a random mover (or itself) and report the tally.

Example:
  python scripts/evaluate_match.py --config configs/match.yaml --episodes 4
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict

import numpy as np
import yaml

from amazons.evaluation import AlphaBetaPolicy, Policy, RandomPolicy, evaluate_policies
from amazons.search import SearchConfig


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_policy(kind: str, cfg: Dict, seed: int) -> Policy:
    if kind == "random":
        return RandomPolicy(np.random.default_rng(seed))
    search_cfg = cfg.get("search", {})
    config = SearchConfig(
        depth=int(search_cfg.get("depth", 2)),
        canonical_bounds=bool(search_cfg.get("canonical_bounds", True)),
    )
    return AlphaBetaPolicy(config)


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate Amazons policies against each other.")
    parser.add_argument("--config", type=str, default="configs/match.yaml")
    parser.add_argument("--white", choices=["ai", "random"], default=None)
    parser.add_argument("--black", choices=["ai", "random"], default=None)
    parser.add_argument("--episodes", type=int, default=None)
    parser.add_argument("--max-ply", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    cfg = load_yaml_config(args.config)

    white = args.white if args.white is not None else cfg.get("white", "ai")
    black = args.black if args.black is not None else cfg.get("black", "random")
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 2)
    max_ply = args.max_ply if args.max_ply is not None else cfg.get("max_ply", 200)
    seed = args.seed if args.seed is not None else cfg.get("seed", 0)

    result = evaluate_policies(
        build_policy(white, cfg, seed),
        build_policy(black, cfg, seed + 1),
        episodes=episodes,
        max_ply=max_ply,
    )
    output = {"white": white, "black": black, **asdict(result)}
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
