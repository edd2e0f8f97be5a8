"""CLI entrypoint: python -m pomdpsim.runner.run_tiger

Usage:
    python -m pomdpsim.runner.run_tiger --seed 7 --episodes 20 --policy belief
"""

from __future__ import annotations

import argparse
import json
import sys
import uuid

from pomdpsim.agents import ALLOWED_POLICIES
from pomdpsim.config.defaults import default_config
from pomdpsim.runner.episode_runner import run_experiment


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate agents in the tiger POMDP."
    )
    parser.add_argument("--seed", type=int, default=42, help="Root seed.")
    parser.add_argument(
        "--episodes", type=int, default=None, help="Override number of episodes."
    )
    parser.add_argument(
        "--max-steps", type=int, default=None, help="Override per-episode step budget."
    )
    parser.add_argument(
        "--policy",
        default="belief",
        choices=sorted(ALLOWED_POLICIES),
        help="Agent policy.",
    )
    parser.add_argument(
        "--allow-terminal-actions",
        action="store_true",
        help="Let actions change the hidden state after a door has opened.",
    )
    parser.add_argument(
        "--continue-after-terminal",
        action="store_true",
        help="Keep acting after a terminal outcome until the step budget runs out.",
    )
    parser.add_argument(
        "--out", default="storage/runs", help="Directory for run artifacts."
    )
    parser.add_argument(
        "--run-id", default=None, help="Run directory name (default: random)."
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    config = default_config(seed=args.seed)
    overrides = {}
    if args.episodes is not None:
        overrides["num_episodes"] = args.episodes
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps
    if overrides:
        episodes = config.episodes.model_dump()
        episodes.update(overrides)
        config = config.model_validate({**config.model_dump(), "episodes": episodes})
    if args.allow_terminal_actions:
        config = config.model_copy(
            update={"environment": config.environment.model_copy(
                update={"allow_action_from_terminal_states": True}
            )}
        )

    run_id = args.run_id or f"tiger_{uuid.uuid4().hex[:8]}"
    summary = run_experiment(
        config,
        run_id,
        args.out,
        agent_policy=args.policy,
        stop_on_terminal=not args.continue_after_terminal,
    )

    print(f"Run {run_id} written to {args.out}/{run_id}", file=sys.stderr)
    print(json.dumps(
        {k: v for k, v in summary.items() if k != "episodes"}, indent=2
    ))


if __name__ == "__main__":
    main()
