# vendsim/cli.py

from __future__ import annotations
import argparse
import json
import logging
import signal
import sys
from pathlib import Path
from typing import Any, List

from vendsim.engine.dispatcher import PublishSubscribeService
from vendsim.engine.scenario_runner import ScenarioRunner
from vendsim.engine.simulation_engine import run_events, run_with_feeds
from vendsim.feeds.random_feed import RandomMachineEventFeed
from vendsim.machines import default_machines
from vendsim.subscribers.base import DEFAULT_LOW_STOCK_THRESHOLD
from vendsim.subscribers.journal import EventJournal
from vendsim.subscribers.wiring import register


def main(argv: list[str] | None = None) -> int | None:
    parser = argparse.ArgumentParser(
        prog="vendsim",
        description="Run a vending machine inventory simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "scenario",
        type=Path,
        nargs="?",
        default=None,
        help="Path to a scenario YAML file (random events on the default floor if omitted)",
    )
    parser.add_argument(
        "--events",
        type=int,
        default=5,
        help="Number of random events to publish when no scenario is given",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for generated events",
    )
    parser.add_argument(
        "--background",
        action="store_true",
        help="Mix random sale/refill events into the scenario timeline",
    )
    parser.add_argument(
        "--background-rate",
        type=float,
        default=0.2,
        help="Background events per simulated second",
    )
    parser.add_argument(
        "--low-stock-threshold",
        type=int,
        default=None,
        help=f"Stock level below which sales are suspended (scenario value, else {DEFAULT_LOW_STOCK_THRESHOLD})",
    )
    parser.add_argument(
        "--output",
        choices=["cli", "json"],
        default="cli",
        help="Output mode: 'cli' prints report lines to stdout; 'json' dumps the run to a JSON file",
    )
    parser.add_argument(
        "--json-file",
        type=Path,
        default=Path("vendsim_output.json"),
        help="Path to JSON output file if --output=json",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostics on stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.scenario is not None and not args.scenario.exists():
        print(f"Scenario file not found: {args.scenario}", file=sys.stderr)
        return 1

    # Initialize components
    dispatcher = PublishSubscribeService()
    journal = EventJournal()
    runner: ScenarioRunner | None = None

    report_lines: List[str] = []

    def report(line: str) -> None:
        report_lines.append(line)
        if args.output == "cli":
            print(line)

    # Load scenario
    if args.scenario is not None:
        runner = ScenarioRunner(scenario_path=args.scenario, dispatcher=dispatcher)
        try:
            runner.load()
            machines = runner.machines()
        except Exception as exc:
            print(f"Failed to load scenario: {exc}", file=sys.stderr)
            return 2
        threshold = runner.low_stock_threshold
    else:
        machines = default_machines()
        threshold = DEFAULT_LOW_STOCK_THRESHOLD

    if args.low_stock_threshold is not None:
        threshold = args.low_stock_threshold

    register(
        dispatcher,
        machines,
        report=report,
        low_stock_threshold=threshold,
        journal=journal,
    )

    # Load optional extra subscribers if present
    if args.scenario is not None:
        subscribers_path = args.scenario.parent / "subscribers.py"
        if subscribers_path.exists():
            import importlib.util

            spec = importlib.util.spec_from_file_location(
                f"{runner.scenario_id}_subscribers", subscribers_path
            )
            if spec is None or spec.loader is None:
                print(f"Could not load subscribers module from {subscribers_path}", file=sys.stderr)
                return 2
            module = importlib.util.module_from_spec(spec)
            try:
                spec.loader.exec_module(module)
            except Exception as exc:
                print(f"Failed to load {subscribers_path}: {exc}", file=sys.stderr)
                return 2
            if not hasattr(module, "register"):
                print(f"{subscribers_path} does not define register()", file=sys.stderr)
                return 2
            module.register(
                dispatcher=dispatcher, machines=machines, scenario_name=runner.scenario_id
            )

    machine_ids = [machine.id for machine in machines]

    # Run simulation
    try:
        if runner is None:
            feed = RandomMachineEventFeed(machine_ids, seed=args.seed)
            run_events(feed.generate(args.events), dispatcher)
        elif args.background:
            feed = RandomMachineEventFeed(machine_ids, rate=args.background_rate, seed=args.seed)

            if args.output == "cli":
                print(
                    f"[INFO] Background events enabled: {args.background_rate} events/sec",
                    file=sys.stderr,
                )

            run_with_feeds(runner, [feed], dispatcher)
        else:
            runner.run()

    except Exception as exc:
        print(f"Simulation failed: {exc}", file=sys.stderr)
        return 3

    final_stock = {machine.id: machine.stock_level for machine in machines}

    if args.output == "cli":
        for machine_id, stock_level in final_stock.items():
            print(f"Final stock machine {machine_id}: {stock_level}")

    # Dump JSON output if requested
    if args.output == "json":
        result: dict[str, Any] = {
            "scenario": runner.scenario_id if runner is not None else None,
            "events": journal.as_dicts(),
            "lines": report_lines,
            "final_stock": final_stock,
        }
        try:
            args.json_file.parent.mkdir(parents=True, exist_ok=True)
            with args.json_file.open("w", encoding="utf-8") as f:
                json.dump(result, f, indent=2)
            print(f"Simulation JSON dumped to {args.json_file}")
        except Exception as exc:
            print(f"Failed to write JSON file: {exc}", file=sys.stderr)
            return 4

    return 0  # success


if __name__ == "__main__":

    signal.signal(signal.SIGPIPE, signal.SIG_DFL)  # Ignore broken pipe
    sys.exit(main())
