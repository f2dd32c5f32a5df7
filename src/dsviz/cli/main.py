# Minimal CLI using argparse that replays operations through the sequencer and prints each phase.
from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path
from typing import Any

from dsviz.components.bst import BinarySearchTree
from dsviz.components.graph import Graph
from dsviz.components.hash_table import HashTable
from dsviz.components.linked_list import LinkedList
from dsviz.components.queue import Queue
from dsviz.components.scheduler import ManualScheduler, ThreadingScheduler
from dsviz.components.stack import Stack
from dsviz.core.config import SequencerConfig
from dsviz.core.errors import ConfigError, UnknownOperationError
from dsviz.core.plans import operations
from dsviz.core.sequencer import OperationEnd, OperationSequencer, PhaseUpdate
from dsviz.core.types import StructureFamily

logger = logging.getLogger(__name__)

# Operations that take no operand.
_NO_OPERAND = {"pop", "peek", "dequeue", "in_order", "pre_order", "post_order"}


def parse_number(text: str) -> int | float:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _split(text: str, sep: str, count: tuple[int, ...]) -> list[str]:
    parts = [p.strip() for p in text.split(sep)]
    if len(parts) not in count or not all(parts):
        raise ValueError(f"malformed operand {text!r}")
    return parts


def _scalar(text: str) -> Any:
    try:
        return parse_number(text)
    except ValueError:
        return text.strip()


def parse_operand(family: StructureFamily, operation: str, text: str | None) -> Any:
    """Turn the text after ``name:`` into the operand the plan builder expects.

    Raises:
        ValueError: If the text does not fit the operation
    """
    if operation in _NO_OPERAND:
        return None
    if text is None or not text.strip():
        raise ValueError(f"{operation} needs an operand")

    if family is StructureFamily.GRAPH:
        if operation == "add_vertex":
            parts = _split(text, ",", (1, 2))
            return parts[0] if len(parts) == 1 else (parts[0], parts[1])
        if operation == "add_edge":
            parts = _split(text, ",", (2, 3))
            if len(parts) == 3:
                return (parts[0], parts[1], parse_number(parts[2]))
            return (parts[0], parts[1])
        if operation == "remove_edge":
            return tuple(_split(text, ",", (2,)))
        return text.strip()

    if family is StructureFamily.HASH_TABLE:
        if operation == "set":
            sep = "=" if "=" in text else ","
            key, value = _split(text, sep, (2,))
            return (key, _scalar(value))
        return text.strip()

    if operation == "insert_at_position":
        value, position = _split(text, ",", (2,))
        return (parse_number(value), int(position))
    return parse_number(text)


def build_structure(family: StructureFamily, initial: str | None, config: SequencerConfig) -> Any:
    """Create a structure of family, seeded from a comma-separated ``--initial`` string.

    Raises:
        ValueError: If the initial values cannot be parsed
    """
    items = [p.strip() for p in initial.split(",") if p.strip()] if initial else []

    if family is StructureFamily.GRAPH:
        graph = Graph()
        for vertex_id in items:
            graph.add_vertex(vertex_id)
        return graph
    if family is StructureFamily.HASH_TABLE:
        table = HashTable(config.hash_table_capacity)
        for item in items:
            key, value = _split(item, "=", (2,))
            table.set(key, _scalar(value))
        return table

    values = [parse_number(item) for item in items]
    return {
        StructureFamily.STACK: Stack,
        StructureFamily.QUEUE: Queue,
        StructureFamily.LINKED_LIST: LinkedList,
        StructureFamily.BINARY_TREE: BinarySearchTree,
    }[family](values)


def format_update(update: PhaseUpdate, show_code: bool = False) -> str:
    line = f"[{update.generation}] {update.phase.value:<8} {update.description}"
    if show_code:
        line += "\n" + "\n".join(f"    {row}" for row in update.code.splitlines())
    return line


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dsviz", description="Replay data-structure operations phase by phase"
    )
    p.add_argument(
        "family",
        choices=[f.value for f in StructureFamily],
        help="Structure to operate on",
    )
    p.add_argument(
        "--initial",
        type=str,
        help="Comma-separated initial contents (vertex ids for graph, key=value for hash_table)",
    )
    p.add_argument(
        "--op",
        dest="ops",
        action="append",
        default=[],
        metavar="NAME[:OPERAND]",
        help="Operation to run, e.g. push:5 or add_edge:A,B,2 (repeatable)",
    )
    p.add_argument("--config", type=Path, help="TOML file with a [sequencer] table")
    p.add_argument(
        "--instant",
        action="store_true",
        help="Skip the phase delays (virtual clock)",
    )
    p.add_argument("--time-scale", type=float, help="Multiply every phase hold by this factor")
    p.add_argument("--code", action="store_true", help="Print the code excerpt for each phase")
    p.add_argument("--render", type=Path, help="Draw the final structure to an image file")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return p


def _load_config(args: argparse.Namespace) -> SequencerConfig:
    config = SequencerConfig.from_toml(args.config) if args.config else SequencerConfig()
    if args.time_scale is not None:
        config = SequencerConfig.from_dict({**config.to_dict(), "time_scale": args.time_scale})
    return config


def _run(sequencer: OperationSequencer, operation: str, operand: Any, scheduler: Any) -> None:
    """Invoke one operation and block until it ends."""
    if isinstance(scheduler, ManualScheduler):
        sequencer.invoke(operation, operand)
        scheduler.run_until_idle()
        return

    done = threading.Event()
    unsubscribe = sequencer.on_end(lambda end: done.set())
    try:
        sequencer.invoke(operation, operand)
        done.wait()
    finally:
        unsubscribe()


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    family = StructureFamily(args.family)
    try:
        config = _load_config(args)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error loading config: {e}")
        return 2

    try:
        structure = build_structure(family, args.initial, config)
        steps = []
        for spec in args.ops:
            name, _, text = spec.partition(":")
            name = name.strip()
            if name not in operations(family):
                raise UnknownOperationError(
                    f"Unknown {family.value} operation {name!r}; "
                    f"expected one of {', '.join(operations(family))}"
                )
            steps.append((name, parse_operand(family, name, text or None)))
    except (ValueError, UnknownOperationError) as e:
        print(f"Error: {e}")
        return 2

    logger.info(f"Running {len(steps)} operation(s) on a {family.value}")
    scheduler = ManualScheduler() if args.instant else ThreadingScheduler()
    sequencer = OperationSequencer(structure, scheduler=scheduler, config=config)
    sequencer.on_phase(lambda update: print(format_update(update, args.code)))

    def report(end: OperationEnd) -> None:
        if end.result is not None:
            print(f"    result: {end.result}")

    sequencer.on_end(report)

    try:
        for name, operand in steps:
            message = sequencer.validate(name, operand)
            if message is not None:
                print(f"Skipped {name}: {message}")
                continue
            _run(sequencer, name, operand, scheduler)
    finally:
        sequencer.close()
        scheduler.close()

    print(f"Final: {structure!r}")

    if args.render:
        from dsviz.render.mpl import save_structure

        save_structure(structure, args.render)
        print(f"Wrote image to {args.render}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
