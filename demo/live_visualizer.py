#!/usr/bin/env python3
"""dsviz Live Visualizer

Plays a scripted session of operations and redraws the structure on every
phase, with the phase description as the title and the code excerpt below.

Usage:
    python demo/live_visualizer.py binary_tree
    python demo/live_visualizer.py graph --save-video /tmp/graph.gif
"""

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter

from dsviz import (
    BinarySearchTree,
    Graph,
    HashTable,
    LinkedList,
    ManualScheduler,
    OperationSequencer,
    PhaseUpdate,
    Queue,
    SequencerConfig,
    Stack,
)
from dsviz.core.snippets import get_snippet
from dsviz.render.mpl import draw_structure

# (structure factory, scripted operations)
SESSIONS = {
    "stack": (lambda: Stack([1, 2]), [("push", 3), ("peek", None), ("pop", None), ("pop", None)]),
    "queue": (lambda: Queue([1]), [("enqueue", 2), ("enqueue", 3), ("dequeue", None), ("peek", None)]),
    "linked_list": (
        lambda: LinkedList([1, 3]),
        [("insert_at_position", (2, 1)), ("insert_at_end", 4), ("search", 3), ("delete", 1)],
    ),
    "binary_tree": (
        lambda: BinarySearchTree([50, 30, 70, 20, 40]),
        [("insert", 60), ("find", 40), ("remove", 30), ("in_order", None), ("pre_order", None)],
    ),
    "graph": (
        Graph,
        [("add_vertex", v) for v in "ABCDE"]
        + [("add_edge", e) for e in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E")]]
        + [("bfs", "A"), ("dfs", "A"), ("remove_vertex", "D")],
    ),
    "hash_table": (
        HashTable,
        [("set", ("age", 30)), ("set", ("gae", 31)), ("get", "gae"), ("set", ("age", 32)), ("delete", "age")],
    ),
}


def run_session(family: str, interval_ms: int, save_video: str | None, fps: int) -> None:
    """Animate one scripted session."""
    factory, script = SESSIONS[family]
    structure = factory()
    scheduler = ManualScheduler()
    config = SequencerConfig()
    seq = OperationSequencer(structure, scheduler=scheduler, config=config)

    fig = plt.figure(figsize=(10, 8))
    ax_struct = fig.add_axes((0.05, 0.35, 0.9, 0.6))
    ax_code = fig.add_axes((0.05, 0.02, 0.9, 0.3))
    pending = list(script)
    latest: dict[str, PhaseUpdate | None] = {"update": None}

    def on_phase(update: PhaseUpdate) -> None:
        latest["update"] = update
        print(f"[{update.phase.value:<8}] {update.description}")

    seq.on_phase(on_phase)

    def start_next() -> None:
        while pending:
            operation, operand = pending.pop(0)
            message = seq.validate(operation, operand)
            if message is None:
                seq.invoke(operation, operand)
                return
            print(f"Skipped {operation}: {message}")

    def redraw() -> None:
        update = latest["update"] if seq.is_animating() else None
        draw_structure(
            structure,
            highlight=update.highlight if update else None,
            ax=ax_struct,
            title=update.description if update else "Idle",
        )
        ax_code.clear()
        ax_code.axis("off")
        code = update.code if update else get_snippet(seq.family, "empty")
        ax_code.text(0, 1, code, va="top", ha="left", family="monospace", fontsize=7)

    def tick(frame: int) -> list:
        if not seq.is_animating():
            start_next()
        else:
            scheduler.advance(interval_ms / 1000.0)
        redraw()
        return []

    redraw()
    # Each tick advances the virtual clock by one interval; size the run to cover every hold.
    frames = int(sum(_session_ms(config, op) for op, _ in script) / interval_ms) + len(script) * 2

    ani = FuncAnimation(fig, tick, frames=frames, interval=interval_ms, repeat=False)

    if save_video:
        print(f"Saving {frames} frames to {save_video}...")
        ani.save(save_video, writer=PillowWriter(fps=fps))
        print(f"Saved animation to {save_video}")
    else:
        plt.show()


def _session_ms(config: SequencerConfig, operation: str) -> int:
    if operation == "peek":
        return config.peek_confirm_ms
    if operation in ("find", "search"):
        return config.find_prepare_ms + config.find_confirm_ms
    if operation in ("bfs", "dfs", "in_order", "pre_order", "post_order"):
        return config.prepare_ms + config.traversal_mutate_ms + config.traversal_confirm_ms
    return config.prepare_ms + config.mutate_ms + config.confirm_ms


def main() -> None:
    """Parse arguments and run visualizer."""
    p = argparse.ArgumentParser(description="dsviz operation visualizer")
    p.add_argument("family", choices=sorted(SESSIONS), help="Structure to animate")
    p.add_argument(
        "--interval-ms",
        type=int,
        default=250,
        help="Virtual time advanced per frame (ms)",
    )
    p.add_argument(
        "--save-video",
        help="Save animated GIF to file instead of showing a window",
    )
    p.add_argument(
        "--fps",
        type=int,
        default=4,
        help="Frames per second for video output (default: 4)",
    )

    args = p.parse_args()

    try:
        run_session(args.family, args.interval_ms, args.save_video, args.fps)
    except KeyboardInterrupt:
        print("\nStopped")
        sys.exit(0)


if __name__ == "__main__":
    main()
