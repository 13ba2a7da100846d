#!/usr/bin/env python3
"""Latency benchmark for txkv command processing."""

import argparse
import json
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from txkv import CommandProcessor

class Metrics:
    def __init__(self):
        self.latencies: Dict[str, List[float]] = {}

    def record(self, name: str, started: float):
        self.latencies.setdefault(name, []).append((time.perf_counter() - started) * 1000)

    def to_dict(self) -> Dict:
        return {
            name: {
                "p50": float(np.percentile(values, 50)),
                "p95": float(np.percentile(values, 95)),
                "p99": float(np.percentile(values, 99)),
                "mean": float(np.mean(values)),
            }
            for name, values in self.latencies.items()
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()
        for name, values in self.latencies.items():
            fig.add_trace(go.Box(y=values, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (ms)",
            boxmode="group"
        )

        fig.write_html(output_path)

class BenchmarkSuite:
    def __init__(self, num_entries: int, depth: int):
        self.num_entries = num_entries
        self.depth = depth
        self.metrics = Metrics()
        self._keys = [f"key_{i}" for i in range(num_entries)]
        self._values = [f"value_{i % 100}" for i in range(num_entries)]

    def run(self):
        proc = CommandProcessor()

        for i in tqdm(range(self.num_entries), desc="SET"):
            start = time.perf_counter()
            proc.execute(f"SET {self._keys[i]} {self._values[i]}")
            self.metrics.record("SET", start)

        for i in tqdm(range(self.num_entries), desc="GET"):
            start = time.perf_counter()
            proc.execute(f"GET {self._keys[i]}")
            self.metrics.record("GET", start)

        for i in tqdm(range(min(self.num_entries, 1000)), desc="COUNT"):
            start = time.perf_counter()
            proc.execute(f"COUNT {self._values[i]}")
            self.metrics.record("COUNT", start)

        # Every BEGIN copies the whole level, so cost grows with store size.
        for _ in tqdm(range(self.depth), desc="BEGIN"):
            start = time.perf_counter()
            proc.execute("BEGIN")
            self.metrics.record("BEGIN", start)
        for _ in tqdm(range(self.depth), desc="COMMIT"):
            start = time.perf_counter()
            proc.execute("COMMIT")
            self.metrics.record("COMMIT", start)

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of keys")
    parser.add_argument("--depth", type=int, default=50, help="Nested transactions to open and commit")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.depth)
    suite.run()

    suite.metrics.plot_latencies(
        "txkv Latency Distribution",
        args.output / "txkv_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({"txkv": suite.metrics.to_dict()}, f, indent=2)

if __name__ == "__main__":
    main()
