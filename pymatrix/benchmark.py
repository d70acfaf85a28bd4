"""
Micro-benchmark for the Matrix operations.

Times transpose, determinant, minor, adjugate and multiply on a 3x3
fixture and compares each against the previous stored run.

Usage:
    python -m pymatrix.benchmark
    python -m pymatrix.benchmark --repeat 5000 --results bench.json
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Sequence

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import ValidationError
from pymatrix.matrix import Matrix, matrix

DEFAULT_RESULTS_PATH = Path('benchmark-results.json')


def default_fixture() -> Matrix:
    return matrix(3, 3)(1, 2, 3,
                        4, 5, 6,
                        7, 8, 9)


# Operation name -> function of the fixture
CASES: dict[str, Callable[[Matrix], object]] = {
    'transpose': lambda m: m.transpose(),
    'determinant': lambda m: m.determinant(),
    'minor': lambda m: m.minor(0, 0),
    'adjugate': lambda m: m.adjugate(),
    'multiply': lambda m: m.multiply(m),
}


@dataclass(frozen=True)
class BenchmarkResult:
    """
    Timing of one benchmark case.

    Attributes:
        name: Case name (key of CASES)
        repeat: Number of calls timed
        total_seconds: Wall time for all calls
        ops_per_second: repeat / total_seconds
        previous_ops_per_second: Same case in the previous run, if any
    """
    name: str
    repeat: int
    total_seconds: float
    ops_per_second: float
    previous_ops_per_second: float | None = None

    @property
    def change(self) -> float | None:
        """Relative throughput change versus the previous run."""
        if not self.previous_ops_per_second:
            return None
        return self.ops_per_second / self.previous_ops_per_second - 1.0


def run_benchmarks(
    history: Sequence[BenchmarkResult] = (),
    repeat: int = 1000,
    fixture: Matrix | None = None,
) -> list[BenchmarkResult]:
    """
    Time every case in CASES.

    Args:
        history: Results of the previous run, matched by name
        repeat: Calls per case
        fixture: Matrix passed to each case; the 3x3 fixture if None

    Returns:
        One BenchmarkResult per case, in CASES order
    """
    if repeat < 1:
        raise ValidationError(f"repeat: must be at least 1, got {repeat}")
    if fixture is None:
        fixture = default_fixture()
    previous = {r.name: r.ops_per_second for r in history}

    timer = Timer()
    timer.start()
    for name, case in CASES.items():
        with timer.section(name):
            for _ in range(repeat):
                case(fixture)
    timer.stop()
    timings = timer.result()

    results = []
    for name in CASES:
        # Clamp to avoid division by zero on coarse clocks
        elapsed = max(timings[name], 1e-12)
        results.append(BenchmarkResult(
            name=name,
            repeat=repeat,
            total_seconds=timings[name],
            ops_per_second=repeat / elapsed,
            previous_ops_per_second=previous.get(name),
        ))
    return results


def load_results(path: Path) -> list[BenchmarkResult]:
    """Load stored results; a missing file is an empty history."""
    path = Path(path)
    if not path.exists():
        return []
    with open(path) as f:
        records = json.load(f)
    return [BenchmarkResult(**record) for record in records]


def save_results(path: Path, results: Sequence[BenchmarkResult]) -> None:
    """Store results as a JSON list, replacing any previous file."""
    with open(Path(path), 'w') as f:
        json.dump([asdict(r) for r in results], f, indent=2)


def format_result(result: BenchmarkResult) -> str:
    """One aligned line: name, throughput, and change versus last run."""
    line = f"{result.name:<12} {result.ops_per_second:>14,.0f} ops/sec"
    if result.change is not None:
        line += f"  ({result.change:+.1%})"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description='Benchmark PyMatrix operations on a 3x3 matrix'
    )
    parser.add_argument(
        '--repeat', '-r',
        type=int,
        default=1000,
        help='Calls per operation (default: 1000)'
    )
    parser.add_argument(
        '--results',
        type=Path,
        default=DEFAULT_RESULTS_PATH,
        help='JSON file holding the previous run (default: %(default)s)'
    )
    args = parser.parse_args(argv)

    print("=" * 50)
    print("PYMATRIX BENCHMARK")
    print("=" * 50)

    results = run_benchmarks(load_results(args.results), repeat=args.repeat)
    for result in results:
        print(format_result(result))
    save_results(args.results, results)

    print("=" * 50)
    print(f"Saved to {args.results}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
