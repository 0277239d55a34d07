#!/usr/bin/env python
"""Benchmark an encoding detector: timing and accuracy.

Test data is a directory of ``{encoding}-{language}`` subdirectories, for
instance ``shift_jis-japanese`` or ``windows-1251-russian``, each holding
sample files in that encoding.  Run with ``--detector charset-normalizer``
to measure the same corpus against charset-normalizer.
"""

from __future__ import annotations

import argparse
import json
import statistics
import sys
import time
from pathlib import Path


def collect_test_files(data_dir: Path) -> list[tuple[str, str, Path]]:
    """Collect (encoding, language, filepath) tuples from *data_dir*.

    Language names never contain hyphens, so the directory name is split on
    its last hyphen.
    """
    test_files: list[tuple[str, str, Path]] = []
    for encoding_dir in sorted(data_dir.iterdir()):
        if not encoding_dir.is_dir():
            continue
        parts = encoding_dir.name.rsplit("-", 1)
        if len(parts) != 2:
            continue
        encoding_name, language = parts
        test_files.extend(
            (encoding_name, language, filepath)
            for filepath in sorted(encoding_dir.iterdir())
            if filepath.is_file()
        )
    return test_files


def _same_encoding(expected: str, detected: str | None) -> bool:
    from charlockholmes.errors import UnsupportedEncodingNameError
    from charlockholmes.registry import lookup_encoding

    if detected is None:
        return False
    try:
        return lookup_encoding(expected) == lookup_encoding(detected)
    except UnsupportedEncodingNameError:
        return expected.lower() == detected.lower()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark an encoding detector (timing and accuracy).",
    )
    parser.add_argument(
        "--detector",
        choices=["charlockholmes", "charset-normalizer"],
        default="charlockholmes",
        help="Detector library to benchmark (default: charlockholmes)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        required=True,
        help="Directory of {encoding}-{language} sample directories",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    data_dir: Path = args.data_dir.resolve()
    if not data_dir.is_dir():
        print(f"ERROR: data directory not found: {data_dir}", file=sys.stderr)
        sys.exit(1)

    test_files = collect_test_files(data_dir)
    if not test_files:
        print("ERROR: no test files found!", file=sys.stderr)
        sys.exit(1)

    # Pre-read all file data so I/O doesn't affect timing
    all_data = [(enc, lang, fp, fp.read_bytes()) for enc, lang, fp in test_files]

    if args.detector == "charlockholmes":
        t0 = time.perf_counter()
        import charlockholmes

        import_time = time.perf_counter() - t0

        def detect(data: bytes) -> str | None:
            match = charlockholmes.detect(data)
            return match.name if match else None

    else:
        t0 = time.perf_counter()
        from charset_normalizer import from_bytes

        import_time = time.perf_counter() - t0

        def detect(data: bytes) -> str | None:
            best = from_bytes(data).best()
            return best.encoding if best else None

    file_times: list[float] = []
    correct = 0
    t_total_start = time.perf_counter()
    for enc, lang, fp, data in all_data:
        ft0 = time.perf_counter()
        detected = detect(data)
        file_elapsed = time.perf_counter() - ft0
        file_times.append(file_elapsed)
        if _same_encoding(enc, detected):
            correct += 1

        if args.json_only:
            print(
                json.dumps(
                    {
                        "expected": enc,
                        "language": lang,
                        "path": str(fp),
                        "detected": detected,
                        "elapsed": file_elapsed,
                    }
                )
            )
    total_elapsed = time.perf_counter() - t_total_start

    if args.json_only:
        print(json.dumps({"__timing__": total_elapsed, "import_time": import_time}))
        return

    total_ms = sum(file_times) * 1000
    mean_ms = statistics.mean(file_times) * 1000
    median_ms = statistics.median(file_times) * 1000
    if len(file_times) >= 20:
        q = statistics.quantiles(file_times, n=20)
        p90_ms = q[17] * 1000
        p95_ms = q[18] * 1000
    else:
        p90_ms = p95_ms = 0.0

    print(f"Detector: {args.detector}")
    print(f"  Files:        {len(all_data)}")
    accuracy = 100 * correct / len(all_data)
    print(f"  Accuracy:     {correct}/{len(all_data)} ({accuracy:.1f}%)")
    print()
    print("Timing:")
    print(f"  Import:       {import_time:.3f}s")
    print(f"  Detection:    {total_ms:.0f}ms total")
    print(
        f"  Per-file:     mean={mean_ms:.2f}ms  median={median_ms:.2f}ms"
        f"  p90={p90_ms:.2f}ms  p95={p95_ms:.2f}ms"
    )


if __name__ == "__main__":
    main()
