import argparse
import csv
from datetime import datetime
import os
from typing import Any, cast

from indexastar.astar import AStarSearch, SearchError, SearchParams, zero_heuristic
from indexastar.core.types import HeuristicFn
from indexastar.logging import get_logger
from indexastar.scenarios import Scenario, default_suite

KEYS = [
    "scenario",
    "kind",
    "heuristic",
    "cost",
    "expansions",
    "generated",
    "reopens",
    "decreases",
    "runtime_ms",
    "path_len",
]


def run_one(sc: Scenario, label: str, h: HeuristicFn[Any], params: SearchParams) -> dict[str, Any]:
    eng = AStarSearch[Any](
        sc.start, sc.goal, sc.graph, h, params=params, logger=get_logger("indexastar.benchmark")
    )
    try:
        path, cost = eng.run()
    except SearchError:
        path, cost = None, None
    st = eng.stats
    return {
        "scenario": sc.name,
        "kind": sc.meta["kind"],
        "heuristic": label,
        "cost": cost,
        "expansions": st.expansions,
        "generated": st.generated,
        "reopens": st.reopens,
        "decreases": st.decreases,
        "runtime_ms": round(st.runtime_ms, 3),
        "path_len": (len(path) if path else None),
    }


def run_suite(seed: int = 0, max_expansions: int | None = None) -> list[dict[str, Any]]:
    params = SearchParams(max_expansions=max_expansions)
    rows = []
    for sc in default_suite(seed):
        rows.append(run_one(sc, "scenario", sc.h, params))
        rows.append(run_one(sc, "zero", cast(HeuristicFn[Any], zero_heuristic), params))
    return rows


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Scenario heuristic vs. zero heuristic (Dijkstra)")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max_expansions", type=int, default=None)
    p.add_argument("--out", type=str, default=None)
    args = p.parse_args(argv)

    rows = run_suite(args.seed, args.max_expansions)
    out_path = write_csv(rows, args.out)
    print(out_path)
    print(",".join(KEYS))
    for row in rows:
        print(",".join(str(row[k]) for k in KEYS))


def write_csv(rows: list[dict[str, Any]], out_path: str | None = None) -> str:
    out_path = out_path or os.path.join(
        "results", f"benchmark_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    )
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=KEYS)
        w.writeheader()
        w.writerows(rows)
    return out_path


if __name__ == "__main__":
    main()
