import argparse
import csv
import importlib
from typing import Any

PLT: Any | None
IMPORT_ERROR: Exception | None
try:
    PLT = importlib.import_module("matplotlib.pyplot")
except ImportError as exc:  # pragma: no cover
    PLT = None
    IMPORT_ERROR = exc
else:
    IMPORT_ERROR = None


def load_rows(path: str) -> list[dict[str, str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return [dict(row) for row in csv.DictReader(f)]


def expansions_by_scenario(rows: list[dict[str, str]]) -> dict[str, dict[str, int]]:
    out: dict[str, dict[str, int]] = {}
    for r in rows:
        out.setdefault(r["scenario"], {})[r["heuristic"]] = int(r["expansions"] or 0)
    return out


def plot_expansions(csv_path: str) -> list[str]:
    if PLT is None:
        assert IMPORT_ERROR is not None
        raise RuntimeError("matplotlib is required to plot results") from IMPORT_ERROR
    written = []
    for sc, by_h in expansions_by_scenario(load_rows(csv_path)).items():
        fig = PLT.figure()
        labels = sorted(by_h)
        PLT.bar(labels, [by_h[k] for k in labels])
        PLT.ylabel("Expansions")
        PLT.title(sc)
        out_png = csv_path.replace(".csv", f"_{sc}.png")
        PLT.savefig(out_png, bbox_inches="tight")
        PLT.close(fig)
        written.append(out_png)
    return written


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Plot benchmark CSV: expansions per heuristic")
    p.add_argument("csv", help="CSV file from indexastar-benchmark")
    args = p.parse_args(argv)
    for out_png in plot_expansions(args.csv):
        print(out_png)


if __name__ == "__main__":
    main()
