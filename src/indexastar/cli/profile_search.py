import argparse
import cProfile
import io
import pstats

from indexastar.astar import AStarSearch
from indexastar.scenarios import scenario_maze4


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="cProfile for a large maze search")
    p.add_argument("--size", type=int, default=151)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args(argv)

    sc = scenario_maze4(args.size, args.size, seed=args.seed)
    eng = AStarSearch(sc.start, sc.goal, sc.graph, sc.h)
    pr = cProfile.Profile()
    pr.enable()
    eng.run()
    pr.disable()
    s = io.StringIO()
    pstats.Stats(pr, stream=s).sort_stats("tottime").print_stats(30)
    print(f"expansions={eng.stats.expansions}, decreases={eng.stats.decreases}")
    print(s.getvalue())


if __name__ == "__main__":
    main()
