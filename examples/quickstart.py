from indexastar.astar import AStarSearch, NoPathFound, zero_heuristic
from indexastar.grid import Grid, manhattan, render_ascii

if __name__ == "__main__":
    g = Grid(30, 30, walls={(15, y) for y in range(30)} - {(15, 10)})
    start, goal = (0, 0), (29, 29)

    for name, h in [("manhattan", manhattan), ("zero", zero_heuristic)]:
        eng = AStarSearch(start, goal, g, h)
        path, cost = eng.run()
        st = eng.stats
        print(f"{name}: cost={cost}, expansions={st.expansions}, decreases={st.decreases}")
    print(render_ascii(g, path, start, goal))

    try:
        AStarSearch(start, (40, 40), g, manhattan).run()
    except NoPathFound as exc:
        print(exc)
