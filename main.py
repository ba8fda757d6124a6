# main.py
from proxpath.app.build import build


def grid_nodes(nx: int, ny: int, spacing: float = 5.0):
    return [
        {"id": j * nx + i, "position": (i * spacing, j * spacing, 0.0)}
        for j in range(ny)
        for i in range(nx)
    ]


def run(goals: int = 5):
    app = build(
        {
            "name": "grid",
            "run_id": "demo",
            "nodes": grid_nodes(6, 4),
            "navigator": {"seed": 7, "start": 0},
        }
    )
    nav = app.navigator

    # No steering here: jump straight onto each goal once its path is known.
    for _ in range(goals):
        nav.update(nav.goal.position)
    return nav


if __name__ == "__main__":
    run()
