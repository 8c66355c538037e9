# experiments/run_demo.py
import sys
import os

import matplotlib
matplotlib.use("Agg")

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridroute.planning.planners import AStarRoutePlanner
from gridroute.planning.costs import UniformCost
from gridroute.map.generator import MapGenerator
from gridroute.simulation.launcher import DemoLauncher
from gridroute.visualization.plotter import Visualizer

GRID_SIZE = 10
OBSTACLE_COUNT = 12
SEED = 1111111
FRAME_DT = 1.0 / 30.0
NUM_PLANS = 8
OUTPUT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "demo_frames")


def run_demo():
    planner = AStarRoutePlanner(GRID_SIZE, GRID_SIZE, UniformCost())
    launcher = DemoLauncher(planner, MapGenerator(obstacle_count=OBSTACLE_COUNT, seed=SEED),
                            record_search=True)
    launcher.setup()

    os.makedirs(OUTPUT_DIR, exist_ok=True)
    visualizer = Visualizer(planner.grid_map)

    while launcher.plan_count < NUM_PLANS:
        if not launcher.update(FRAME_DT):
            continue

        status = f"{len(launcher.path)} cells" if launcher.path else "no route"
        print(f"[{launcher.plan_count}] {launcher.start} -> {launcher.destination}: "
              f"{status} ({launcher.last_plan_seconds * 1000:.3f} ms, "
              f"{launcher.observer.summary()['expansions']} expansions)")

        visualizer.draw(launcher.path, launcher.start, launcher.destination,
                        observer=launcher.observer,
                        title=f"Plan {launcher.plan_count}: {status}")
        visualizer.save(os.path.join(OUTPUT_DIR, f"plan_{launcher.plan_count:02d}.png"))

    print(f"Frames saved to {OUTPUT_DIR}")


if __name__ == "__main__":
    run_demo()
