import sys

from utils.instance_io import read_instance_file
from utils.geometry import unseparated_pairs
from utils.errors import InstanceError, InstanceNotFoundError, CapacityExceededError
from separation.greedy_driver import SeparationRun
from visualization.print_state import print_run_state
from visualization.save_outputs import save_all_outputs

from config import get_active_params


def process_instance(instance_number: int):
    """
    Runs the complete pipeline for one instance:
      1. Read & validate the instance file
      2. Sort points, build the connectivity graph
      3. Generate X / Y candidate lines
      4. Greedy X/Y walk, committing useful candidates
      5. Verify and save the solution (and optional rendering)

    Returns the Solution. Input errors propagate to the caller.
    """

    params = get_active_params()

    # ------------------------------
    # STEP 1 - READ INSTANCE
    # ------------------------------
    coordinates = read_instance_file(instance_number, params["INSTANCE_FOLDER"])

    # ------------------------------
    # STEP 2-3 - FRESH RUN STATE
    # (points, graph, orders, candidates)
    # ------------------------------
    run = SeparationRun.from_coordinates(coordinates, capacity=params["MAX_POINTS"])

    if params["VERBOSE"]:
        print_run_state(run)

    # ------------------------------
    # STEP 4 - GREEDY WALK
    # ------------------------------
    solution = run.run()

    # ------------------------------
    # STEP 5 - VERIFY & SAVE
    # ------------------------------
    if not solution.complete:
        left = unseparated_pairs(run.points, solution.lines)
        print(
            f"[WARN] Instance {instance_number:02d}: candidates exhausted with "
            f"{len(left)} pair(s) still unseparated"
        )

    save_all_outputs(
        output_dir=params["OUTPUT_FOLDER"],
        instance_number=instance_number,
        points=run.points,
        solution=solution,
        render=params["RENDER_SOLUTIONS"],
    )

    print(f"[OK] Solved instance {instance_number:02d}")
    return solution


def main():
    """
    Main entry point:
      - Walks the numbered instances in order
      - Solves each one independently
      - Stops at the first missing instance

    Returns a process exit status.
    """
    params = get_active_params()

    for instance_number in range(params["FIRST_INSTANCE"], params["LAST_INSTANCE"] + 1):
        try:
            process_instance(instance_number)

        except InstanceNotFoundError as err:
            print(f"[ERROR] {err}", file=sys.stderr)
            print("Quitting", file=sys.stderr)
            return 0

        except CapacityExceededError as err:
            print(f"[ERROR] Instance {instance_number:02d}: {err}", file=sys.stderr)
            print("Quitting", file=sys.stderr)
            return 1

        except InstanceError as err:
            print(f"[ERROR] {err}", file=sys.stderr)
            if params["STOP_ON_ERROR"]:
                print("Quitting", file=sys.stderr)
                return 1
            print(f"[WARN] Skipping instance {instance_number:02d}", file=sys.stderr)

    print("\n=== All instances processed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
