"""
Configuration file for the greedy separation batch.

Contains the capacity limit, the instance/solution naming scheme and the
rendering parameters for the optional solution images.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# CAPACITY
# ---------------------------------------------------------------

# Largest point set a single run accepts
MAX_POINTS = 100


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INSTANCE_FOLDER = "."
OUTPUT_FOLDER = "."

INSTANCE_PATTERN = "instance{:02d}"
SOLUTION_PATTERN = "greedy_solution_{:02d}"

# Instances are numbered; the batch stops at the first missing one
FIRST_INSTANCE = 1
LAST_INSTANCE = 99


# ---------------------------------------------------------------
# BATCH BEHAVIOUR
# ---------------------------------------------------------------

# Halt the whole batch on a bad instance (False = report and skip it)
STOP_ON_ERROR = True

# Reject non-positive and duplicate coordinates while reading
VALIDATE_POINTS = True

# Dump sorted orders and the connectivity matrix for every instance
VERBOSE = False


# ===============================================================
# RENDERING PARAMETERS
# ===============================================================

RENDER_SOLUTIONS = False
RENDER_SCALE = 8                   # pixels per coordinate unit
RENDER_MARGIN = 20                 # pixels around the bounding box
POINT_RADIUS = 3

COLOR_BACKGROUND = (255, 255, 255) # white
COLOR_POINT = (0, 0, 0)            # black
COLOR_VERTICAL = (0, 0, 255)       # red  (v lines, split on x)
COLOR_HORIZONTAL = (255, 0, 0)     # blue (h lines, split on y)


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary so that
    modules only import a single accessor.
    """

    return {
        "MAX_POINTS": MAX_POINTS,
        "INSTANCE_FOLDER": INSTANCE_FOLDER,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "INSTANCE_PATTERN": INSTANCE_PATTERN,
        "SOLUTION_PATTERN": SOLUTION_PATTERN,
        "FIRST_INSTANCE": FIRST_INSTANCE,
        "LAST_INSTANCE": LAST_INSTANCE,
        "STOP_ON_ERROR": STOP_ON_ERROR,
        "VALIDATE_POINTS": VALIDATE_POINTS,
        "VERBOSE": VERBOSE,
        "RENDER_SOLUTIONS": RENDER_SOLUTIONS,
        "RENDER_SCALE": RENDER_SCALE,
        "RENDER_MARGIN": RENDER_MARGIN,
        "POINT_RADIUS": POINT_RADIUS,
        "COLORS": {
            "background": COLOR_BACKGROUND,
            "point": COLOR_POINT,
            "vertical": COLOR_VERTICAL,
            "horizontal": COLOR_HORIZONTAL,
        },
    }
