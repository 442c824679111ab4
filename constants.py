# --- Grid Structure ---
DEFAULT_NUM_RINGS = 12  # Outermost ring index; rings 1..11 hold maze cells
DEFAULT_SEED = None  # None = fresh randomness on every run
CELLS_IN_FIRST_RING = 6  # 60 degree cells, the first arc longer than its radius
FULL_CIRCLE_DEGREES = 360

# --- Cell Directions ---
DIR_CW = "CW"  # Clockwise
DIR_CCW = "CCW"  # Counter-Clockwise
DIR_IN = "IN"  # Inward (towards apex)
DIR_OUT = "OUT"  # Outward, same angle
DIR_OUT_CW = "OUT_CW"  # Outward, second cell where the next ring doubles

# --- Wall Kinds ---
WALL_RADIAL = "radial"  # Arc on the inner edge of a cell
WALL_ANGULAR = "angular"  # Spoke on the counter-clockwise edge of a cell

# --- Display Geometry ---
RING_SPACING = 10.0  # Radial distance between consecutive wall circles
NUM_ARC_SUBDIVISIONS_PER_CELL = 5  # How many chords approximate each arc wall
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons

# --- 2D STL Output ---
MAZE_2D_WALL_THICKNESS = 0.8
MAZE_2D_WALL_HEIGHT = 3.0
MAZE_2D_BASE_HEIGHT = MAZE_2D_WALL_HEIGHT / 3.0
MAZE_2D_CYLINDER_SECTIONS = 128  # Smoothness for the cylindrical base edge

# --- Visualization ---
VIS_FIGURE_SIZE = (10, 10)
VIS_DPI = 150
VIS_CONN_UNREACHABLE_COLOR = "lightgrey"
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 1.5
VIS_WALL_LINE_ALPHA = 0.9
VIS_SOLUTION_LINE_STYLE = "-"
VIS_SOLUTION_LINE_COLOR = "purple"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_ENTRY_MARKER = "o"
VIS_ENTRY_MFC = "lime"
VIS_EXIT_MARKER = "o"
VIS_EXIT_MFC = "red"
VIS_MARKER_MEC = "black"
VIS_MARKER_SIZE = 8

# --- Exchange Format ---
JSON_KEY_RINGS = "rings"
JSON_KEY_RADIAL_WALLS = "radialWalls"
JSON_KEY_ANGULAR_WALLS = "angularWalls"
JSON_KEY_RING = "ring"
JSON_KEY_CELL = "cell"

# --- Output ---
OUTPUT_DIR = "output"
