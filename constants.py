# constants.py

# =============================================================================
# --- SIMULATION & PERFORMANCE SETTINGS ---
# =============================================================================
CLOCK_TICK_RATE = 20 # Frames per second of the host loop (one tick every 50ms)
MILLISECONDS_PER_SECOND = 1000.0
MAX_REAL_DELTA_SECONDS = 0.25 # Cap on real time per frame to avoid a "spiral of death"
PROFILER_PRINT_LINE_COUNT = 20
SECONDS_PER_HOUR = 3600.0
HOURS_PER_DAY = 24.0
MINUTES_PER_HOUR = 60

# How many simulated hours pass per real hour. A full 90 day cycle
# takes roughly 6.5 real seconds at speed level 0.
TIME_DILATION = 130000.0

# Speed levels selectable with the number keys, applied on top of TIME_DILATION.
TIME_MULTIPLIERS = {
    0: 1.0, # Normal (~6.5 s per cycle)
    1: 0.05, # ~2 min per cycle
    2: 0.25, # ~26 s per cycle
    3: 0.5, # ~13 s per cycle
    4: 2.0,
    5: 4.0
}

# =============================================================================
# --- DETERMINISTIC SEQUENCE GENERATOR ---
# =============================================================================
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK_64 = (1 << 64) - 1
LCG_OUTPUT_DIVISOR = 65536
LCG_OUTPUT_MODULUS = 32768

# =============================================================================
# --- PLANT STRUCTURE GENERATION ---
# =============================================================================
PHENOTYPE_TALL = "tall" # Sativa-like: tall, thin, spaced out
PHENOTYPE_BUSHY = "bushy" # Indica-like: short, dense, many branches
PHENOTYPE_BALANCED = "balanced" # Hybrid
PHENOTYPES = (PHENOTYPE_TALL, PHENOTYPE_BUSHY, PHENOTYPE_BALANCED)

# Per phenotype: (branch density, foliage density, base max height, growth rate in rows/day)
PHENOTYPE_BODY_PLAN = {
    PHENOTYPE_TALL: (0.6, 0.4, 20, 0.25), # 20-24 rows, reaches max ~96 days
    PHENOTYPE_BUSHY: (1.0, 0.9, 12, 0.22), # 12-16 rows, reaches max ~64 days
    PHENOTYPE_BALANCED: (0.8, 0.7, 16, 0.23), # 16-20 rows, reaches max ~80 days
}
MAX_HEIGHT_SPREAD = 5

# Per phenotype: (minimum primary branches, spread)
PRIMARY_BRANCH_COUNT = {
    PHENOTYPE_TALL: (15, 10), # 15-24
    PHENOTYPE_BUSHY: (25, 15), # 25-39
    PHENOTYPE_BALANCED: (20, 12), # 20-31
}

# Lowest attachment row for primary branches.
PRIMARY_BRANCH_MIN_LEVEL = {
    PHENOTYPE_TALL: 1,
    PHENOTYPE_BUSHY: 2,
    PHENOTYPE_BALANCED: 2,
}

# How many days later a branch appears per row below the top of the plant.
BRANCH_DAYS_PER_LEVEL = {
    PHENOTYPE_TALL: 1.2,
    PHENOTYPE_BUSHY: 0.8,
    PHENOTYPE_BALANCED: 1.0,
}
BRANCH_BASE_START_DAY = 4 # First day a branch may appear (trunk is ~4 rows tall)
BRANCH_START_JITTER_DAYS = 3

# Per phenotype: (minimum primary length, spread) in characters
PRIMARY_BRANCH_LENGTH = {
    PHENOTYPE_TALL: (6, 8), # 6-13
    PHENOTYPE_BUSHY: (8, 6), # 8-13
    PHENOTYPE_BALANCED: (6, 8), # 6-13
}

PRIMARY_BIFURCATION_ODDS = 3 # 1 in 3
PRIMARY_BIFURCATION_DELAY_DAYS = (8, 8) # 8-15 days after the branch starts
SECONDARY_BIFURCATION_ODDS = 5 # 1 in 5
SECONDARY_BIFURCATION_DELAY_DAYS = (10, 8) # 10-17 days after the branch starts
NEVER_BIFURCATES_DAY = 999

# Secondary branches per primary branch.
SECONDARY_BRANCH_RATIO = {
    PHENOTYPE_TALL: 0.5,
    PHENOTYPE_BUSHY: 0.8,
    PHENOTYPE_BALANCED: 0.6,
}
SECONDARY_START_DELAY_DAYS = (5, 5) # 5-9 days after the parent starts
SECONDARY_BRANCH_LENGTH = (4, 6) # 4-9 characters

TRUNK_SPLIT_DAY = (20, 30) # Days 20-49
TRUNK_SPLIT_LEVEL = (4, 4) # Rows 4-7
TRUNK_SPLIT_MAX_ANGLE = 2

# Branch growth curve: a branch reaches full length after max_length * this many days.
BRANCH_GROWTH_DAYS_PER_CHAR = 3.0
BRANCH_SIGMOID_STEEPNESS = 8.0
FOLIAGE_MATURITY_DAYS = 90.0

# =============================================================================
# --- ASCII RENDERING ---
# =============================================================================
GRID_WIDTH = 70
GRID_HEIGHT = 28
SOIL_ROW = GRID_HEIGHT - 1
TRUNK_COLUMN = 35
EMPTY_GLYPH = " "

SOIL_GLYPH = "~"
SOIL_START_COLUMN = 16
SOIL_LENGTH = 38

FOLIAGE_GLYPH = ":"
FOLIAGE_SPRINKLE_DENSITY = 0.5 # Density above which a branch tip may grow extra foliage
FOLIAGE_DRAW_DENSITY = 0.6 # Density above which the extra foliage is actually drawn
FOLIAGE_MAX_COLUMN = 34
FOLIAGE_MAX_ROW = 14
TIP_DENSITY_THRESHOLD = 0.6 # Dense plants point their branch tips outward
MIN_VISIBLE_BRANCH_LENGTH = 0.5
MIN_DETAILED_BRANCH_LENGTH = 3 # Foliage and bifurcations need at least this many chars

DEFAULT_FLOWER_GLYPH = "*"
THICKNESS_GLYPHS = {1: "_", 2: "=", 3: "#"}
BRANCH_GLYPHS = frozenset("/\\_=#")

# =============================================================================
# --- GROWTH STAGES ---
# =============================================================================
STAGE_SEEDLING = "seedling"
STAGE_VEGETATIVE = "vegetative"
STAGE_PRE_FLOWER = "pre_flower"
STAGE_FLOWERING = "flowering"
STAGE_READY_TO_HARVEST = "ready_to_harvest"
STAGES = (STAGE_SEEDLING, STAGE_VEGETATIVE, STAGE_PRE_FLOWER, STAGE_FLOWERING, STAGE_READY_TO_HARVEST)

STAGE_DISPLAY_NAMES = {
    STAGE_SEEDLING: "Seedling",
    STAGE_VEGETATIVE: "Vegetative",
    STAGE_PRE_FLOWER: "Pre-Flower",
    STAGE_FLOWERING: "Flowering",
    STAGE_READY_TO_HARVEST: "Ready to Harvest",
}

# Inclusive (first day, last day) bands. Anything outside is ready to harvest.
STAGE_DAY_BANDS = (
    (STAGE_SEEDLING, 1, 10),
    (STAGE_VEGETATIVE, 11, 40),
    (STAGE_PRE_FLOWER, 41, 48),
    (STAGE_FLOWERING, 49, 85),
)

# Trunk glyphs cycle with the animation frame.
TRUNK_GLYPHS = {
    STAGE_SEEDLING: "|!",
    STAGE_VEGETATIVE: "|!I",
    STAGE_PRE_FLOWER: "|!I║",
    STAGE_FLOWERING: "|!I║",
    STAGE_READY_TO_HARVEST: "I║",
}
TRUNK_GLYPH_SET = frozenset("|!I║")

# Flower glyph animation per stage. Stages without an entry show no flowers.
FLOWER_GLYPHS = {
    STAGE_PRE_FLOWER: ".*. .*. ", # Gentle appearance of small flowers
    STAGE_FLOWERING: "ooOO@@OOoo..", # Pulsing buds
    STAGE_READY_TO_HARVEST: "@#@*#@*#", # Trichome sparkle
}
FLOWER_GLYPH_SET = frozenset("*oO@")
PLAIN_GLYPH = "." # Shared by flower frames and the foliage sprinkle, drawn in the default colour

# =============================================================================
# --- LIGHT CYCLE & HEALTH ---
# =============================================================================
LIGHT_CYCLE_VEG = "veg_18_6" # 18h on / 6h off
LIGHT_CYCLE_FLOWER = "flower_12_12" # 12h on / 12h off
LIGHT_CYCLE_SWITCH_DAY = 45
LIGHT_CYCLE_DISPLAY_NAMES = {LIGHT_CYCLE_VEG: "18/6 (Veg)", LIGHT_CYCLE_FLOWER: "12/12 (Flower)"}

HEALTH_EXCELLENT = "excellent"
HEALTH_GOOD = "good"
HEALTH_FAIR = "fair"
HEALTH_POOR = "poor"
HEALTH_CRITICAL = "critical"

WATER_OPTIMAL_RANGE = (40.0, 80.0)
NUTRIENT_OPTIMAL_RANGE = (50.0, 80.0)
WATER_EXCELLENT_RANGE = (50.0, 70.0)
NUTRIENT_EXCELLENT_RANGE = (60.0, 75.0)
WATER_CRITICAL_LOW = 10.0
WATER_CRITICAL_HIGH = 95.0
NUTRIENT_CRITICAL_LOW = 20.0
NUTRIENT_CRITICAL_HIGH = 95.0

# Canopy growth multiplier per health tier: (base, share recovered by resilience)
HEALTH_CANOPY_FACTORS = {
    HEALTH_EXCELLENT: (1.0, 0.0),
    HEALTH_GOOD: (1.0, 0.0),
    HEALTH_FAIR: (0.85, 0.15),
    HEALTH_POOR: (0.65, 0.35),
    HEALTH_CRITICAL: (0.4, 0.6),
}

# Percent used for palette shading.
HEALTH_PERCENT = {
    HEALTH_EXCELLENT: 100.0,
    HEALTH_GOOD: 80.0,
    HEALTH_FAIR: 60.0,
    HEALTH_POOR: 40.0,
    HEALTH_CRITICAL: 20.0,
}

# =============================================================================
# --- RESOURCES ---
# =============================================================================
# Drain per simulated hour by stage. Stages not listed use the default.
WATER_DRAIN_PER_HOUR = {STAGE_VEGETATIVE: 1.0, STAGE_FLOWERING: 0.8}
WATER_DRAIN_DEFAULT = 0.5
NUTRIENT_DRAIN_PER_HOUR = {STAGE_VEGETATIVE: 0.8, STAGE_FLOWERING: 1.0}
NUTRIENT_DRAIN_DEFAULT = 0.4

# The room tops itself up so an unattended plant never dies.
WATER_TOP_UP_THRESHOLD = 40.0
WATER_TOP_UP_AMOUNT = 50.0
NUTRIENT_TOP_UP_THRESHOLD = 50.0
NUTRIENT_TOP_UP_AMOUNT = 40.0
RESOURCE_MAX = 100.0

# =============================================================================
# --- ENVIRONMENT ---
# =============================================================================
CO2_BASE = 80.0
CO2_PER_CANOPY = 0.2
LIGHT_ABSORPTION_BASE = {
    STAGE_SEEDLING: 40.0,
    STAGE_VEGETATIVE: 60.0,
    STAGE_PRE_FLOWER: 75.0,
    STAGE_FLOWERING: 85.0,
    STAGE_READY_TO_HARVEST: 85.0,
}
LIGHT_PER_CANOPY = 0.1
TEMPERATURE_BASE_C = 24.0
TEMPERATURE_SWING_C = 2.0
TEMPERATURE_DAY_FREQUENCY = 0.7
TEMPERATURE_RANGE_C = (20.0, 28.0)
HUMIDITY_BASE = 50.0
HUMIDITY_PER_WATER = 0.2
HUMIDITY_MAX = 80.0
ROOT_MATURITY_DAYS = 90.0

# Canopy density per stage: (base, growth per day alive), scaled by the genetic growth rate.
CANOPY_BASE = {
    STAGE_SEEDLING: (15.0, 0.0),
    STAGE_VEGETATIVE: (40.0, 0.8),
    STAGE_PRE_FLOWER: (60.0, 0.6),
    STAGE_FLOWERING: (80.0, 0.2),
    STAGE_READY_TO_HARVEST: (80.0, 0.2),
}
METRIC_MAX = 100.0

# Thresholds used to colour environment readouts.
TEMP_OPTIMAL_RANGE_C = (20.0, 28.0)
TEMP_ACCEPTABLE_RANGE_C = (18.0, 30.0)
HUMIDITY_OPTIMAL_RANGE = (50.0, 70.0)
HUMIDITY_ACCEPTABLE_RANGE = (40.0, 80.0)
GROWTH_GOOD_THRESHOLD = 60.0
GROWTH_FAIR_THRESHOLD = 30.0

# =============================================================================
# --- STRESS & CARE HISTORY ---
# =============================================================================
STRESS_LOW_WATER = "low_water"
STRESS_HIGH_WATER = "high_water"
STRESS_LOW_NUTRIENTS = "low_nutrients"
STRESS_NUTRIENT_BURN = "nutrient_burn"
STRESS_WRONG_LIGHT_CYCLE = "wrong_light_cycle"

SEVERITY_MINOR = "minor"
SEVERITY_MODERATE = "moderate"
SEVERITY_SEVERE = "severe"

STRESS_WATER_LOW = 20.0
STRESS_WATER_HIGH = 90.0
STRESS_NUTRIENT_LOW = 30.0
STRESS_NUTRIENT_HIGH = 90.0
STRESS_DEDUP_WINDOW_DAYS = 5 # Same cause is not recorded twice within this many days
STRESS_DEDUP_LOOKBACK = 10 # Only the most recent events are checked

# =============================================================================
# --- PLANTING & HARVEST ---
# =============================================================================
INITIAL_DAY = 1
INITIAL_WATER_LEVEL = 60.0
INITIAL_NUTRIENT_LEVEL = 60.0
INITIAL_CO2_LEVEL = 80.0
INITIAL_LIGHT_ABSORPTION = 50.0
INITIAL_TEMPERATURE_C = 24.0
INITIAL_HUMIDITY = 60.0
INITIAL_ROOT_DEVELOPMENT = 10.0
INITIAL_CANOPY_DENSITY = 5.0
UNKNOWN_STRAIN_NAME = "Unknown Strain"

AUTO_HARVEST_DAY = 96 # 10 days after the plant becomes ready

CARE_QUALITY_FLOOR = 0.7
STRESS_PENALTY_PER_EVENT = 0.02
STRESS_PENALTY_CAP = 0.3
CANNABINOID_BASE_MULTIPLIER = 0.7
CANNABINOID_QUALITY_SHARE = 0.3

# =============================================================================
# --- GENETICS ---
# =============================================================================
STRAINS_FILE_NAME = "strains.json"
STRAINS_PATH_ENV_VAR = "GROWROOM_STRAINS"

YIELD_RANGE_BY_CLASS = {"High": (100.0, 150.0), "Medium": (70.0, 110.0), "Low": (50.0, 80.0)}
YIELD_RANGE_DEFAULT = (50.0, 150.0)
RESILIENCE_RANGE_BY_DIFFICULTY = {"Easy": (0.7, 1.0), "Medium": (0.4, 0.7), "Hard": (0.0, 0.4)}
RESILIENCE_RANGE_DEFAULT = (0.0, 1.0)
QUALITY_RANGE_BY_TYPE = {"Sativa": (80.0, 100.0), "Indica": (80.0, 100.0), "Hybrid": (85.0, 100.0)}
QUALITY_RANGE_DEFAULT = (70.0, 100.0)
THC_RANGE_DEFAULT = (15.0, 25.0)
CBD_RANGE_DEFAULT = (0.1, 1.0)
GROWTH_RATE_RANGE = (0.9, 1.1)

# =============================================================================
# --- PERSISTENCE ---
# =============================================================================
SAVE_PATH_ENV_VAR = "GROWROOM_SAVE_PATH"
SAVE_DIR = "~/.local/share/growroom"
SAVE_FILE_NAME = "save.json"
SAVE_JSON_INDENT = 2

# =============================================================================
# --- UI, SCREENS & COLORS ---
# =============================================================================
SCREEN_GROWING_ROOM = "growing_room"
SCREEN_STATS = "stats"

SCREEN_WIDTH = 1100
SCREEN_HEIGHT = 900
UI_FONT_NAME = "dejavusansmono" # Monospace font with box-drawing glyphs
UI_FONT_SIZE = 16
UI_MARGIN = 12
UI_HEADER_HEIGHT = 34
UI_GAUGE_HEIGHT = 22
UI_GAUGE_WIDTH = 260
UI_GAUGE_SPACING = 30
UI_SIDEBAR_X = 750
UI_RECENT_HARVEST_COUNT = 5

COLOR_BACKGROUND = (10, 0, 20)
COLOR_WHITE = (255, 255, 255)
COLOR_GRAY = (128, 128, 128)
COLOR_DARK_GRAY = (50, 50, 50)
COLOR_HEADER = (0, 205, 0)
COLOR_GAUGE_BG = (40, 40, 40)

# Named ANSI colors as RGB, used by the 16 color palette.
ANSI_COLORS = {
    "black": (0, 0, 0),
    "red": (205, 49, 49),
    "green": (13, 188, 121),
    "yellow": (229, 229, 16),
    "blue": (36, 114, 200),
    "magenta": (188, 63, 188),
    "cyan": (17, 168, 205),
    "white": (229, 229, 229),
    "dark_gray": (102, 102, 102),
    "light_red": (241, 76, 76),
    "light_green": (35, 209, 139),
    "light_yellow": (245, 245, 67),
    "light_magenta": (214, 112, 214),
    "light_cyan": (41, 184, 219),
}

VISUAL_MODE_NORMAL = "normal"
VISUAL_MODE_ZEN = "zen"
VISUAL_MODE_RAINBOW = "rainbow"
VISUAL_MODE_MATRIX = "matrix"
VISUAL_MODES = (VISUAL_MODE_NORMAL, VISUAL_MODE_ZEN, VISUAL_MODE_RAINBOW, VISUAL_MODE_MATRIX)
VISUAL_MODE_DISPLAY_NAMES = {
    VISUAL_MODE_NORMAL: "Normal",
    VISUAL_MODE_ZEN: "Zen Garden",
    VISUAL_MODE_RAINBOW: "Rainbow",
    VISUAL_MODE_MATRIX: "Matrix",
}
BREATH_SPEEDS = {
    VISUAL_MODE_NORMAL: 0.05,
    VISUAL_MODE_ZEN: 0.02, # Slow, calming
    VISUAL_MODE_RAINBOW: 0.08,
    VISUAL_MODE_MATRIX: 0.06,
}
BREATH_CENTER = 0.875
BREATH_AMPLITUDE = 0.125

FLOWER_INTENSITY_EARLY = "early"
FLOWER_INTENSITY_DEVELOPING = "developing"
FLOWER_INTENSITY_PEAK = "peak"
FLOWER_INTENSITY_HARVEST = "harvest"
FLOWER_DEVELOPING_DAY = 61
FLOWER_PEAK_DAY = 71

# Color variants derived from the plant seed.
FLOWER_VARIANT_COUNT = 6
FOLIAGE_VARIANT_COUNT = 4
TRUNK_VARIANT_COUNT = 3

# Animated decorations for the header and gauges.
BORDER_DECORATIONS = "~~--"
WATER_DROPS = ".o.O.o. "
NUTRIENT_SPARKLES = "*+*x*+*X*x* "

# =============================================================================
# --- GRAPHING ---
# =============================================================================
GRAPH_FIGURE_SIZE = (12, 7)
GRAPH_RESOURCES_FILE = "plant_resources_graph.png"
GRAPH_ENVIRONMENT_FILE = "plant_environment_graph.png"

# =============================================================================
# --- GAUGES ---
# =============================================================================
# Health gauge: (fill percent, ANSI colour name, label)
HEALTH_GAUGE = {
    HEALTH_EXCELLENT: (100, "green", "Excellent"),
    HEALTH_GOOD: (75, "green", "Good"),
    HEALTH_FAIR: (50, "yellow", "Fair"),
    HEALTH_POOR: (25, "light_red", "Poor"),
    HEALTH_CRITICAL: (10, "red", "CRITICAL"),
}

# Growth progress gauge: stage -> (day the next stage begins, label)
NEXT_STAGE = {
    STAGE_SEEDLING: (11, "Vegetative"),
    STAGE_VEGETATIVE: (41, "Pre-Flower"),
    STAGE_PRE_FLOWER: (49, "Flowering"),
    STAGE_FLOWERING: (86, "Harvest"),
    STAGE_READY_TO_HARVEST: (86, "Ready!"),
}
