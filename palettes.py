# palettes.py

import numpy as np
from matplotlib.colors import hsv_to_rgb

import constants as C

# --- Palette kinds ---
PALETTE_BASIC16 = "basic16"
PALETTE_TRUECOLOR = "truecolor"
PALETTE_ZEN = "zen"
PALETTE_RAINBOW = "rainbow"
PALETTE_MATRIX = "matrix"

_PALETTE_BY_MODE = {
    C.VISUAL_MODE_NORMAL: PALETTE_TRUECOLOR,
    C.VISUAL_MODE_ZEN: PALETTE_ZEN,
    C.VISUAL_MODE_RAINBOW: PALETTE_RAINBOW,
    C.VISUAL_MODE_MATRIX: PALETTE_MATRIX,
}

def next_visual_mode(mode):
    """normal -> zen -> rainbow -> matrix -> normal"""
    index = C.VISUAL_MODES.index(mode)
    return C.VISUAL_MODES[(index + 1) % len(C.VISUAL_MODES)]

def color_variants(seed):
    """Per-plant (flower, foliage, trunk) colour variants derived from the seed."""
    flower = seed % C.FLOWER_VARIANT_COUNT
    foliage = (seed // C.FLOWER_VARIANT_COUNT) % C.FOLIAGE_VARIANT_COUNT
    trunk = (seed // (C.FLOWER_VARIANT_COUNT * C.FOLIAGE_VARIANT_COUNT)) % C.TRUNK_VARIANT_COUNT
    return flower, foliage, trunk

def flower_intensity(stage, days_alive):
    if stage == C.STAGE_READY_TO_HARVEST:
        return C.FLOWER_INTENSITY_HARVEST
    if stage == C.STAGE_FLOWERING:
        if days_alive >= C.FLOWER_PEAK_DAY:
            return C.FLOWER_INTENSITY_PEAK
        if days_alive >= C.FLOWER_DEVELOPING_DAY:
            return C.FLOWER_INTENSITY_DEVELOPING
    return C.FLOWER_INTENSITY_EARLY

def breathing_factor(mode, frame):
    """Slow brightness pulse in [0.75, 1.0], faster in livelier modes."""
    return C.BREATH_CENTER + np.sin(frame * C.BREATH_SPEEDS[mode]) * C.BREATH_AMPLITUDE

def apply_breathing(color, factor):
    r, g, b = color
    return (int(min(r * factor, 255)), int(min(g * factor, 255)), int(min(b * factor, 255)))

def hsv_color(hue_degrees, saturation, value):
    """HSV (hue in degrees) to an 8-bit RGB tuple."""
    rgb = hsv_to_rgb(((hue_degrees % 360.0) / 360.0, saturation, value))
    return tuple(int(channel * 255) for channel in rgb)

def _clamp8(value):
    return int(max(0, min(value, 255)))

# =============================================================================
# --- BASIC 16 COLORS ---
# =============================================================================
_BASIC_FLOWER_BASE = ("magenta", "red", "yellow", "light_magenta", "cyan", "white")
_BASIC_FLOWER_BRIGHT = {
    "magenta": "light_magenta", "red": "light_red", "yellow": "light_yellow",
    "cyan": "light_cyan", "white": "white",
}
# The pink variant darkens while developing and brightens again at peak.
_BASIC_FLOWER_DEVELOPING = dict(_BASIC_FLOWER_BRIGHT, light_magenta="magenta")
_BASIC_FLOWER_PEAK = dict(_BASIC_FLOWER_BRIGHT, light_magenta="light_magenta")
_BASIC_FOLIAGE = ("green", "light_green", "green", "light_green")
_BASIC_TRUNK = ("yellow", "red", "dark_gray")

def _basic_flower(variant, intensity, stage):
    base = _BASIC_FLOWER_BASE[variant % C.FLOWER_VARIANT_COUNT]
    if intensity == C.FLOWER_INTENSITY_DEVELOPING:
        base = _BASIC_FLOWER_DEVELOPING[base]
    elif intensity in (C.FLOWER_INTENSITY_PEAK, C.FLOWER_INTENSITY_HARVEST):
        base = _BASIC_FLOWER_PEAK[base]
    return C.ANSI_COLORS[base]

def _basic_foliage(variant, health, water):
    return C.ANSI_COLORS[_BASIC_FOLIAGE[variant % C.FOLIAGE_VARIANT_COUNT]]

def _basic_trunk(variant, days):
    return C.ANSI_COLORS[_BASIC_TRUNK[variant % C.TRUNK_VARIANT_COUNT]]

def _basic_soil(moisture):
    return C.ANSI_COLORS["yellow"]

def _basic_water(level):
    if level < 20.0:
        return C.ANSI_COLORS["red"]
    if level < 40.0:
        return C.ANSI_COLORS["yellow"]
    return C.ANSI_COLORS["blue"]

def _basic_nutrient(level):
    if level < 30.0:
        return C.ANSI_COLORS["red"]
    if level < 50.0:
        return C.ANSI_COLORS["yellow"]
    return C.ANSI_COLORS["green"]

def _basic_tint(stage):
    return None

# =============================================================================
# --- TRUE COLOR (the normal RGB look) ---
# =============================================================================
# Variant -> (early, developing, peak, harvest)
_TRUE_FLOWERS = (
    ((180, 120, 200), (140, 80, 180), (120, 40, 160), (100, 20, 140)), # Deep purple
    ((255, 180, 100), (255, 140, 60), (240, 100, 40), (220, 60, 20)), # Orange
    ((255, 255, 150), (255, 220, 100), (240, 200, 60), (220, 180, 40)), # Gold
    ((255, 200, 220), (255, 150, 200), (240, 100, 180), (220, 60, 160)), # Pink
    ((150, 220, 230), (100, 200, 220), (60, 180, 200), (40, 160, 180)), # Teal
    ((240, 240, 220), (255, 255, 240), (255, 255, 255), (240, 240, 255)), # Frosty white
)
_INTENSITY_INDEX = {
    C.FLOWER_INTENSITY_EARLY: 0,
    C.FLOWER_INTENSITY_DEVELOPING: 1,
    C.FLOWER_INTENSITY_PEAK: 2,
    C.FLOWER_INTENSITY_HARVEST: 3,
}
_TRUE_FOLIAGE = ((60, 140, 60), (80, 180, 80), (100, 200, 100), (40, 120, 70))
_TRUE_TRUNK = ((139, 90, 60), (101, 67, 33), (70, 50, 30))
_TRUE_TINTS = {
    C.STAGE_SEEDLING: (5, 10, 5),
    C.STAGE_VEGETATIVE: (10, 20, 10),
    C.STAGE_PRE_FLOWER: (20, 20, 5),
    C.STAGE_FLOWERING: (15, 5, 20),
    C.STAGE_READY_TO_HARVEST: (25, 20, 5),
}

def _true_flower(variant, intensity, stage):
    return _TRUE_FLOWERS[variant % C.FLOWER_VARIANT_COUNT][_INTENSITY_INDEX[intensity]]

def _true_foliage(variant, health, water):
    r, g, b = _TRUE_FOLIAGE[variant % C.FOLIAGE_VARIANT_COUNT]

    # Stressed plants lose their green.
    if health < 40.0:
        r, g, b = 120, 100, 60
    elif health < 60.0:
        g = int(g * 0.7)
        r = _clamp8(r * 1.3)
    elif health < 80.0:
        g = int(g * 0.8)

    # Drought desaturates, plenty of water brightens.
    if water < 30.0:
        avg = (r + g + b) // 3
        r, g, b = (int(c * 0.6 + avg * 0.4) for c in (r, g, b))
    elif water > 80.0:
        r, g, b = (_clamp8(c * 1.1) for c in (r, g, b))
    return (r, g, b)

def _true_trunk(variant, days):
    r, g, b = _TRUE_TRUNK[variant % C.TRUNK_VARIANT_COUNT]
    if days <= 20:
        # Young green stem
        g = _clamp8(g * 1.3)
        b = int(b * 0.9)
    elif days <= 50:
        r, g = _clamp8(r + 10), _clamp8(g - 10)
    else:
        # Woody bark
        r, g = _clamp8(r + 20), _clamp8(g - 20)
    return (r, g, b)

def _true_soil(moisture):
    if moisture > 70.0:
        return (80, 60, 40)
    if moisture > 40.0:
        return (120, 90, 60)
    return (160, 130, 90)

def _true_water(level):
    """Red (empty) -> yellow -> cyan -> deep blue (full)."""
    level = float(np.clip(level, 0.0, 100.0))
    if level < 20.0:
        return (255, int(60.0 * level / 20.0), 0)
    if level < 40.0:
        t = (level - 20.0) / 20.0
        return (255, int(60.0 + 195.0 * t), 0)
    if level < 60.0:
        t = (level - 40.0) / 20.0
        return (int(255.0 * (1.0 - t)), 255, int(255.0 * t))
    t = (level - 60.0) / 40.0
    return (0, int(255.0 * (1.0 - t * 0.7)), 255)

def _true_nutrient(level):
    """Red (empty) -> yellow -> yellow-green -> green (full)."""
    level = float(np.clip(level, 0.0, 100.0))
    if level < 30.0:
        return (255, int(120.0 * level / 30.0), 0)
    if level < 50.0:
        t = (level - 30.0) / 20.0
        return (255, int(120.0 + 135.0 * t), 0)
    if level < 75.0:
        t = (level - 50.0) / 25.0
        return (int(255.0 * (1.0 - t * 0.5)), 255, int(100.0 * t))
    t = (level - 75.0) / 25.0
    return (int(127.0 * (1.0 - t)), 255, int(100.0 + 55.0 * t))

def _true_tint(stage):
    return _TRUE_TINTS[stage]

# =============================================================================
# --- ZEN GARDEN ---
# =============================================================================
_ZEN_FLOWERS = ((200, 200, 220), (220, 200, 210), (230, 220, 210), (240, 230, 220))

def _zen_flower(variant, intensity, stage):
    return _ZEN_FLOWERS[_INTENSITY_INDEX[intensity]]

def _zen_foliage(variant, health, water):
    if health > 70.0:
        return (140, 160, 140)
    if health > 40.0:
        return (160, 170, 150)
    return (180, 180, 170)

def _zen_trunk(variant, days):
    return (160, 140, 120)

def _zen_soil(moisture):
    return (130, 120, 110) if moisture > 60.0 else (180, 170, 150)

def _zen_water(level):
    t = float(np.clip(level / 100.0, 0.0, 1.0))
    return (int(180.0 + 40.0 * t), int(200.0 + 30.0 * t), int(220.0 + 20.0 * t))

def _zen_nutrient(level):
    t = float(np.clip(level / 100.0, 0.0, 1.0))
    return (int(180.0 - 40.0 * t), int(200.0 - 20.0 * t), int(160.0 - 20.0 * t))

def _zen_tint(stage):
    return (10, 12, 10)

# =============================================================================
# --- RAINBOW ---
# =============================================================================
_RAINBOW_FLOWER_SV = {
    C.FLOWER_INTENSITY_EARLY: (0.5, 0.7),
    C.FLOWER_INTENSITY_DEVELOPING: (0.7, 0.9),
    C.FLOWER_INTENSITY_PEAK: (1.0, 1.0),
    C.FLOWER_INTENSITY_HARVEST: (1.0, 1.0),
}

def _rainbow_flower(variant, intensity, stage):
    saturation, value = _RAINBOW_FLOWER_SV[intensity]
    return hsv_color(variant * 60.0, saturation, value)

def _rainbow_foliage(variant, health, water):
    return hsv_color(120.0 + variant * 90.0, 0.6, 0.8)

def _rainbow_trunk(variant, days):
    return hsv_color(30.0 + variant * 120.0, 0.5, 0.6)

def _rainbow_soil(moisture):
    return hsv_color(30.0, 0.5, float(np.clip(0.2 + moisture / 100.0 * 0.4, 0.0, 1.0)))

def _rainbow_water(level):
    return hsv_color(180.0 + level / 100.0 * 60.0, 0.8, 0.9)

def _rainbow_nutrient(level):
    return hsv_color(60.0 + level / 100.0 * 60.0, 0.7, 0.9)

def _rainbow_tint(stage):
    return (15, 10, 20)

# =============================================================================
# --- MATRIX ---
# =============================================================================
_MATRIX_FLOWERS = ((0, 180, 0), (0, 220, 0), (0, 255, 0), (100, 255, 100))

def _matrix_flower(variant, intensity, stage):
    return _MATRIX_FLOWERS[_INTENSITY_INDEX[intensity]]

def _matrix_foliage(variant, health, water):
    return (0, _clamp8(120.0 + health / 100.0 * 135.0), 0)

def _matrix_trunk(variant, days):
    return (0, 60 + min(days, 90) // 3, 0)

def _matrix_soil(moisture):
    return (0, _clamp8(20.0 + moisture * 0.5), 0)

def _matrix_water(level):
    return (0, _clamp8(100.0 + level * 1.55), 0)

def _matrix_nutrient(level):
    return (50, _clamp8(150.0 + level * 1.05), 0)

def _matrix_tint(stage):
    return (0, 5, 0)

# Palette kind -> (flower, foliage, trunk, soil, water, nutrient, tint)
_PALETTE_FUNCTIONS = {
    PALETTE_BASIC16: (_basic_flower, _basic_foliage, _basic_trunk, _basic_soil, _basic_water, _basic_nutrient, _basic_tint),
    PALETTE_TRUECOLOR: (_true_flower, _true_foliage, _true_trunk, _true_soil, _true_water, _true_nutrient, _true_tint),
    PALETTE_ZEN: (_zen_flower, _zen_foliage, _zen_trunk, _zen_soil, _zen_water, _zen_nutrient, _zen_tint),
    PALETTE_RAINBOW: (_rainbow_flower, _rainbow_foliage, _rainbow_trunk, _rainbow_soil, _rainbow_water, _rainbow_nutrient, _rainbow_tint),
    PALETTE_MATRIX: (_matrix_flower, _matrix_foliage, _matrix_trunk, _matrix_soil, _matrix_water, _matrix_nutrient, _matrix_tint),
}

class Palette:
    """
    The colour scheme for one visual mode. Without RGB support every mode
    falls back to the 16 color palette.
    """
    def __init__(self, visual_mode=C.VISUAL_MODE_NORMAL, supports_rgb=True):
        self.visual_mode = visual_mode
        self.kind = _PALETTE_BY_MODE[visual_mode] if supports_rgb else PALETTE_BASIC16
        (self._flower, self._foliage, self._trunk, self._soil,
         self._water, self._nutrient, self._tint) = _PALETTE_FUNCTIONS[self.kind]

    @property
    def supports_rgb(self):
        return self.kind != PALETTE_BASIC16

    def flower_color(self, variant, intensity, stage):
        return self._flower(variant, intensity, stage)

    def foliage_color(self, variant, health, water):
        """`health` is a percentage (see HEALTH_PERCENT)."""
        return self._foliage(variant, health, water)

    def trunk_color(self, variant, days):
        return self._trunk(variant, days)

    def soil_color(self, moisture):
        return self._soil(moisture)

    def water_color(self, level):
        return self._water(level)

    def nutrient_color(self, level):
        return self._nutrient(level)

    def background_tint(self, stage):
        """RGB tint for the plant panel, or None when the palette has none."""
        return self._tint(stage)
