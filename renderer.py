# renderer.py

import math
import numpy as np

import constants as C

# --- Glyph classes consumed by the display layer ---
GLYPH_TRUNK = "trunk"
GLYPH_BRANCH = "branch"
GLYPH_FLOWER = "flower"
GLYPH_FOLIAGE = "foliage"
GLYPH_SOIL = "soil"
GLYPH_PLAIN = "plain"

def classify_glyph(glyph, stage):
    """
    Maps a rendered character to its semantic class so it can be coloured.
    '#' is a trichome sparkle once the plant flowers, and a thick branch before that.
    '.' is plain whatever the stage, since flowers and foliage both draw it.
    Returns None for empty cells and unknown glyphs.
    """
    if glyph == C.PLAIN_GLYPH:
        return GLYPH_PLAIN
    if glyph in C.TRUNK_GLYPH_SET:
        return GLYPH_TRUNK
    if glyph == "#":
        if stage in (C.STAGE_FLOWERING, C.STAGE_READY_TO_HARVEST):
            return GLYPH_FLOWER
        return GLYPH_BRANCH
    if glyph in C.BRANCH_GLYPHS:
        return GLYPH_BRANCH
    if glyph in C.FLOWER_GLYPH_SET:
        return GLYPH_FLOWER
    if glyph == C.FOLIAGE_GLYPH:
        return GLYPH_FOLIAGE
    if glyph == C.SOIL_GLYPH:
        return GLYPH_SOIL
    return None

def trunk_glyph(stage, frame):
    glyphs = C.TRUNK_GLYPHS[stage]
    return glyphs[frame % len(glyphs)]

def flower_glyph_for(stage, frame):
    """The animated flower glyph for this frame, or None for stages without flowers."""
    glyphs = C.FLOWER_GLYPHS.get(stage)
    if glyphs is None:
        return None
    return glyphs[frame % len(glyphs)]

def _in_grid(x, y):
    return 0 <= x < C.GRID_WIDTH and 0 <= y < C.GRID_HEIGHT

def _put_if_empty(grid, x, y, glyph):
    """First writer wins: never paint over an occupied cell."""
    if grid[y, x] == C.EMPTY_GLYPH:
        grid[y, x] = glyph

def _draw_trunk(grid, structure, day, glyph):
    center = C.TRUNK_COLUMN
    trunk_start = max(C.SOIL_ROW - structure.trunk_height(day), 0)
    active_splits = [s for s in structure.trunk_splits if s.split_day <= day]

    split_drawn = False
    for row in range(trunk_start, C.SOIL_ROW + 1):
        split = next((s for s in active_splits if s.split_level == C.SOIL_ROW - row), None)
        if split is None:
            grid[row, center] = glyph
            continue
        # Only the first split met while scanning down is drawn. Rows of later splits stay open.
        if split_drawn:
            continue

        grid[row, center] = glyph
        split_drawn = True
        offset = abs(split.angle)
        left, right = center - offset, center + offset
        if row > 0:
            grid[row - 1, left] = "\\" if split.angle < 0 else "/"
            grid[row - 1, right] = "/" if split.angle > 0 else "\\"
        # Both arms continue up to the top of the trunk.
        for up_row in range(row - 2, trunk_start - 1, -1):
            grid[up_row, left] = glyph
            grid[up_row, right] = glyph

def _branch_glyph(branch, i, length_int, show_flowers, tip_glyph, foliage_density):
    outward = "\\" if branch.direction < 0 else "/"
    inward = "/" if branch.direction < 0 else "\\"
    if i == length_int and show_flowers:
        return tip_glyph
    if i == 1:
        return outward
    if i == length_int:
        # Dense plants point their tips outward, sparse ones droop back.
        return outward if foliage_density > C.TIP_DENSITY_THRESHOLD else inward
    if branch.curve != 0 and i > 2:
        return "/" if branch.curve > 0 else "\\"
    return C.THICKNESS_GLYPHS.get(branch.thickness, C.THICKNESS_GLYPHS[1])

def _draw_branch(grid, structure, branch, day, show_flowers, tip_glyph, foliage_density):
    center = C.TRUNK_COLUMN
    row = C.SOIL_ROW - branch.level
    length_int = math.ceil(structure.branch_length(branch, day))

    for i in range(1, length_int + 1):
        x = center + i * branch.direction
        y = row
        if branch.curve != 0 and i > 2:
            y = max(0, min(row - ((i - 2) // 2) * branch.curve, C.SOIL_ROW))
        if not _in_grid(x, y):
            break
        glyph = _branch_glyph(branch, i, length_int, show_flowers, tip_glyph, foliage_density)
        _put_if_empty(grid, x, y, glyph)

    # --- Foliage near the tip ---
    if foliage_density > C.FOLIAGE_SPRINKLE_DENSITY and length_int >= C.MIN_DETAILED_BRANCH_LENGTH and row > 0:
        for offset in (1, 2):
            fx = center + (length_int - offset) * branch.direction
            fy = row - 1
            # Only the left half of the upper grid receives foliage.
            if 0 < fx < C.FOLIAGE_MAX_COLUMN and fy < C.FOLIAGE_MAX_ROW and foliage_density > C.FOLIAGE_DRAW_DENSITY:
                if show_flowers:
                    glyph = "*" if offset == 1 else "."
                else:
                    glyph = C.FOLIAGE_GLYPH
                _put_if_empty(grid, fx, fy, glyph)

    # --- Bifurcation into two short sub-branches ---
    is_bifurcating = branch.can_bifurcate and day >= branch.bifurcation_day
    if is_bifurcating and length_int >= C.MIN_DETAILED_BRANCH_LENGTH:
        split_point = max(length_int * 2 // 3, 2)
        base_x = center + split_point * branch.direction
        for sub_direction in (-1, 1):
            for i in (1, 2):
                x = base_x + i * sub_direction
                y = row - i // 2
                if not _in_grid(x, y):
                    continue
                if i == 2 and show_flowers:
                    glyph = tip_glyph
                else:
                    glyph = "\\" if sub_direction < 0 else "/"
                _put_if_empty(grid, x, y, glyph)

def render_plant(structure, day, stage, frame, show_flowers, flower_glyph):
    """
    Paints the plant for the given day into a fixed grid.
    Always returns exactly GRID_HEIGHT strings of exactly GRID_WIDTH characters.
    """
    grid = np.full((C.GRID_HEIGHT, C.GRID_WIDTH), C.EMPTY_GLYPH, dtype="<U1")
    tip_glyph = flower_glyph[:1] if flower_glyph else C.DEFAULT_FLOWER_GLYPH

    _draw_trunk(grid, structure, day, trunk_glyph(stage, frame))

    trunk_height = structure.trunk_height(day)
    foliage_density = structure.current_foliage_density(day)
    for branch in structure.visible_branches(day):
        # Branches do not appear before the trunk has grown to their row.
        if branch.level < 1 or branch.level > trunk_height:
            continue
        if structure.branch_length(branch, day) < C.MIN_VISIBLE_BRANCH_LENGTH:
            continue
        _draw_branch(grid, structure, branch, day, show_flowers, tip_glyph, foliage_density)

    # Soil is always visible, whatever landed on the bottom row.
    grid[C.SOIL_ROW, C.SOIL_START_COLUMN:C.SOIL_START_COLUMN + C.SOIL_LENGTH] = C.SOIL_GLYPH

    return ["".join(row).ljust(C.GRID_WIDTH)[:C.GRID_WIDTH] for row in grid]

def get_plant_ascii(stage, day, seed, frame, cache):
    """Renders the plant with the given seed, picking the animated flower glyph for its stage."""
    structure = cache.get_or_generate(seed)
    flower = flower_glyph_for(stage, frame)
    if flower is None:
        return render_plant(structure, day, stage, frame, False, "")
    return render_plant(structure, day, stage, frame, True, flower)
