#ui.py

import numpy as np
import pygame

import constants as C
import palettes
from renderer import classify_glyph, GLYPH_TRUNK, GLYPH_BRANCH, GLYPH_FLOWER, GLYPH_FOLIAGE, GLYPH_SOIL, GLYPH_PLAIN

# --- Pure helpers (no display needed) ---

def plant_glyph_colors(plant, palette, visual_mode, frame):
    """The colour of each glyph class for this plant and frame."""
    flower_variant, foliage_variant, trunk_variant = palettes.color_variants(plant.seed)
    breath = palettes.breathing_factor(visual_mode, frame) if palette.supports_rgb else 1.0

    foliage = palette.foliage_color(foliage_variant, C.HEALTH_PERCENT[plant.health], plant.water_level)
    foliage = palettes.apply_breathing(foliage, breath)
    intensity = palettes.flower_intensity(plant.stage, plant.days_alive)
    flower = palettes.apply_breathing(palette.flower_color(flower_variant, intensity, plant.stage), breath)

    return {
        GLYPH_TRUNK: palette.trunk_color(trunk_variant, plant.days_alive),
        # Seedlings are plain green before the canopy colours come in.
        GLYPH_BRANCH: C.ANSI_COLORS["green"] if plant.stage == C.STAGE_SEEDLING else foliage,
        # Flowers only take their own colour once the plant is flowering.
        GLYPH_FLOWER: flower if plant.stage in (C.STAGE_FLOWERING, C.STAGE_READY_TO_HARVEST) else foliage,
        GLYPH_FOLIAGE: foliage,
        GLYPH_SOIL: palette.soil_color(plant.water_level),
        GLYPH_PLAIN: C.ANSI_COLORS["white"],
    }

def color_runs(line, stage, glyph_colors):
    """Splits a rendered row into (start column, text, colour) runs. Uncoloured runs are skipped."""
    runs = []
    start, current_color = 0, None
    for column, glyph in enumerate(line + C.EMPTY_GLYPH):
        glyph_class = classify_glyph(glyph, stage) if column < len(line) else None
        color = glyph_colors.get(glyph_class)
        if color != current_color:
            if current_color is not None:
                runs.append((start, line[start:column], current_color))
            start, current_color = column, color
    return runs

def stage_progress(plant):
    """Returns (label of the next stage, percent towards it, days left)."""
    next_day, label = C.NEXT_STAGE[plant.stage]
    if plant.stage == C.STAGE_READY_TO_HARVEST:
        return label, 100, 0
    percent = int(min(plant.days_alive / next_day * 100.0, 100.0))
    return label, percent, max(next_day - plant.days_alive, 0)

def harvest_summary(history):
    """Aggregate statistics over all harvests, or None if there are none yet."""
    if not history:
        return None
    weights = np.array([h.weight_grams for h in history])
    return {
        "count": len(history),
        "total_yield": float(weights.sum()),
        "average_yield": float(weights.mean()),
        "average_quality": float(np.mean([h.quality_score for h in history])),
        "average_thc": float(np.mean([h.thc_percent for h in history])),
        "average_cbd": float(np.mean([h.cbd_percent for h in history])),
        "best_yield": float(weights.max()),
    }

def _range_color(value, optimal, acceptable, good="green"):
    if optimal[0] <= value <= optimal[1]:
        return C.ANSI_COLORS[good]
    if acceptable[0] <= value <= acceptable[1]:
        return C.ANSI_COLORS["yellow"]
    return C.ANSI_COLORS["red"]

# --- Drawing ---

def draw_text(screen, font, text, pos, color=C.COLOR_WHITE):
    surface = font.render(text, True, color)
    screen.blit(surface, pos)
    return surface.get_height()

def draw_gauge(screen, font, x, y, title, percent, color, label):
    """A titled horizontal bar filled to `percent`."""
    draw_text(screen, font, title, (x, y), C.COLOR_GRAY)
    bar_x = x + C.UI_GAUGE_WIDTH // 2
    bar_width = C.UI_GAUGE_WIDTH
    fill = bar_width * max(0.0, min(percent, 100.0)) / 100.0
    pygame.draw.rect(screen, C.COLOR_GAUGE_BG, (bar_x, y, bar_width, C.UI_GAUGE_HEIGHT))
    pygame.draw.rect(screen, color, (bar_x, y, fill, C.UI_GAUGE_HEIGHT))
    draw_text(screen, font, label, (bar_x + bar_width + C.UI_MARGIN, y))

def draw_plant(screen, font, room, origin):
    """Draws the coloured ASCII plant with its top-left corner at `origin`."""
    plant = room.current_plant
    char_width, char_height = font.size("M")
    x0, y0 = origin

    tint = room.palette.background_tint(plant.stage)
    if tint is not None:
        pygame.draw.rect(screen, tint, (x0, y0, char_width * C.GRID_WIDTH, char_height * C.GRID_HEIGHT))

    glyph_colors = plant_glyph_colors(plant, room.palette, room.visual_mode, room.animation_frame)
    for row, line in enumerate(room.plant_ascii()):
        for column, text, color in color_runs(line, plant.stage, glyph_colors):
            screen.blit(font.render(text, True, color), (x0 + column * char_width, y0 + row * char_height))

def draw_header(screen, font, room, time_manager):
    plant = room.current_plant
    frame = room.animation_frame
    decoration = C.BORDER_DECORATIONS[frame % len(C.BORDER_DECORATIONS)]
    header = (f"{decoration} Grow Room - Day {plant.days_alive} | {C.STAGE_DISPLAY_NAMES[plant.stage]} | "
              f"{C.VISUAL_MODE_DISPLAY_NAMES[room.visual_mode]} | {time_manager.get_display_string()} {decoration}")
    draw_text(screen, font, header, (C.UI_MARGIN, C.UI_MARGIN), C.COLOR_HEADER)

def draw_gauges(screen, font, room, y):
    plant = room.current_plant
    palette = room.palette
    frame = room.animation_frame
    x = C.UI_MARGIN
    step = C.UI_GAUGE_SPACING

    drops = C.WATER_DROPS[frame % len(C.WATER_DROPS)]
    sparkles = C.NUTRIENT_SPARKLES[frame % len(C.NUTRIENT_SPARKLES)]
    draw_gauge(screen, font, x, y, f"Water {drops}", plant.water_level,
               palette.water_color(plant.water_level), f"{plant.water_level:.0f}%")
    draw_gauge(screen, font, x, y + step, f"NPK {sparkles}", plant.nutrient_level,
               palette.nutrient_color(plant.nutrient_level), f"{plant.nutrient_level:.0f}%")

    label, percent, days_left = stage_progress(plant)
    draw_gauge(screen, font, x, y + 2 * step, f"-> {label}", percent, C.ANSI_COLORS["cyan"], f"{days_left}d left")

    low, high = C.TEMP_OPTIMAL_RANGE_C
    temp_percent = (plant.temperature - low) / (high - low) * 100.0
    draw_gauge(screen, font, x, y + 3 * step, "Temperature", temp_percent,
               _range_color(plant.temperature, C.TEMP_OPTIMAL_RANGE_C, C.TEMP_ACCEPTABLE_RANGE_C),
               f"{plant.temperature:.1f}°C")
    draw_gauge(screen, font, x, y + 4 * step, "Humidity", plant.humidity,
               _range_color(plant.humidity, C.HUMIDITY_OPTIMAL_RANGE, C.HUMIDITY_ACCEPTABLE_RANGE, good="cyan"),
               f"{plant.humidity:.0f}%")

    if plant.root_development >= C.GROWTH_GOOD_THRESHOLD:
        growth_color = C.ANSI_COLORS["green"]
    elif plant.root_development >= C.GROWTH_FAIR_THRESHOLD:
        growth_color = C.ANSI_COLORS["yellow"]
    else:
        growth_color = C.ANSI_COLORS["red"]
    draw_gauge(screen, font, x, y + 5 * step, "Root/Canopy", (plant.root_development + plant.canopy_density) / 2.0,
               growth_color, f"R{plant.root_development:.0f}/C{plant.canopy_density:.0f}")

    health_percent, health_color, health_label = C.HEALTH_GAUGE[plant.health]
    draw_gauge(screen, font, x, y + 6 * step, "Health", health_percent, C.ANSI_COLORS[health_color], health_label)

def draw_strain_panel(screen, font, room, x, y):
    plant = room.current_plant
    genetics = plant.genetics
    strain = genetics.strain_info
    lines = [("[ Strain Info ]", C.COLOR_HEADER), (plant.strain_name, C.ANSI_COLORS["light_magenta"])]
    if strain:
        lines += [
            (f"Type: {strain.strain_type}", C.COLOR_WHITE),
            (strain.genetics, C.COLOR_GRAY),
            (f"Difficulty: {strain.difficulty}", C.COLOR_WHITE),
            (f"Yield: {strain.yield_potential}", C.COLOR_WHITE),
            (f"Flowering: {strain.flowering_time} days", C.COLOR_WHITE),
        ]
        if strain.effects:
            lines.append((f"Effects: {', '.join(strain.effects[:3])}", C.COLOR_GRAY))
    lines += [
        (f"THC: {genetics.thc_percent:.1f}%", C.COLOR_WHITE),
        (f"CBD: {genetics.cbd_percent:.1f}%", C.COLOR_WHITE),
        (f"Light: {C.LIGHT_CYCLE_DISPLAY_NAMES[plant.light_cycle]}", C.COLOR_WHITE),
        (f"CO2: {plant.co2_level:.0f}%  Light: {plant.light_absorption:.0f}%", C.COLOR_WHITE),
        (f"Stress events: {len(plant.care_history.stress_events)}", C.COLOR_WHITE),
        (f"Harvests: {room.total_harvests}", C.COLOR_WHITE),
    ]
    for text, color in lines:
        y += draw_text(screen, font, text, (x, y), color)

def draw_controls(screen, font, room):
    ready = room.current_plant.stage == C.STAGE_READY_TO_HARVEST
    auto = " | AUTO on" if room.auto_harvest else ""
    harvest = "** [h] HARVEST **" if ready else "[h] Harvest (ready)"
    text = f"{harvest}  [a] Auto{auto}  [v] Mode  [s] Stats  [space] Pause  [0,3-5/keypad] Speed  [q] Quit"
    color = C.ANSI_COLORS["yellow"] if ready else C.COLOR_GRAY
    draw_text(screen, font, text, (C.UI_MARGIN, C.SCREEN_HEIGHT - C.UI_HEADER_HEIGHT), color)

def draw_growing_room(screen, font, room, time_manager):
    """The main screen: header, plant, gauges, strain panel and controls."""
    screen.fill(C.COLOR_BACKGROUND)
    if room.current_plant is None:
        draw_text(screen, font, "No plant growing.", (C.UI_MARGIN, C.UI_HEADER_HEIGHT))
        return
    draw_header(screen, font, room, time_manager)
    plant_top = C.UI_HEADER_HEIGHT + C.UI_MARGIN
    draw_plant(screen, font, room, (C.UI_MARGIN, plant_top))
    gauges_top = plant_top + font.size("M")[1] * C.GRID_HEIGHT + C.UI_MARGIN
    draw_gauges(screen, font, room, gauges_top)
    draw_strain_panel(screen, font, room, C.UI_SIDEBAR_X, plant_top)
    draw_controls(screen, font, room)

def draw_stats_screen(screen, font, room):
    """Aggregate harvest statistics and the most recent harvests."""
    screen.fill(C.COLOR_BACKGROUND)
    x, y = C.UI_MARGIN, C.UI_MARGIN
    y += draw_text(screen, font, "GROW ROOM - Statistics", (x, y), C.ANSI_COLORS["cyan"]) * 2
    y += draw_text(screen, font, f"Total Harvests: {room.total_harvests}", (x, y))

    summary = harvest_summary(room.harvest_history)
    if summary is None:
        y += draw_text(screen, font, "No harvests yet. Let the plant grow!", (x, y), C.COLOR_GRAY)
    else:
        y += draw_text(screen, font, f"Average Yield: {summary['average_yield']:.1f}g | "
                                     f"Quality: {summary['average_quality']:.0f}%", (x, y), C.ANSI_COLORS["green"])
        y += draw_text(screen, font, f"Average THC: {summary['average_thc']:.1f}% | "
                                     f"CBD: {summary['average_cbd']:.2f}%", (x, y))
        y += draw_text(screen, font, f"Total Yield: {summary['total_yield']:.1f}g | "
                                     f"Best: {summary['best_yield']:.1f}g", (x, y))
        y += draw_text(screen, font, "Recent Harvests:", (x, y + C.UI_MARGIN), C.COLOR_HEADER) + C.UI_MARGIN
        for result in reversed(room.harvest_history[-C.UI_RECENT_HARVEST_COUNT:]):
            y += draw_text(screen, font, f"  {result.strain_name} - day {result.harvest_day}: "
                                         f"{result.weight_grams:.1f}g, {result.quality_score:.0f}% quality", (x, y))

    draw_text(screen, font, "[1] Growing Room  [q] Quit", (x, C.SCREEN_HEIGHT - C.UI_HEADER_HEIGHT), C.COLOR_GRAY)
