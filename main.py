#main.py

import argparse
import cProfile
import pstats

import pygame

import constants as C
import logger
import storage
from genes import load_strains
from graphing_manager import GraphingManager
from grow_room import GrowRoom
from time_manager import TimeManager
from ui import draw_growing_room, draw_stats_screen

SCREEN_KEYS = {
    pygame.K_1: C.SCREEN_GROWING_ROOM,
    pygame.K_2: C.SCREEN_STATS,
    pygame.K_s: C.SCREEN_STATS,
}

# 1 and 2 on the top row switch screens, so those two speeds are on the keypad.
SPEED_KEYS = {
    pygame.K_0: 0, pygame.K_3: 3, pygame.K_4: 4, pygame.K_5: 5,
    pygame.K_KP0: 0, pygame.K_KP1: 1, pygame.K_KP2: 2,
    pygame.K_KP3: 3, pygame.K_KP4: 4, pygame.K_KP5: 5,
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Watch a procedurally generated plant grow as animated ASCII art.")
    parser.add_argument("--save", metavar="PATH", help="save file location (default: $GROWROOM_SAVE_PATH or ~/.local/share/growroom/save.json)")
    parser.add_argument("--no-save", action="store_true", help="do not load or write a save file")
    parser.add_argument("--basic-colors", action="store_true", help="use the 16 color palette")
    parser.add_argument("--profile", action="store_true", help="print a profiler report on exit")
    parser.add_argument("--graphs", action="store_true", help="plot the live plant's history on exit")
    return parser.parse_args(argv)

def handle_key(key, room, time_manager):
    """Maps a key press to a grow room action."""
    if key == pygame.K_q:
        room.quit()
    elif key in SCREEN_KEYS:
        room.set_screen(SCREEN_KEYS[key])
    elif key == pygame.K_a:
        room.toggle_auto_harvest()
    elif key == pygame.K_v:
        room.cycle_visual_mode()
    elif key == pygame.K_h:
        room.harvest()
    elif key == pygame.K_SPACE:
        time_manager.toggle_pause()
    elif key in SPEED_KEYS:
        time_manager.set_speed(SPEED_KEYS[key])

def initialize_simulation():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Grow Room")
    font = pygame.font.SysFont(C.UI_FONT_NAME, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def run_simulation(args):
    save_path = None if args.no_save else storage.get_save_path(args.save)
    supports_rgb = not args.basic_colors
    strains = load_strains()
    if save_path:
        room = storage.load(save_path, supports_rgb=supports_rgb, strains=strains)
    else:
        room = GrowRoom(supports_rgb=supports_rgb, strains=strains)

    screen, font = initialize_simulation()
    clock = pygame.time.Clock()
    time_manager = TimeManager()
    logger.set_time_manager(time_manager)
    graphs = GraphingManager() if args.graphs else None
    room.prefetch_structure()

    logger.log("Starting main simulation loop...")
    logger.log("CONTROLS: [Q] Quit, [1] Room, [S] Stats, [A] Auto-harvest, [V] Visual mode, [H] Harvest, [SPACE] Pause, [0,3-5 or keypad 0-5] Speed.")

    while room.running:
        # --- Get Real Time ---
        # Capped to prevent a "spiral of death" if a frame takes too long.
        real_delta_seconds = min(clock.tick(C.CLOCK_TICK_RATE) / C.MILLISECONDS_PER_SECOND, C.MAX_REAL_DELTA_SECONDS)

        # --- Event Handling ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                room.quit()
            if event.type == pygame.KEYDOWN:
                handle_key(event.key, room, time_manager)

        # --- Simulation Logic ---
        previous_plant = room.current_plant
        scaled_delta_time = time_manager.get_scaled_delta_time(real_delta_seconds)
        time_manager.update_total_time(scaled_delta_time)
        room.update_time(scaled_delta_time)
        if room.current_plant is not previous_plant:
            room.prefetch_structure()
        if graphs and room.current_plant is not None:
            graphs.record(room.current_plant)
        if save_path:
            storage.save(room, save_path)

        # --- Drawing ---
        if room.current_screen == C.SCREEN_STATS:
            draw_stats_screen(screen, font, room)
        else:
            draw_growing_room(screen, font, room, time_manager)
        pygame.display.flip()

    logger.log("Main simulation loop ended.")
    if graphs:
        graphs.generate_and_save_graphs()

def shutdown_simulation():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Simulation ended cleanly.")

def main(args=None):
    if args is None:
        args = parse_args()
    logger.log("--- Simulation Start ---")
    run_simulation(args)
    shutdown_simulation()
    logger.log("--- Simulation Exit ---")

if __name__ == '__main__':
    cli_args = parse_args()
    if not cli_args.profile:
        main(cli_args)
    else:
        profiler = cProfile.Profile()
        try:
            profiler.runcall(main, cli_args)
        except SystemExit:
            # This allows the simulation to exit cleanly without a profiler error
            pass
        finally:
            print("\n\n--- PROFILER REPORT ---")
            stats = pstats.Stats(profiler)
            # Sort the stats by the cumulative time spent in each function
            stats.sort_stats(pstats.SortKey.CUMULATIVE)
            stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
