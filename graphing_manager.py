# graphing_manager.py

import matplotlib.pyplot as plt
import logger as log
import constants as C

class GraphingManager:
    """
    Collects one sample per simulated day for the live plant
    and generates plots after the simulation ends.
    """
    def __init__(self):
        self.data = {
            'day': [],
            'water': [],
            'nutrients': [],
            'canopy': [],
            'light': [],
            'roots': [],
            'temperature': [],
            'humidity': [],
            'health': []
        }
        self.focused_plant_id = None
        self.focused_strain = None
        log.log("GraphingManager initialized.")

    def set_focused_plant(self, plant):
        """
        Starts tracking a plant. Switching to a new plant clears the old data.
        """
        if self.focused_plant_id != plant.id:
            self.focused_plant_id = plant.id
            self.focused_strain = plant.strain_name
            for key in self.data:
                self.data[key].clear()
            log.log(f"[GraphingManager] Now tracking Plant ID: {plant.id[:8]} ({plant.strain_name}). All data series cleared.")

    def record(self, plant):
        """
        Samples the plant once per simulated day. Returns True if a sample was added.
        """
        self.set_focused_plant(plant)
        if self.data['day'] and self.data['day'][-1] >= plant.days_alive:
            return False
        self.data['day'].append(plant.days_alive)
        self.data['water'].append(plant.water_level)
        self.data['nutrients'].append(plant.nutrient_level)
        self.data['canopy'].append(plant.canopy_density)
        self.data['light'].append(plant.light_absorption)
        self.data['roots'].append(plant.root_development)
        self.data['temperature'].append(plant.temperature)
        self.data['humidity'].append(plant.humidity)
        self.data['health'].append(C.HEALTH_PERCENT[plant.health])
        return True

    def has_data(self):
        """
        Checks if any data has been collected.
        """
        return len(self.data['day']) > 0

    def _save(self, fig, file_path, label):
        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] {label} graph saved to {file_path}")
            return file_path
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save {label.lower()} graph. Reason: {e}")
            return None

    def generate_and_save_resources_graph(self, file_path=C.GRAPH_RESOURCES_FILE):
        """
        Water, nutrients and health over the plant's life, with the optimal bands shaded.
        """
        log.log(f"[GraphingManager] Generating resources plot with {len(self.data['day'])} data points...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)

        ax.plot(self.data['day'], self.data['water'], label='Water (%)', color='tab:blue')
        ax.plot(self.data['day'], self.data['nutrients'], label='Nutrients (%)', color='tab:green')
        ax.step(self.data['day'], self.data['health'], where='post', label='Health (%)', color='tab:red')

        ax.axhspan(*C.WATER_OPTIMAL_RANGE, color='tab:blue', alpha=0.08, label='Optimal Water')
        ax.axhspan(*C.NUTRIENT_OPTIMAL_RANGE, color='tab:green', alpha=0.08, label='Optimal Nutrients')

        ax.set_title(f'{self.focused_strain}: Resources Over Time')
        ax.set_xlabel('Time (Days Alive)')
        ax.set_ylabel('Level (%)')
        ax.set_ylim(0, C.RESOURCE_MAX + 5)
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        return self._save(fig, file_path, "Resources")

    def generate_and_save_environment_graph(self, file_path=C.GRAPH_ENVIRONMENT_FILE):
        """
        Canopy, light, roots and humidity on the left axis, temperature on the right.
        """
        log.log("[GraphingManager] Generating environment plot...")

        fig, ax1 = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax1.set_title(f'{self.focused_strain}: Environment Over Time')
        ax1.set_xlabel('Time (Days Alive)')
        ax1.grid(True, which='both', linestyle='--', linewidth=0.5)

        # --- Percentages on the left axis ---
        ax1.set_ylabel('Level (%)')
        line1, = ax1.plot(self.data['day'], self.data['canopy'], color='tab:green', label='Canopy (%)')
        line2, = ax1.plot(self.data['day'], self.data['light'], color='tab:orange', label='Light Absorption (%)')
        line3, = ax1.plot(self.data['day'], self.data['roots'], color='tab:brown', label='Roots (%)')
        line4, = ax1.plot(self.data['day'], self.data['humidity'], color='tab:cyan', label='Humidity (%)')

        # --- Temperature on the right axis ---
        ax2 = ax1.twinx()
        ax2.set_ylabel('Temperature (°C)', color='tab:red')
        line5, = ax2.plot(self.data['day'], self.data['temperature'], color='tab:red', linestyle='--', label='Temperature (°C)')
        ax2.tick_params(axis='y', labelcolor='tab:red')

        ax1.legend(handles=[line1, line2, line3, line4, line5], loc='upper left')

        fig.tight_layout()
        return self._save(fig, file_path, "Environment")

    def generate_and_save_graphs(self, show=False):
        """
        Generates and saves all graphs if data exists. Returns the saved file paths.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return []

        saved = [self.generate_and_save_resources_graph(), self.generate_and_save_environment_graph()]
        if show:
            plt.show()
        plt.close("all")
        return [path for path in saved if path]
