"""
Electrical load calculator — connected load, demand, current, main switch sizing.

Connected load is the sum of watts × quantity over the load items; the demand
factor steps down once the connected load passes a per-property threshold.
Current assumes 230 V single phase / 400 V three phase at 0.8 power factor.
"""

import math

from .base import BaseCalculator, InvalidNumberError

PROPERTY_TYPES = ("residential", "commercial", "industrial")
PHASES = ("single", "three")

# property type -> (threshold W, factor at or below, factor above)
DEMAND_FACTORS = {
    "residential": (10000, 0.7, 0.6),
    "commercial": (25000, 0.65, 0.55),
    "industrial": (50000, 0.75, 0.65),
}

SINGLE_PHASE_VOLTS = 230
THREE_PHASE_VOLTS = 400
POWER_FACTOR = 0.8
SAFETY_MARGIN = 1.25

STANDARD_SWITCH_SIZES = [16, 25, 32, 40, 50, 63, 80, 100, 125, 160, 200, 250, 400, 630, 800, 1000]
CUSTOM_SWITCH = "1000+ Amps (Custom Solution Required)"

PEAK_SUN_HOURS = 4
RATE_PER_UNIT = 8  # per kWh

DEFAULT_LOAD_ITEMS = {
    "residential": [
        ("LED Lights", 10, 12, 6),
        ("Ceiling Fan", 75, 4, 10),
        ("Refrigerator", 700, 1, 24),
        ("Air Conditioner (1 ton)", 1200, 2, 8),
        ("Television (LED)", 100, 1, 6),
        ("Washing Machine", 500, 1, 1),
        ("Water Heater", 2000, 1, 1),
        ("Microwave Oven", 1200, 1, 0.5),
        ("Water Pump", 750, 1, 2),
    ],
    "commercial": [
        ("LED Lights", 10, 30, 10),
        ("Ceiling Fan", 75, 10, 10),
        ("Air Conditioner (2 ton)", 2400, 4, 10),
        ("Desktop Computer", 200, 8, 8),
        ("Server & Networking", 500, 1, 24),
        ("Printer/Copier", 1000, 2, 2),
        ("Water Dispenser", 100, 2, 10),
        ("Commercial Refrigerator", 1200, 1, 24),
        ("Elevator", 5000, 1, 4),
    ],
    "industrial": [
        ("Industrial Lighting", 400, 20, 12),
        ("HVAC System", 10000, 1, 10),
        ("Production Machines", 5000, 4, 8),
        ("Conveyor Belt", 2000, 2, 8),
        ("Air Compressor", 3000, 1, 6),
        ("Water Pump", 1500, 2, 4),
        ("Welding Machine", 7000, 1, 3),
        ("Office Equipment", 3000, 1, 8),
        ("Security System", 500, 1, 24),
    ],
}


def default_load_items(property_type: str) -> list:
    """The starting appliance list for a property type."""
    return [
        {"name": name, "watts": watts, "quantity": quantity, "hours_per_day": hours}
        for name, watts, quantity, hours in DEFAULT_LOAD_ITEMS[property_type]
    ]


def recommend_main_switch(current: float):
    """Smallest standard size at or above current × 1.25, or None if it exceeds the ladder."""
    required = math.ceil(current * SAFETY_MARGIN)
    for size in STANDARD_SWITCH_SIZES:
        if size >= required:
            return size
    return None


class ElectricalCalculator(BaseCalculator):

    key = "electrical"
    title = "Electrical Load Calculator"

    def _parse_load_items(self, raw_items) -> list:
        if not isinstance(raw_items, list):
            raise InvalidNumberError("load_items", "must be a list of load items")
        items = []
        for i, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                raise InvalidNumberError(f"load_items[{i}]", "must be an object")
            prefix = f"load_items[{i}]"
            items.append({
                "name": str(raw.get("name") or f"Load {i + 1}"),
                "watts": self.parse_number(raw.get("watts"), f"{prefix}.watts", minimum=0),
                "quantity": self.parse_int(raw.get("quantity"), f"{prefix}.quantity",
                                           default=1, minimum=0),
                "hours_per_day": self.parse_number(
                    raw.get("hours_per_day", raw.get("hoursPerDay")),
                    f"{prefix}.hours_per_day", default=1, minimum=0),
            })
        return items

    def calculate(self, fields: dict) -> dict:
        property_type = self.parse_choice(fields.get("property_type"), "property_type",
                                          PROPERTY_TYPES, default="residential")
        phase = self.parse_choice(fields.get("phase"), "phase", PHASES, default="single")

        raw_items = fields.get("load_items")
        if raw_items is None:
            load_items = default_load_items(property_type)
        else:
            load_items = self._parse_load_items(raw_items)

        connected_load = 0.0
        daily_units = 0.0
        for item in load_items:
            item_watts = item["watts"] * item["quantity"]
            connected_load += item_watts
            daily_units += item_watts * item["hours_per_day"] / 1000

        threshold, low_factor, high_factor = DEMAND_FACTORS[property_type]
        demand_factor = low_factor if connected_load <= threshold else high_factor
        max_demand = connected_load * demand_factor

        if phase == "single":
            current = max_demand / (SINGLE_PHASE_VOLTS * POWER_FACTOR)
        else:
            current = max_demand / (math.sqrt(3) * THREE_PHASE_VOLTS * POWER_FACTOR)

        monthly_units = daily_units * 30
        switch_amps = recommend_main_switch(current)

        return {
            "property_type": property_type,
            "phase": phase,
            "connected_load": connected_load,
            "demand_factor": demand_factor,
            "max_demand": max_demand,
            "current_per_phase": current,
            "daily_units": daily_units,
            "total_units": monthly_units,
            "main_switch_amps": switch_amps,
            "recommended_main_switch": f"{switch_amps} Amps" if switch_amps else CUSTOM_SWITCH,
            "recommended_solar_size": (monthly_units / 30) / PEAK_SUN_HOURS,
            "estimated_monthly_cost": monthly_units * RATE_PER_UNIT,
            "load_items": load_items,
        }
