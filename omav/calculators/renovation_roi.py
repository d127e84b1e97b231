"""
Renovation ROI calculator — value added by a set of renovation projects.

Value added = cost × project ROI × location factor × property-type factor.
"""

from .base import BaseCalculator, InvalidChoiceError, InvalidNumberError

# id -> (name, default cost, default ROI)
RENOVATION_PROJECTS = {
    "kitchen": ("Kitchen Remodel", 25000, 0.75),
    "bathroom": ("Bathroom Remodel", 10000, 0.70),
    "roofing": ("Roof Replacement", 8000, 0.68),
    "windows": ("Window Replacement", 10000, 0.72),
    "siding": ("Exterior Siding", 15000, 0.80),
    "flooring": ("Flooring Upgrade", 6000, 0.65),
    "painting": ("Interior Painting", 4000, 0.60),
    "landscaping": ("Landscaping", 5000, 0.83),
    "deck": ("Deck Addition", 12000, 0.76),
    "hvac": ("HVAC Upgrade", 8000, 0.85),
}
CUSTOM_PROJECT_ROI = 0.6

LOCATION_FACTORS = {"urban": 1.2, "suburban": 1.0, "rural": 0.8}
PROPERTY_TYPE_FACTORS = {"residential": 1.0, "commercial": 1.1, "multifamily": 1.2}

ALTERNATIVES_SHOWN = 3


class RenovationRoiCalculator(BaseCalculator):

    key = "renovation_roi"
    title = "Renovation ROI Calculator"

    def _project_entry(self, project_id, name, cost, base_roi, factor):
        value_added = cost * base_roi * factor
        return {
            "id": project_id,
            "name": name,
            "cost": cost,
            "value_added": self.money(value_added),
            "roi": self.money(value_added / cost),
        }, value_added

    def _selected_ids(self, value) -> list:
        if value is None:
            return []
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        if not isinstance(value, (list, tuple)):
            raise InvalidChoiceError("selected_projects", "must be a list of project ids")
        ids = []
        for item in value:
            project_id = self.parse_choice(item, "selected_projects", RENOVATION_PROJECTS)
            if project_id not in ids:
                ids.append(project_id)
        return ids

    def _custom_projects(self, value) -> list:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise InvalidNumberError("custom_projects", "must be a list of {name, cost}")
        projects = []
        for index, item in enumerate(value, 1):
            if not isinstance(item, dict):
                raise InvalidNumberError("custom_projects", "must be a list of {name, cost}")
            name = str(item.get("name") or "").strip()
            if not name:
                raise InvalidChoiceError("custom_projects", f"project {index} needs a name")
            cost = self.parse_positive(item.get("cost"), "custom_projects")
            projects.append((f"custom-{index}", name, cost))
        return projects

    def calculate(self, fields: dict) -> dict:
        property_type = self.parse_choice(fields.get("property_type"), "property_type",
                                          PROPERTY_TYPE_FACTORS)
        property_value = self.parse_number(fields.get("property_value"), "property_value",
                                           minimum=0)
        location = self.parse_choice(fields.get("property_location"), "property_location",
                                     LOCATION_FACTORS)
        budget = fields.get("renovation_budget")
        budget = None if self._is_missing(budget) else self.parse_number(
            budget, "renovation_budget", minimum=0)
        selected = self._selected_ids(fields.get("selected_projects"))
        custom = self._custom_projects(fields.get("custom_projects"))

        factor = LOCATION_FACTORS[location] * PROPERTY_TYPE_FACTORS[property_type]

        breakdown = []
        total_cost = 0.0
        total_value_added = 0.0
        for project_id in selected:
            name, cost, roi = RENOVATION_PROJECTS[project_id]
            entry, value_added = self._project_entry(project_id, name, cost, roi, factor)
            breakdown.append(entry)
            total_cost += cost
            total_value_added += value_added
        for project_id, name, cost in custom:
            entry, value_added = self._project_entry(project_id, name, cost,
                                                     CUSTOM_PROJECT_ROI, factor)
            breakdown.append(entry)
            total_cost += cost
            total_value_added += value_added

        breakdown.sort(key=lambda p: p["roi"], reverse=True)

        alternatives = [
            self._project_entry(project_id, name, cost, roi, factor)[0]
            for project_id, (name, cost, roi) in RENOVATION_PROJECTS.items()
            if project_id not in selected
        ]
        alternatives.sort(key=lambda p: p["roi"], reverse=True)

        net_gain = total_value_added - total_cost
        overall_roi = net_gain / total_cost if total_cost > 0 else 0

        return {
            "current_property_value": property_value,
            "total_renovation_cost": self.money(total_cost),
            "estimated_value_after_renovation": self.money(property_value + total_value_added),
            "net_value_gain": self.money(net_gain),
            "overall_roi": self.round_half_up(overall_roi * 100, 1),
            "breakdown_by_project": breakdown,
            "recommended_alternatives": [
                {k: alt[k] for k in ("name", "cost", "value_added", "roi")}
                for alt in alternatives[:ALTERNATIVES_SHOWN]
            ],
            "over_budget": budget is not None and total_cost > budget,
        }
