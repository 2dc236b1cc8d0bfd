"""Constants shared by the URL recipe import stages."""

JSON_LD_SCRIPT_TYPE = "application/ld+json"
GRAPH_KEY = "@graph"
TYPE_KEY = "@type"
RECIPE_TYPE = "Recipe"

YIELD_SEPARATOR = " or "

# Keys are matched case-insensitively.
UNIT_MAP = {
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "tablespoon": "Tbsp",
    "tablespoons": "Tbsp",
    "tbsp": "Tbsp",
    "cup": "cup",
    "cups": "cup",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "gram": "g",
    "grams": "g",
    "g": "g",
    "milliliter": "mL",
    "milliliters": "mL",
    "ml": "mL",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "liter": "L",
    "liters": "L",
    "l": "L",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
}
