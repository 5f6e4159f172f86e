"""Constants for the Menu Planner package."""

# Courses, in display order
COURSE_APPETIZER = "appetizer"
COURSE_MAIN = "main"
COURSE_DESSERT = "dessert"

COURSES = (
    COURSE_APPETIZER,
    COURSE_MAIN,
    COURSE_DESSERT,
)

# Default values
DEFAULT_BASE_SERVINGS = 1
MIN_BASE_SERVINGS = 1
DEFAULT_SCALE = 1.0
QUANTITY_DECIMALS = 2

# Form / record keys
DATA_ID = "id"
DATA_APPETIZER = COURSE_APPETIZER
DATA_MAIN = COURSE_MAIN
DATA_DESSERT = COURSE_DESSERT
DATA_APPETIZER_INGREDIENTS = "appetizer_ingredients"
DATA_MAIN_INGREDIENTS = "main_ingredients"
DATA_DESSERT_INGREDIENTS = "dessert_ingredients"
DATA_BASE_SERVINGS = "base_servings"
DATA_CREATED_AT = "created_at"

INGREDIENTS_SUFFIX = "_ingredients"

# Stored value of an empty ingredient column
EMPTY_INGREDIENTS = "[]"

# User-facing error messages
ERROR_FIELDS_REQUIRED = "All fields are required."
ERROR_INGREDIENTS_REQUIRED = "Ingredients are required."
ERROR_INVALID_INGREDIENTS = "Stored ingredients could not be read."


def ingredients_key(course: str) -> str:
    """Return the form/record key holding a course's ingredient list."""
    return f"{course}{INGREDIENTS_SUFFIX}"
